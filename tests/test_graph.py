import duckdb
import networkx as nx
import pytest

from nbapath.graph import Graph, NetworkXGraph, load_graph


def neighbours(graph, node_id, oriented=False, reverse=False):
    found = []
    graph.for_each_linked_node(node_id, lambda node, link: found.append(node.id), oriented, reverse)
    return sorted(found)


class TestGraph:

    @pytest.fixture
    def graph(self):
        g = Graph()
        g.add_node("a", {"x": 0, "y": 0})
        g.add_link("a", "b", 2.0)
        g.add_link("c", "a", 3.0)
        return g

    def test_add_link_creates_nodes(self, graph):
        assert len(graph) == 3
        assert graph.node_count == 3
        assert graph.link_count == 2
        assert graph.get_node("b").data is None
        assert graph.get_node("missing") is None
        assert "c" in graph

    def test_add_node_updates_data(self, graph):
        graph.add_node("a", {"x": 5, "y": 5})
        assert graph.get_node("a").data == {"x": 5, "y": 5}
        graph.add_node("a")
        assert graph.get_node("a").data == {"x": 5, "y": 5}

    def test_enumeration_modes(self, graph):
        assert neighbours(graph, "a") == ["b", "c"]
        assert neighbours(graph, "a", oriented=True) == ["b"]
        assert neighbours(graph, "a", oriented=True, reverse=True) == ["c"]
        assert neighbours(graph, "missing") == []

    def test_links(self, graph):
        assert graph.has_link("a", "b")
        assert not graph.has_link("b", "a")
        assert len(graph.get_links("a")) == 2
        assert graph.get_links("missing") == []
        assert sorted((l.from_id, l.to_id, l.weight) for l in graph.links()) == [
            ("a", "b", 2.0),
            ("c", "a", 3.0),
        ]
        assert sorted(n.id for n in graph.nodes()) == ["a", "b", "c"]


class TestNetworkXGraph:

    def test_directed_enumeration(self):
        g = nx.DiGraph()
        g.add_edge(1, 2, weight=4)
        g.add_edge(3, 1, weight=2)
        adapter = NetworkXGraph(g)

        assert neighbours(adapter, 1) == [2, 3]
        assert neighbours(adapter, 1, oriented=True) == [2]
        assert neighbours(adapter, 1, oriented=True, reverse=True) == [3]

        links = []
        adapter.for_each_linked_node(1, lambda node, link: links.append(link), oriented=True, reverse=True)
        assert (links[0].from_id, links[0].to_id, links[0].weight) == (3, 1, 2.0)

    def test_undirected_ignores_orientation(self):
        g = nx.Graph()
        g.add_edge("x", "y")
        g.nodes["x"]["lat"] = 1.0
        adapter = NetworkXGraph(g)

        assert neighbours(adapter, "x", oriented=True, reverse=True) == ["y"]
        assert adapter.get_node("x").data["lat"] == 1.0
        assert adapter.get_node("z") is None

    def test_multigraph_rejected(self):
        with pytest.raises(TypeError):
            NetworkXGraph(nx.MultiGraph())


class TestDuckDBLoader:

    @pytest.fixture
    def db_path(self, tmp_path):
        path = tmp_path / "network.duckdb"
        con = duckdb.connect(str(path))
        con.execute("CREATE TABLE edges (source INTEGER, target INTEGER, cost DOUBLE)")
        con.execute("INSERT INTO edges VALUES (1, 2, 1.5), (2, 3, 2.5), (3, 1, NULL)")
        con.execute("CREATE TABLE nodes (id INTEGER, lat DOUBLE, lng DOUBLE)")
        con.execute("INSERT INTO nodes VALUES (1, 49.0, -123.0), (2, 49.1, -123.0), (3, 49.2, -123.0), (4, 0.0, 0.0)")
        con.close()
        return path

    def test_load_edges(self, db_path):
        graph = load_graph(str(db_path))

        assert graph.node_count == 3
        assert graph.link_count == 3
        weights = {(l.from_id, l.to_id): l.weight for l in graph.links()}
        assert weights == {(1, 2): 1.5, (2, 3): 2.5, (3, 1): 1.0}

    def test_load_nodes_table(self, db_path):
        graph = load_graph(str(db_path), nodes_table="nodes")

        assert graph.node_count == 4
        assert graph.get_node(2).data == {"id": 2, "lat": 49.1, "lng": -123.0}

    def test_unit_weights_without_weight_column(self, db_path):
        graph = load_graph(str(db_path), weight_column=None)
        assert {l.weight for l in graph.links()} == {1.0}

    def test_existing_connection(self, db_path):
        con = duckdb.connect(str(db_path), read_only=True)
        try:
            graph = load_graph("", con=con)
            assert graph.link_count == 3
        finally:
            con.close()
