"""
Adapter exposing a networkx graph through the GraphAdapter contract.
"""

from typing import Hashable, Optional

import networkx as nx

from nbapath.graph.base import Link, Node, Visitor


class NetworkXGraph:
    """
    Wrap a ``networkx.Graph`` or ``networkx.DiGraph``.

    Node attribute dicts become ``Node.data`` and edge attribute dicts become
    ``Link.data``; the link weight is read from ``weight`` (default 1.0).
    On an undirected graph ``oriented`` has no effect.
    """

    def __init__(self, graph: nx.Graph, weight: str = "weight"):
        if graph.is_multigraph():
            raise TypeError("multigraphs are not supported; collapse parallel edges first")
        self.graph = graph
        self.weight = weight

    def get_node(self, node_id: Hashable) -> Optional[Node]:
        if node_id not in self.graph:
            return None
        return Node(node_id, self.graph.nodes[node_id])

    def _link(self, u: Hashable, v: Hashable, attrs: dict) -> Link:
        return Link(u, v, float(attrs.get(self.weight, 1.0)), attrs)

    def for_each_linked_node(
        self,
        node_id: Hashable,
        visit: Visitor,
        oriented: bool = False,
        reverse: bool = False,
    ) -> None:
        g = self.graph
        if node_id not in g:
            return

        if not g.is_directed():
            for _, v, attrs in g.edges(node_id, data=True):
                visit(Node(v, g.nodes[v]), self._link(node_id, v, attrs))
            return

        if not oriented or not reverse:
            for _, v, attrs in g.out_edges(node_id, data=True):
                visit(Node(v, g.nodes[v]), self._link(node_id, v, attrs))
        if not oriented or reverse:
            for u, _, attrs in g.in_edges(node_id, data=True):
                visit(Node(u, g.nodes[u]), self._link(u, node_id, attrs))
