import random

import networkx as nx
import pytest

from nbapath.graph import Graph


@pytest.fixture
def cycle_graph():
    """Directed cycle A -> B -> C -> D -> A, unit weights."""
    g = Graph()
    for u, v in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")]:
        g.add_link(u, v, 1.0)
    return g


@pytest.fixture
def split_graph():
    """Isolated node X plus a separate component A - B."""
    g = Graph()
    g.add_node("X")
    g.add_link("A", "B", 1.0)
    return g


@pytest.fixture
def grid_graph():
    """
    10x10 grid with node positions; every edge costs at least its Euclidean
    length so the l2 heuristic stays consistent.
    """
    rng = random.Random(7)
    g = Graph()
    size = 10
    for i in range(size):
        for j in range(size):
            g.add_node((i, j), {"x": float(i), "y": float(j)})
    for i in range(size):
        for j in range(size):
            for di, dj in [(1, 0), (0, 1), (1, 1)]:
                ni, nj = i + di, j + dj
                if ni < size and nj < size:
                    length = (di * di + dj * dj) ** 0.5
                    g.add_link((i, j), (ni, nj), length * rng.uniform(1.0, 3.0))
    return g


def random_weighted_graph(seed: int, n: int = 30, m: int = 70, directed: bool = False):
    """Return (nx graph, nbapath Graph) with the same random integer weights."""
    rng = random.Random(seed)
    nx_graph = nx.gnm_random_graph(n, m, seed=seed, directed=directed)
    g = Graph()
    for node in nx_graph.nodes:
        g.add_node(node)
    for u, v in nx_graph.edges:
        w = rng.randint(1, 10)
        nx_graph[u][v]["weight"] = w
        g.add_link(u, v, w)
    return nx_graph, g


@pytest.fixture
def meeting_graph():
    """
    Undirected S - m - T (cost 2) with dead weight around it.

    S also links to a cheap dead end ``x`` (which hangs its own leaves) and to
    five leaves; T has five leaves and m has eight. Once the meeting at ``m``
    is known, every node still queued costs at least as much as the path.
    """
    g = Graph()
    g.add_link("S", "m", 1.0)
    g.add_link("m", "T", 1.0)
    g.add_link("S", "x", 0.5)
    for i in range(3):
        g.add_link("x", f"x{i}", 5.0)
    for i in range(5):
        g.add_link("S", f"s{i}", 5.0)
        g.add_link("T", f"t{i}", 5.0)
    for i in range(8):
        g.add_link("m", f"m{i}", 5.0)
    return g
