"""
Graph adapters for nbapath.
"""

from nbapath.graph.base import GraphAdapter, Link, Node
from nbapath.graph.memory import Graph
from nbapath.graph.networkx_adapter import NetworkXGraph
from nbapath.graph.duckdb_loader import load_graph

__all__ = [
    "GraphAdapter",
    "Link",
    "Node",
    "Graph",
    "NetworkXGraph",
    "load_graph",
]
