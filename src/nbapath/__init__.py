"""
nbapath - shortest paths on weighted graphs with bidirectional NBA* search.
"""

from nbapath.nba import NBA, SearchResult, nba
from nbapath.astar import astar
from nbapath.config import Config
from nbapath.errors import (
    ConfigError,
    NBAPathError,
    NodeNotFoundError,
    SearchLimitExceeded,
    UnknownSourceNode,
    UnknownTargetNode,
)
from nbapath.graph import Graph, Link, NetworkXGraph, Node, load_graph
from nbapath.router import Router

__version__ = "0.1.0"
__all__ = [
    "NBA",
    "SearchResult",
    "nba",
    "astar",
    "Config",
    "ConfigError",
    "NBAPathError",
    "NodeNotFoundError",
    "SearchLimitExceeded",
    "UnknownSourceNode",
    "UnknownTargetNode",
    "Graph",
    "Link",
    "NetworkXGraph",
    "Node",
    "load_graph",
    "Router",
]
