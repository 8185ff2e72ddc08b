"""
Exceptions raised by nbapath.
"""

from typing import Hashable


class NBAPathError(Exception):
    """Base class for all nbapath errors."""


class NodeNotFoundError(NBAPathError, ValueError):
    """A node id passed to a search does not exist in the graph."""

    role = "node"

    def __init__(self, node_id: Hashable):
        self.node_id = node_id
        super().__init__(f"{self.role} is not defined in this graph: {node_id!r}")


class UnknownSourceNode(NodeNotFoundError):
    role = "fromId"


class UnknownTargetNode(NodeNotFoundError):
    role = "toId"


class SearchLimitExceeded(NBAPathError, RuntimeError):
    """The search expanded more nodes than its configured budget."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"search exceeded max_expansions={limit}")


class ConfigError(NBAPathError, ValueError):
    """Invalid configuration value."""
