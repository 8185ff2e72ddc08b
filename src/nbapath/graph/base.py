"""
Graph adapter contract consumed by the search algorithms.
"""

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional, Protocol


@dataclass
class Node:
    id: Hashable
    data: Any = None


@dataclass
class Link:
    from_id: Hashable
    to_id: Hashable
    weight: float = 1.0
    data: Any = None


Visitor = Callable[[Node, Link], None]


class GraphAdapter(Protocol):
    """
    Minimal read interface the search engine needs from a graph.

    ``for_each_linked_node`` calls ``visit(other_node, link)`` once per edge
    incident to ``node_id``:

    - ``oriented=False``: every incident edge, whatever its direction
    - ``oriented=True``: only edges leaving ``node_id``
    - ``oriented=True, reverse=True``: only edges entering ``node_id``
    """

    def get_node(self, node_id: Hashable) -> Optional[Node]: ...

    def for_each_linked_node(
        self,
        node_id: Hashable,
        visit: Visitor,
        oriented: bool = False,
        reverse: bool = False,
    ) -> None: ...
