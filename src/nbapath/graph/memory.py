"""
In-memory adjacency graph.
"""

from typing import Any, Dict, Hashable, Iterator, List, Optional

from nbapath.graph.base import Link, Node, Visitor


class Graph:
    """
    Directed multigraph with separate out/in adjacency lists.

    Links are always stored with a direction; whether a search honours it is
    decided per call through the ``oriented`` flag.
    """

    def __init__(self):
        self._nodes: Dict[Hashable, Node] = {}
        self._out: Dict[Hashable, List[Link]] = {}
        self._in: Dict[Hashable, List[Link]] = {}
        self._link_count = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: Hashable) -> bool:
        return node_id in self._nodes

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def link_count(self) -> int:
        return self._link_count

    def add_node(self, node_id: Hashable, data: Any = None) -> Node:
        """Add a node, or replace the data of an existing one."""
        node = self._nodes.get(node_id)
        if node is None:
            node = Node(node_id, data)
            self._nodes[node_id] = node
            self._out[node_id] = []
            self._in[node_id] = []
        elif data is not None:
            node.data = data
        return node

    def add_link(self, from_id: Hashable, to_id: Hashable, weight: float = 1.0, data: Any = None) -> Link:
        """Add a link, creating missing endpoints."""
        if from_id not in self._nodes:
            self.add_node(from_id)
        if to_id not in self._nodes:
            self.add_node(to_id)

        link = Link(from_id, to_id, float(weight), data)
        self._out[from_id].append(link)
        self._in[to_id].append(link)
        self._link_count += 1
        return link

    def get_node(self, node_id: Hashable) -> Optional[Node]:
        return self._nodes.get(node_id)

    def get_links(self, node_id: Hashable) -> List[Link]:
        """All links touching ``node_id``, outgoing first."""
        if node_id not in self._nodes:
            return []
        return self._out[node_id] + self._in[node_id]

    def has_link(self, from_id: Hashable, to_id: Hashable) -> bool:
        return any(link.to_id == to_id for link in self._out.get(from_id, []))

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def links(self) -> Iterator[Link]:
        for out_links in self._out.values():
            yield from out_links

    def for_each_linked_node(
        self,
        node_id: Hashable,
        visit: Visitor,
        oriented: bool = False,
        reverse: bool = False,
    ) -> None:
        if node_id not in self._nodes:
            return

        nodes = self._nodes
        if oriented:
            if reverse:
                for link in self._in[node_id]:
                    visit(nodes[link.from_id], link)
            else:
                for link in self._out[node_id]:
                    visit(nodes[link.to_id], link)
            return

        for link in self._out[node_id]:
            visit(nodes[link.to_id], link)
        for link in self._in[node_id]:
            visit(nodes[link.from_id], link)
