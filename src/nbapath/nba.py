"""
NBA* bidirectional heuristic search.

Two A* frontiers grow from the source and from the target. A node leaves the
shared "middle" set the first time either frontier pops it; after that neither
direction relaxes it again. A popped node is only expanded while it can still
lead to a path shorter than the best meeting cost found so far (``l_min``).

Reference: W. Pijls, H. Post, "Yet another bidirectional algorithm for
shortest paths" (2009).
"""

import logging
from dataclasses import dataclass, field
from typing import Hashable, List, Optional

from nbapath.errors import ConfigError, SearchLimitExceeded, UnknownSourceNode, UnknownTargetNode
from nbapath.graph.base import GraphAdapter, Link, Node
from nbapath.heap import NodeHeap
from nbapath.heuristics import Distance, Heuristic, link_weight, zero
from nbapath.path import reconstruct_path
from nbapath.state import INF, SearchStateRegistry

logger = logging.getLogger(__name__)

TERMINATION_RULES = ("either", "bound")


@dataclass
class SearchResult:
    path: List[Node] = field(default_factory=list)
    cost: float = INF
    expanded: int = 0
    pruned: int = 0
    touched: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def node_ids(self) -> List[Hashable]:
        return [node.id for node in self.path]


class SearchQuery:
    """
    State of one ``find`` call: the registry, both frontiers and the best meeting.

    Never reused: ``NBA.find`` creates a fresh query for every call.
    """

    def __init__(
        self,
        graph: GraphAdapter,
        source: Node,
        target: Node,
        heuristic: Heuristic,
        distance: Distance,
        oriented: bool,
        termination: str = "either",
        max_expansions: Optional[int] = None,
    ):
        self.graph = graph
        self.source = source
        self.target = target
        self.heuristic = heuristic
        self.distance = distance
        self.oriented = oriented
        self.stop_on_bound = termination == "bound"
        self.max_expansions = max_expansions

        self.registry = SearchStateRegistry()
        states = self.registry.states

        def set_forward_slot(idx: int, slot: int):
            states[idx].slot_forward = slot

        def set_backward_slot(idx: int, slot: int):
            states[idx].slot_backward = slot

        self.open_forward = NodeHeap(key=lambda idx: states[idx].f1, set_slot=set_forward_slot)
        self.open_backward = NodeHeap(key=lambda idx: states[idx].f2, set_slot=set_backward_slot)

        self.l_min = INF
        self.best_meeting: Optional[int] = None
        self.f1_min = INF
        self.f2_min = INF

        # state currently being expanded
        self.current = -1

        self.expanded = 0
        self.pruned = 0

    def run(self) -> SearchResult:
        registry, states = self.registry, self.registry.states

        start = registry.get_or_create(self.source)
        start_state = states[start]
        start_state.g1 = 0.0
        start_state.f1 = self.heuristic(self.source, self.target)
        self.open_forward.push(start)

        end = registry.get_or_create(self.target)
        end_state = states[end]
        end_state.g2 = 0.0
        end_state.f2 = self.heuristic(self.target, self.source)
        self.open_backward.push(end)

        self.f1_min = start_state.f1
        self.f2_min = end_state.f2

        # source == target: the shared seed already is a zero-cost meeting
        self._check_meeting(end)

        forward_done = backward_done = False
        while not (forward_done or backward_done):
            if self.stop_on_bound and self.f1_min >= self.l_min and self.f2_min >= self.l_min:
                break

            if len(self.open_forward) < len(self.open_backward):
                forward_done = not self._forward_step()
            else:
                backward_done = not self._backward_step()

        path = reconstruct_path(registry, self.best_meeting)
        return SearchResult(
            path=path,
            cost=self.l_min if path else INF,
            expanded=self.expanded,
            pruned=self.pruned,
            touched=len(registry),
        )

    def _close(self, state) -> bool:
        """Remove a popped state from the middle set; False if it already left."""
        if not state.in_middle:
            return False
        state.in_middle = False

        self.expanded += 1
        if self.max_expansions is not None and self.expanded > self.max_expansions:
            raise SearchLimitExceeded(self.max_expansions)
        return True

    def _forward_step(self) -> bool:
        """Expand the forward frontier once. Returns False when it is exhausted."""
        states = self.registry.states
        self.current = self.open_forward.pop()
        state = states[self.current]

        if self._close(state):
            if (state.f1 < self.l_min
                    and state.g1 + self.f2_min - self.heuristic(self.source, state.node) < self.l_min):
                self.graph.for_each_linked_node(state.node.id, self._visit_forward, self.oriented)
            else:
                self.pruned += 1

        if self.open_forward:
            self.f1_min = states[self.open_forward.peek()].f1
            return True
        return False

    def _backward_step(self) -> bool:
        """Expand the backward frontier once. Returns False when it is exhausted."""
        states = self.registry.states
        self.current = self.open_backward.pop()
        state = states[self.current]

        if self._close(state):
            if (state.f2 < self.l_min
                    and state.g2 + self.f1_min - self.heuristic(state.node, self.target) < self.l_min):
                self.graph.for_each_linked_node(state.node.id, self._visit_backward, self.oriented, reverse=True)
            else:
                self.pruned += 1

        if self.open_backward:
            self.f2_min = states[self.open_backward.peek()].f2
            return True
        return False

    def _visit_forward(self, other: Node, link: Link) -> None:
        states = self.registry.states
        idx = self.registry.get_or_create(other)
        other_state = states[idx]
        if not other_state.in_middle:
            return

        current = states[self.current]
        tentative = current.g1 + self.distance(current.node, other_state.node, link)

        if tentative < other_state.g1:
            other_state.g1 = tentative
            other_state.f1 = tentative + self.heuristic(other_state.node, self.target)
            other_state.parent_forward = self.current
            if other_state.slot_forward < 0:
                self.open_forward.push(idx)
            else:
                self.open_forward.update_item(other_state.slot_forward)

        self._check_meeting(idx)

    def _visit_backward(self, other: Node, link: Link) -> None:
        states = self.registry.states
        idx = self.registry.get_or_create(other)
        other_state = states[idx]
        if not other_state.in_middle:
            return

        current = states[self.current]
        # cost in travel direction: other -> current
        tentative = current.g2 + self.distance(other_state.node, current.node, link)

        if tentative < other_state.g2:
            other_state.g2 = tentative
            other_state.f2 = tentative + self.heuristic(self.source, other_state.node)
            other_state.parent_backward = self.current
            if other_state.slot_backward < 0:
                self.open_backward.push(idx)
            else:
                self.open_backward.update_item(other_state.slot_backward)

        self._check_meeting(idx)

    def _check_meeting(self, idx: int) -> None:
        state = self.registry.states[idx]
        candidate = state.g1 + state.g2
        if candidate < self.l_min:
            self.l_min = candidate
            self.best_meeting = idx


class NBA:
    """
    Shortest path finder using NBA*.

    Args:
        graph: Any object implementing the GraphAdapter contract
        heuristic: ``h(a, b)`` lower bound on the a -> b cost (default: zero)
        distance: ``d(a, b, link)`` edge traversal cost (default: link weight)
        oriented: Respect link direction
        termination: ``"either"`` stops when one frontier is exhausted,
            ``"bound"`` also stops once both frontier minima reach the best cost
        max_expansions: Optional cap on closed nodes per query
    """

    def __init__(
        self,
        graph: GraphAdapter,
        heuristic: Optional[Heuristic] = None,
        distance: Optional[Distance] = None,
        oriented: bool = False,
        termination: str = "either",
        max_expansions: Optional[int] = None,
    ):
        if termination not in TERMINATION_RULES:
            raise ConfigError(f"Unknown termination rule '{termination}' (choose from {', '.join(TERMINATION_RULES)})")
        if max_expansions is not None and max_expansions < 0:
            raise ConfigError("max_expansions must be >= 0")

        self.graph = graph
        self.heuristic = heuristic or zero
        self.distance = distance or link_weight
        self.oriented = oriented
        self.termination = termination
        self.max_expansions = max_expansions

    def _resolve(self, from_id: Hashable, to_id: Hashable):
        source = self.graph.get_node(from_id)
        if source is None:
            raise UnknownSourceNode(from_id)
        target = self.graph.get_node(to_id)
        if target is None:
            raise UnknownTargetNode(to_id)
        return source, target

    def search(self, from_id: Hashable, to_id: Hashable) -> SearchResult:
        """Find a path and report its cost and search counters."""
        source, target = self._resolve(from_id, to_id)

        query = SearchQuery(
            self.graph, source, target,
            heuristic=self.heuristic,
            distance=self.distance,
            oriented=self.oriented,
            termination=self.termination,
            max_expansions=self.max_expansions,
        )
        result = query.run()

        logger.debug(
            f"NBA {from_id!r} -> {to_id!r}: cost={result.cost}, "
            f"expanded={result.expanded}, pruned={result.pruned}, touched={result.touched}"
        )
        return result

    def find(self, from_id: Hashable, to_id: Hashable) -> List[Node]:
        """
        Find a path between node ``from_id`` and ``to_id``.

        Returns:
            Nodes from ``from_id`` to ``to_id`` inclusive, or an empty list if
            no path exists
        """
        return self.search(from_id, to_id).path


def nba(graph: GraphAdapter, **options) -> NBA:
    """Create an NBA* path finder for ``graph``; see ``NBA`` for options."""
    return NBA(graph, **options)
