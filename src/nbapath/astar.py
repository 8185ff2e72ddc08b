"""
Single-frontier A*, used as a baseline for the bidirectional search.

With the zero heuristic this is plain Dijkstra.
"""

import logging
from typing import Hashable, Optional

from nbapath.errors import UnknownSourceNode, UnknownTargetNode
from nbapath.graph.base import GraphAdapter, Link, Node
from nbapath.heap import NodeHeap
from nbapath.heuristics import Distance, Heuristic, link_weight, zero
from nbapath.nba import SearchResult
from nbapath.path import reconstruct_path
from nbapath.state import SearchStateRegistry

logger = logging.getLogger(__name__)


def astar(
    graph: GraphAdapter,
    from_id: Hashable,
    to_id: Hashable,
    heuristic: Optional[Heuristic] = None,
    distance: Optional[Distance] = None,
    oriented: bool = False,
) -> SearchResult:
    heuristic = heuristic or zero
    distance = distance or link_weight

    source = graph.get_node(from_id)
    if source is None:
        raise UnknownSourceNode(from_id)
    target = graph.get_node(to_id)
    if target is None:
        raise UnknownTargetNode(to_id)

    registry = SearchStateRegistry()
    states = registry.states

    def set_slot(idx: int, slot: int):
        states[idx].slot_forward = slot

    open_set = NodeHeap(key=lambda idx: states[idx].f1, set_slot=set_slot)

    start = registry.get_or_create(source)
    states[start].g1 = 0.0
    states[start].f1 = heuristic(source, target)
    open_set.push(start)

    expanded = 0
    goal = None
    while open_set:
        current = open_set.pop()
        state = states[current]
        if state.node.id == to_id:
            goal = current
            break

        # in_middle doubles as "not yet closed" here
        state.in_middle = False
        expanded += 1

        def visit(other: Node, link: Link):
            idx = registry.get_or_create(other)
            other_state = states[idx]
            if not other_state.in_middle:
                return

            tentative = state.g1 + distance(state.node, other_state.node, link)
            if tentative < other_state.g1:
                other_state.g1 = tentative
                other_state.f1 = tentative + heuristic(other_state.node, target)
                other_state.parent_forward = current
                if other_state.slot_forward < 0:
                    open_set.push(idx)
                else:
                    open_set.update_item(other_state.slot_forward)

        graph.for_each_linked_node(state.node.id, visit, oriented)

    if goal is None:
        logger.debug(f"A* {from_id!r} -> {to_id!r}: no path, expanded={expanded}")
        return SearchResult(expanded=expanded, touched=len(registry))

    logger.debug(f"A* {from_id!r} -> {to_id!r}: cost={states[goal].g1}, expanded={expanded}")
    return SearchResult(
        path=reconstruct_path(registry, goal),
        cost=states[goal].g1,
        expanded=expanded,
        touched=len(registry),
    )
