"""
Per-query bidirectional bookkeeping.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

from nbapath.graph.base import Node

INF = float('inf')


@dataclass
class SearchState:
    node: Node

    # best known cost from the source (1) / to the target (2)
    g1: float = INF
    g2: float = INF
    # g + heuristic towards the opposite endpoint
    f1: float = INF
    f2: float = INF

    # arena indices of the states that produced g1 / g2, -1 for none
    parent_forward: int = -1
    parent_backward: int = -1

    # cleared the first time the node is popped from either frontier
    in_middle: bool = True

    # heap positions, -1 while not queued
    slot_forward: int = -1
    slot_backward: int = -1


class SearchStateRegistry:
    """Arena of SearchState records addressed by a dense index assigned on first touch."""

    def __init__(self):
        self.states: List[SearchState] = []
        self.index: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self.states)

    def __getitem__(self, idx: int) -> SearchState:
        return self.states[idx]

    def __contains__(self, node_id: Hashable) -> bool:
        return node_id in self.index

    def get_or_create(self, node: Node) -> int:
        idx = self.index.get(node.id)
        if idx is None:
            idx = len(self.states)
            self.states.append(SearchState(node))
            self.index[node.id] = idx
        return idx

    def lookup(self, node_id: Hashable) -> Optional[SearchState]:
        idx = self.index.get(node_id)
        return None if idx is None else self.states[idx]
