"""
Path reconstruction from bidirectional parent links.
"""

from typing import List, Optional

from nbapath.graph.base import Node
from nbapath.state import SearchStateRegistry


def reconstruct_path(registry: SearchStateRegistry, meeting: Optional[int]) -> List[Node]:
    """
    Build the node sequence source -> meeting -> target.

    Returns an empty list when there is no meeting state.
    """
    if meeting is None:
        return []

    states = registry.states
    path = []
    curr = meeting
    while curr >= 0:
        path.append(states[curr].node)
        curr = states[curr].parent_forward
    path.reverse()

    curr = states[meeting].parent_backward
    while curr >= 0:
        path.append(states[curr].node)
        curr = states[curr].parent_backward
    return path

