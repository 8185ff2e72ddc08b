"""
Indexed binary min-heap with decrease-key.

The heap stores opaque item handles (arena indices in the search engine).
Ordering comes from a ``key`` callable and every time an item lands in a new
array position the heap reports it through ``set_slot``, so the owner can
later call ``update_item`` with that slot instead of searching for the item.
"""

from typing import Callable, Hashable, List, Optional, Iterable


class NodeHeap:
    """
    Binary min-heap over mutable-priority items.

    Args:
        key: Returns the current priority of an item
        set_slot: Called as ``set_slot(item, position)`` whenever an item moves;
            position ``-1`` means the item left the heap
        items: Optional initial items, pushed in order
    """

    def __init__(
        self,
        key: Callable[[Hashable], float],
        set_slot: Callable[[Hashable, int], None],
        items: Optional[Iterable[Hashable]] = None,
    ):
        self.key = key
        self.set_slot = set_slot
        self.data: List[Hashable] = []

        if items:
            for item in items:
                self.push(item)

    def __len__(self) -> int:
        return len(self.data)

    def __bool__(self) -> bool:
        return bool(self.data)

    @property
    def length(self) -> int:
        return len(self.data)

    def push(self, item: Hashable) -> None:
        self.data.append(item)
        self._up(len(self.data) - 1)

    def pop(self) -> Hashable:
        """Remove and return the item with the smallest key."""
        if not self.data:
            raise IndexError("pop from empty heap")

        top = self.data[0]
        bottom = self.data.pop()
        if self.data:
            self.data[0] = bottom
            self._down(0)

        self.set_slot(top, -1)
        return top

    def peek(self) -> Hashable:
        if not self.data:
            raise IndexError("peek at empty heap")
        return self.data[0]

    def update_item(self, slot: int) -> None:
        """Re-establish order after the item at ``slot`` had its key decreased."""
        self._up(slot)

    def _up(self, pos: int) -> None:
        data, key, set_slot = self.data, self.key, self.set_slot
        item = data[pos]
        item_key = key(item)

        while pos > 0:
            parent = (pos - 1) >> 1
            current = data[parent]
            if item_key >= key(current):
                break
            data[pos] = current
            set_slot(current, pos)
            pos = parent

        data[pos] = item
        set_slot(item, pos)

    def _down(self, pos: int) -> None:
        data, key, set_slot = self.data, self.key, self.set_slot
        size = len(data)
        half = size >> 1
        item = data[pos]
        item_key = key(item)

        while pos < half:
            child = 2 * pos + 1
            best = data[child]
            best_key = key(best)

            right = child + 1
            if right < size:
                right_key = key(data[right])
                if right_key < best_key:
                    child, best, best_key = right, data[right], right_key

            if best_key >= item_key:
                break

            data[pos] = best
            set_slot(best, pos)
            pos = child

        data[pos] = item
        set_slot(item, pos)
