from __future__ import annotations
from .types import *


class IndexAdapter(Generic[T]):
    """exposes length and value-swap over a list so index-based algorithms can work on it"""

    def __init__(self, items: List[T]):
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]


class OrderAdapter(IndexAdapter[T]):
    """
    bridges a user "less-than" comparator to the generic sort routines.
    the routines only ever see indices: len(), swap(i, j) and less(i, j).
    """

    def __init__(self, items: List[T], less: Less[T]):
        super().__init__(items)
        self._less = less

    def less(self, i: int, j: int) -> bool:
        return bool(self._less(self._items[i], self._items[j]))
