"""Ordered collection with an optional, always in-bounds selection."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Items plus an optional selected index with wraparound navigation.

    The selection is either ``None`` or a valid index. Operations on an
    empty list degrade to no-ops.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items or [])
        self._selected: int | None = None

    @property
    def items(self) -> list[T]:
        return self._items

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def selected_item(self) -> T | None:
        if self._selected is None:
            return None
        return self._items[self._selected]

    def next(self) -> None:
        """Select the following item, wrapping to the first."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = (self._selected + 1) % len(self._items)

    def prev(self) -> None:
        """Select the preceding item, wrapping to the last."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = (self._selected - 1) % len(self._items)

    def select(self, index: int) -> None:
        """Select ``index`` if it exists; out-of-range requests are ignored."""
        if 0 <= index < len(self._items):
            self._selected = index

    def select_first(self) -> None:
        if self._items:
            self._selected = 0

    def select_last(self) -> None:
        if not self._items:
            self.unselect()
            return
        self._selected = len(self._items) - 1

    def unselect(self) -> None:
        self._selected = None

    def append(self, item: T) -> None:
        self._items.append(item)

    def remove_at(self, index: int) -> T | None:
        """Remove the item at ``index`` and keep the selection in bounds.

        The selection moves to the previous index (or stays at 0) when the
        removed item was selected or sat before it, and is cleared once the
        list is empty.
        """
        if not 0 <= index < len(self._items):
            return None

        item = self._items.pop(index)

        if not self._items:
            self._selected = None
        elif self._selected is not None and index <= self._selected:
            self._selected = max(self._selected - 1, 0)

        return item

    def remove_selected(self) -> T | None:
        if self._selected is None:
            return None
        return self.remove_at(self._selected)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"SelectableList(len={len(self._items)}, selected={self._selected})"
