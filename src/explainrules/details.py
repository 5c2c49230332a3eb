"""
Deduplicating details container.

A ``Details`` collects the explanations written by every node of one
evaluation. Insertion order is kept and a value equal to one already present
is silently dropped, so two sub-rules reporting the same reason produce a
single entry at the position of the first report.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

D = TypeVar("D")


class Details(Sequence[D], Generic[D]):
    """
    Ordered sequence of details with set-like uniqueness.

    Only appending is supported. Membership is checked through a set for
    hashable values and by an equality scan for unhashable ones.
    """

    __slots__ = ("_items", "_seen", "_unhashable")

    def __init__(self, values: Iterable[D] = ()) -> None:
        self._items: list[D] = []
        self._seen: set[Any] = set()
        self._unhashable: list[D] = []
        self.extend(values)

    def append(self, value: D) -> bool:
        """
        Append a detail unless an equal one is already present.

        Returns:
            True if the value was added
        """
        if value in self:
            return False
        self._items.append(value)
        if _is_hashable(value):
            self._seen.add(value)
        else:
            self._unhashable.append(value)
        return True

    def extend(self, values: Iterable[D]) -> bool:
        """
        Append each value in order, skipping any already present.

        Values repeated within ``values`` are kept once, at their first position.

        Returns:
            True if at least one value was added
        """
        added = False
        for value in values:
            added = self.append(value) or added
        return added

    def as_tuple(self) -> tuple[D, ...]:
        """Read-only snapshot of the current contents."""
        return tuple(self._items)

    def __contains__(self, value: object) -> bool:
        if not _is_hashable(value):
            # set == frozenset holds across the hashable/unhashable split
            return any(item == value for item in self._items)
        if value in self._seen:
            return True
        return any(item == value for item in self._unhashable)

    def __iter__(self) -> Iterator[D]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> D: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[D, ...]: ...

    def __getitem__(self, index: int | slice) -> D | tuple[D, ...]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Details):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Details({self._items!r})"


def _is_hashable(value: object) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True
