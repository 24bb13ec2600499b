"""Ordered, duplicate-free collection of user-entered item names."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

DEFAULT_ITEMS: tuple[str, ...] = ("Aspirin", "Omega-3", "Vitamin E")


class ItemSet:
    """Insertion-ordered set of trimmed, non-empty medication/supplement names.

    Equality between items is exact string match after trimming, so
    ``"aspirin"`` and ``"Aspirin"`` are distinct entries.
    """

    def __init__(self, items: Optional[Iterable[str]] = None) -> None:
        self._items: list[str] = []
        for item in items or ():
            self.add(item)

    @classmethod
    def with_defaults(cls, defaults: Optional[Iterable[str]] = None) -> ItemSet:
        return cls(DEFAULT_ITEMS if defaults is None else defaults)

    def add(self, item: str) -> bool:
        """Append *item*; returns False when it was blank or already present."""
        trimmed = item.strip()
        if not trimmed or trimmed in self._items:
            return False
        self._items.append(trimmed)
        return True

    def remove(self, item: str) -> bool:
        trimmed = item.strip()
        if trimmed not in self._items:
            return False
        self._items.remove(trimmed)
        return True

    def as_list(self) -> list[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and item.strip() in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"ItemSet({self._items!r})"
