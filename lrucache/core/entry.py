"""Entry record shared by the index and the recency list."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Entry(Generic[K, V]):
    """A key/value pair linked into the recency list.

    ``prev`` points toward the MRU end (``None`` at the head) and ``next``
    toward the LRU end (``None`` at the tail). The key never changes once
    the entry exists; the value is overwritten on update-insert.
    """

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: Optional[Entry[K, V]] = None
        self.next: Optional[Entry[K, V]] = None

    def unlink(self) -> None:
        """Drop both neighbour links."""
        self.prev = None
        self.next = None

    def __str__(self) -> str:
        return f"K:{self.key} V: {self.value}"

    def __repr__(self) -> str:
        return f"Entry(key={self.key!r}, value={self.value!r})"
