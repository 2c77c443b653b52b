"""Doubly-linked recency list.

Entries are ordered from most-recently-used (``head``) to least-recently-used
(``tail``). The list knows nothing about keys; the cache facade keeps its
index consistent with it. Every primitive here is O(1) except `clear` and
iteration.
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

from .entry import Entry

K = TypeVar("K")
V = TypeVar("V")


class RecencyList(Generic[K, V]):
    """Intrusive MRU -> LRU list of :class:`Entry` objects."""

    __slots__ = ("head", "tail", "_length")

    def __init__(self) -> None:
        self.head: Optional[Entry[K, V]] = None
        self.tail: Optional[Entry[K, V]] = None
        self._length = 0

    def push_front(self, entry: Entry[K, V]) -> None:
        """Link a detached entry in as the new head."""
        entry.prev = None
        entry.next = self.head
        if self.head is not None:
            self.head.prev = entry
        self.head = entry
        if self.tail is None:
            self.tail = entry
        self._length += 1

    def promote(self, entry: Entry[K, V]) -> None:
        """Move a linked entry to the head (MRU position)."""
        prev, nxt = entry.prev, entry.next
        if prev is not None and nxt is not None:
            # middle: splice out, then prepend
            prev.next = nxt
            nxt.prev = prev
        elif nxt is not None:
            # already the head
            return
        elif prev is not None:
            # tail: its predecessor becomes the new tail
            prev.next = None
            self.tail = prev
        else:
            # lone entry
            if self.tail is None:
                self.tail = entry
            self.head = entry
            return
        entry.prev = None
        entry.next = self.head
        if self.head is not None:
            self.head.prev = entry
        self.head = entry

    def detach(self, entry: Entry[K, V]) -> None:
        """Unlink an entry; the caller drops it from the index."""
        prev, nxt = entry.prev, entry.next
        if prev is not None and nxt is not None:
            prev.next = nxt
            nxt.prev = prev
        elif nxt is not None:
            self.head = nxt
            nxt.prev = None
        elif prev is not None:
            self.tail = prev
            prev.next = None
        else:
            self.head = None
            self.tail = None
        entry.unlink()
        self._length -= 1

    def pop_back(self) -> Optional[Entry[K, V]]:
        """Detach and return the LRU entry, or ``None`` when empty."""
        entry = self.tail
        if entry is not None:
            self.detach(entry)
        return entry

    def clear(self) -> None:
        """Unlink every entry."""
        entry = self.head
        while entry is not None:
            nxt = entry.next
            entry.unlink()
            entry = nxt
        self.head = None
        self.tail = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Entry[K, V]]:
        entry = self.head
        while entry is not None:
            yield entry
            entry = entry.next
