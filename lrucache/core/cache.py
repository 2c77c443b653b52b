"""Bounded least-recently-used cache.

The cache couples a ``dict`` index (key -> :class:`Entry`) with a
:class:`RecencyList` ordered from most- to least-recently-used. Key-based
operations are expected O(1); overflow evicts from the LRU end until the
size is back within capacity.

Usage
-----
    cache = LRUCache(2)
    cache.insert("New York", "Mets")
    cache.insert("Boston", "Red Sox")
    cache.get("New York")            # promotes "New York"
    cache.insert("Oakland", "A's")   # evicts "Boston"

The cache is not thread-safe. Lookups promote, so even concurrent readers
need external locking.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, Iterator, Optional, Tuple, TypeVar

from ..errors import KeyNotFound
from .entry import Entry
from .recency import RecencyList

if TYPE_CHECKING:
    from ..config.models import CacheConfig

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValueError(f"capacity must be an integer, got {capacity!r}")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    return capacity


class LRUCache(Generic[K, V]):
    """Mapping with a fixed capacity and least-recently-used eviction.

    Parameters
    ----------
    capacity: int
        Maximum number of live entries. ``0`` is legal: every new key is
        evicted as soon as it is inserted.

    Notes
    -----
    `contains`/`count` and `peek` observe without promoting. `get`/`at`,
    `find` and update-inserts promote the touched entry to the MRU end.
    Iterators walk MRU -> LRU, never promote, and raise ``RuntimeError`` if
    the cache is mutated (including by a promoting lookup) while they are
    in use.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._index: dict[K, Entry[K, V]] = {}
        self._recency: RecencyList[K, V] = RecencyList()
        # Bumped on every structural change; live iterators compare against it.
        self._version = 0
        logger.debug("lru_cache.created", extra={"capacity": capacity})

    @classmethod
    def from_config(cls, config: "CacheConfig") -> "LRUCache[K, V]":
        """Build an empty cache sized by a :class:`CacheConfig`."""
        return cls(config.capacity)

    # Capacity

    @property
    def capacity(self) -> int:
        """Upper bound on live entries."""
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        self.set_capacity(value)

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity, evicting LRU entries until the cache fits."""
        old = self._capacity
        self._capacity = _check_capacity(capacity)
        evicted = self._evict_overflow()
        logger.debug(
            "lru_cache.resized",
            extra={"old_capacity": old, "new_capacity": capacity, "evicted": evicted},
        )

    def size(self) -> int:
        """Return the number of live entries."""
        return len(self._index)

    def empty(self) -> bool:
        """Return True when the cache holds no entries."""
        return not self._index

    def max_size(self) -> int:
        """Theoretical ceiling on the number of entries."""
        return sys.maxsize

    # Lookup

    def contains(self, key: K) -> bool:
        """Membership test; does not change recency order."""
        return key in self._index

    def count(self, key: K) -> int:
        """Return 1 if `key` is present, else 0. Does not promote."""
        return 1 if key in self._index else 0

    def get(self, key: K) -> V:
        """Return the value for `key` and mark it most-recently-used.

        Raises
        ------
        KeyNotFound
            If `key` is absent. The cache is left untouched.
        """
        entry = self._index.get(key)
        if entry is None:
            raise KeyNotFound(key)
        self._touch(entry)
        return entry.value

    at = get

    def peek(self, key: K) -> V:
        """Return the value for `key` without promoting it."""
        entry = self._index.get(key)
        if entry is None:
            raise KeyNotFound(key)
        return entry.value

    def find(self, key: K) -> Iterator[Tuple[K, V]]:
        """Promote `key` and return an iterator positioned at it.

        Since the found entry becomes the head, the iterator covers the
        whole cache MRU -> LRU. An absent key yields an exhausted iterator
        and changes nothing.
        """
        entry = self._index.get(key)
        if entry is None:
            return iter(())
        self._touch(entry)
        return self._pairs(self._walk(entry, self._version))

    # Modifiers

    def insert(self, key: K, value: V) -> None:
        """Insert or update `key`.

        An existing key has its value overwritten and is promoted; nothing is
        evicted. A new key becomes the MRU entry, after which LRU entries are
        evicted until ``size() <= capacity``.
        """
        entry = self._index.get(key)
        if entry is not None:
            entry.value = value
            self._touch(entry)
            return

        entry = Entry(key, value)
        # Publish into the index before linking; a failure here leaves the
        # list untouched.
        self._index[key] = entry
        self._recency.push_front(entry)
        self._version += 1
        self._evict_overflow()

    def erase(self, key: K) -> int:
        """Remove `key`. Return 1 if it was present, else 0."""
        entry = self._index.pop(key, None)
        if entry is None:
            return 0
        self._recency.detach(entry)
        self._version += 1
        return 1

    def clear(self) -> None:
        """Drop every entry."""
        dropped = len(self._index)
        self._recency.clear()
        self._index.clear()
        self._version += 1
        logger.debug("lru_cache.cleared", extra={"dropped": dropped})

    # Iteration

    def items(self) -> Iterator[Tuple[K, V]]:
        """Iterate ``(key, value)`` pairs MRU -> LRU without promoting."""
        return self._pairs(self._walk(self._recency.head, self._version))

    def keys(self) -> Iterator[K]:
        """Iterate keys MRU -> LRU without promoting."""
        return (entry.key for entry in self._walk(self._recency.head, self._version))

    def values(self) -> Iterator[V]:
        """Iterate values MRU -> LRU without promoting."""
        return (
            entry.value for entry in self._walk(self._recency.head, self._version)
        )

    # Debug

    def dump(self) -> str:
        """Render one ``K:<key> V: <value>`` line per entry, MRU first."""
        return "".join(f"{entry}\n" for entry in self._recency)

    # Python protocol

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.erase(key):
            raise KeyNotFound(key)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self)})"

    # Internals

    def _touch(self, entry: Entry[K, V]) -> None:
        if entry is not self._recency.head:
            self._recency.promote(entry)
            self._version += 1

    def _evict_overflow(self) -> int:
        evicted = 0
        while len(self._index) > self._capacity:
            entry = self._recency.tail
            assert entry is not None
            del self._index[entry.key]
            self._recency.detach(entry)
            evicted += 1
        if evicted:
            self._version += 1
        return evicted

    def _walk(
        self, start: Optional[Entry[K, V]], version: int
    ) -> Iterator[Entry[K, V]]:
        entry = start
        while entry is not None:
            if self._version != version:
                raise RuntimeError("LRUCache mutated during iteration")
            yield entry
            entry = entry.next
        if self._version != version:
            raise RuntimeError("LRUCache mutated during iteration")

    @staticmethod
    def _pairs(entries: Iterator[Entry[K, V]]) -> Iterator[Tuple[K, V]]:
        return ((entry.key, entry.value) for entry in entries)
