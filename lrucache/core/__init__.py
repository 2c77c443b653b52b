"""Cache data structure: entry record, recency list and the LRU facade."""

from .cache import LRUCache
from .entry import Entry
from .recency import RecencyList

__all__ = ["Entry", "LRUCache", "RecencyList"]
