"""
Bounded least-recently-used cache.

This package provides `LRUCache`, an in-memory mapping with a fixed
capacity that evicts the least-recently-used entry on overflow, plus its
configuration models and logging setup. See README.md for usage.
"""

from .__version__ import __version__
from .core import LRUCache
from .errors import KeyNotFound

__all__ = ["__version__", "KeyNotFound", "LRUCache"]
