"""Errors raised by the cache.

Only one failure is visible to callers: looking up a key that is not
present. `KeyNotFound` subclasses :class:`KeyError` so code that already
guards mapping access with ``except KeyError`` keeps working.
"""

from __future__ import annotations

from collections.abc import Hashable


class KeyNotFound(KeyError):
    """Raised by `get`/`at` (and item access) when the key is absent.

    Attributes
    ----------
    key: Hashable
        The key that was looked up.
    """

    def __init__(self, key: Hashable) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"
