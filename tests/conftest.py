"""Pytest configuration for test suite.

Ensures the project root is on ``sys.path`` so ``import lrucache`` resolves
correctly regardless of the working directory pytest chooses, and provides a
structural invariant checker for caches under test.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        # Prepend to prefer local sources over site-packages
        sys.path.insert(0, project_root_str)


_ensure_project_root_on_syspath()


def check_invariants(cache) -> None:
    """Walk a cache's index and recency list and assert they agree."""
    index = cache._index
    recency = cache._recency
    head, tail = recency.head, recency.tail

    assert len(cache) <= cache.capacity
    assert (head is None) == (tail is None) == (len(index) == 0)
    assert cache.empty() == (len(index) == 0)
    if head is not None:
        assert head.prev is None
        assert tail.next is None

    seen = set()
    steps = 0
    entry = head
    last = None
    while entry is not None:
        steps += 1
        assert steps <= len(index), "cycle or stray entry in recency list"
        assert id(entry) not in seen
        seen.add(id(entry))
        assert index[entry.key] is entry
        if entry.prev is not None:
            assert entry.prev.next is entry
        if entry.next is not None:
            assert entry.next.prev is entry
        last = entry
        entry = entry.next

    assert last is tail
    assert steps == len(index) == len(recency)


@pytest.fixture
def assert_invariants():
    """Return the invariant checker as a fixture."""
    return check_invariants
