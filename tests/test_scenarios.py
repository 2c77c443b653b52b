"""End-to-end usage scenarios for the LRU cache."""

from __future__ import annotations

import string

from lrucache import LRUCache


def test_small_string_cache(assert_invariants):
    """Capacity 2 keeps only the two most recent teams."""
    nextwords = LRUCache(2)
    nextwords.insert("New York", "Mets")
    nextwords.insert("Philadelphia", "Phillies")
    nextwords.insert("Boston", "Red Sox")
    nextwords.insert("Oakland", "A's")
    nextwords.insert("Pittsburgh", "Pirates")

    assert nextwords.size() == 2
    assert nextwords.contains("New York") is False
    assert nextwords.contains("Pittsburgh") is True
    assert nextwords.get("Pittsburgh") == "Pirates"
    assert list(nextwords.items()) == [("Pittsburgh", "Pirates"), ("Oakland", "A's")]
    assert_invariants(nextwords)


def test_iteration_covers_every_entry():
    nextwords = LRUCache(5)
    for i, word in enumerate(["one", "two", "three", "four", "five", "six", "seven"]):
        nextwords.insert(word, i + 1)

    visited = list(nextwords.items())
    assert visited == [
        ("seven", 7),
        ("six", 6),
        ("five", 5),
        ("four", 4),
        ("three", 3),
    ]
    assert len(visited) == 5


def test_repeated_access_keeps_entry_alive(assert_invariants):
    cache = LRUCache(4)
    cache.insert("keepme", 101)

    letters = string.ascii_lowercase[:25]  # 'a'..'y'
    check = -1
    for i in range(100):
        cache.insert(letters[i % len(letters)], i)
        check = cache.get("keepme")

    assert check == 101
    assert cache.get("keepme") == 101
    assert_invariants(cache)


def test_int_keys_with_pinned_key(assert_invariants):
    cache = LRUCache(10)
    keepkey = 10
    for i in range(10000):
        cache.insert(i, i * 1.00001)
        if i > keepkey:
            cache.get(keepkey)

    assert cache.size() == 10
    assert cache.contains(keepkey)
    assert not cache.contains(0)
    assert cache.contains(10000 - 3)
    assert_invariants(cache)


def test_stress_two_letter_keys(assert_invariants):
    letters = string.ascii_lowercase[:25]
    names = [c + c1 for c in letters for c1 in letters]
    assert len(names) == 625

    cache = LRUCache(10)
    for i in range(1_000_000):
        cache.insert(names[i % len(names)], i)

    assert cache.size() == 10
    assert cache.contains("yy")
    assert not cache.contains("ya")
    assert list(cache.keys()) == names[-1:-11:-1]
    assert_invariants(cache)


def test_zero_capacity_retains_nothing(assert_invariants):
    cache = LRUCache(0)
    cache.insert("a", 1)
    cache.insert("b", 2)
    assert cache.size() == 0
    assert not cache.contains("a")
    assert not cache.contains("b")
    assert_invariants(cache)
