"""
Tests for the frequency (LFU) cache.
"""

import random

import pytest

from cachefs.caching import FrequencyCache
from cachefs.interfaces import MISS
from cachefs.models import CacheOutcome


def test_get_bumps_frequency():
    cache = FrequencyCache(2)
    cache.put("a", 1)

    assert cache.frequency("a") == 1
    assert cache.get("a") == 1
    assert cache.frequency("a") == 2
    assert cache.get("missing") is MISS
    assert cache.frequency("missing") == 0


def test_least_frequent_evicted():
    """Test that a frequently read key outlives a cold one."""
    cache = FrequencyCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.get("a")
    cache.get("a")
    cache.put("c", 3)

    assert "b" not in cache
    assert "a" in cache
    assert "c" in cache
    assert cache.frequency("a") == 3


def test_fifo_within_same_frequency():
    """Test that the oldest key at the minimum frequency goes first."""
    cache = FrequencyCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)

    assert "a" not in cache
    assert "b" in cache
    assert "c" in cache


def test_bumped_key_goes_to_back_of_bucket():
    cache = FrequencyCache(3)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    cache.get("a")
    cache.get("b")
    cache.put("d", 4)
    assert "c" not in cache

    cache.get("d")
    # a, b and d all at frequency 2, a got there first
    cache.put("e", 5)

    assert "a" not in cache
    assert "b" in cache
    assert "d" in cache
    assert "e" in cache


def test_put_existing_key_overwrites_and_bumps():
    cache = FrequencyCache(2)
    cache.put("a", 1)
    cache.put("a", 2)

    assert cache.frequency("a") == 2
    assert cache.get("a") == 2
    assert len(cache) == 1


def test_new_entry_resets_min_freq():
    cache = FrequencyCache(3)
    cache.put("a", 1)
    cache.get("a")
    cache.get("a")
    assert cache.min_freq == 3

    cache.put("b", 2)
    assert cache.min_freq == 1


def test_remove_of_last_min_freq_entry_restores_min_freq():
    """Test that removing the only least-frequent key keeps eviction correct."""
    cache = FrequencyCache(3)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    for _ in range(2):
        cache.get("b")
    for _ in range(4):
        cache.get("c")
    # frequencies: a=1, b=3, c=5

    cache.remove("a")
    assert cache.min_freq == 3

    cache.put("d", 4)
    assert cache.min_freq == 1
    cache.get("d")
    cache.get("d")
    cache.get("d")
    # d=4, b=3, c=5: b is now least frequent
    cache.put("e", 5)

    assert "b" not in cache
    assert "c" in cache
    assert "d" in cache
    assert "e" in cache


def test_remove_middle_bucket_keeps_chain_intact():
    cache = FrequencyCache(3)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    cache.get("b")
    cache.get("c")
    cache.get("c")
    # a=1, b=2, c=3

    cache.remove("b")
    cache.remove("a")
    assert cache.min_freq == 3

    cache.remove("c")
    assert cache.min_freq == 0
    assert len(cache) == 0
    assert cache._buckets == {}


def test_remove_absent_key_is_noop(events):
    cache = FrequencyCache(2, on_event=events.append)
    cache.remove("missing")

    assert events[-1].outcome == CacheOutcome.NOOP
    assert len(cache) == 0


def test_zero_capacity_put_is_noop():
    cache = FrequencyCache(0)
    cache.put("a", 1)

    assert len(cache) == 0
    assert cache.get("a") is MISS


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        FrequencyCache(-5)


def test_capacity_bound_and_min_freq_under_random_workload():
    """Test the size bound and min_freq invariant after every operation."""
    rng = random.Random(11)
    cache = FrequencyCache(4)
    for _ in range(1000):
        key = rng.randrange(12)
        op = rng.random()
        if op < 0.45:
            cache.put(key, key)
        elif op < 0.8:
            cache.get(key)
        else:
            cache.remove(key)

        assert len(cache) <= 4
        if len(cache):
            assert cache.min_freq == min(cache._buckets)
            assert all(cache._buckets[f].keys for f in cache._buckets)
        else:
            assert cache.min_freq == 0


def test_clear():
    cache = FrequencyCache(2)
    cache.put("a", 1)
    cache.get("a")
    cache.clear()

    assert len(cache) == 0
    assert cache.min_freq == 0
    cache.put("b", 2)
    assert cache.frequency("b") == 1
