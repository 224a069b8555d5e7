"""Tests for infra.clock."""

import time

from infra.clock import SystemClock


def test_now_epoch_tracks_wall_clock():
    before = time.time()
    now = SystemClock().now_epoch()
    after = time.time()
    assert before - 1.0 <= now <= after + 1.0


def test_now_epoch_is_monotonic():
    clock = SystemClock()
    samples = [clock.now_epoch() for _ in range(1000)]
    assert samples == sorted(samples)
