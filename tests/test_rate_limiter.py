from __future__ import annotations

from devto_publisher.core import RateLimiter


def test_default_delay_is_one_second() -> None:
    calls: list[float] = []
    limiter = RateLimiter(sleeper=calls.append)

    assert limiter.sleep() == 1.0
    assert calls == [1.0]


def test_disabled_limiter_never_sleeps() -> None:
    limiter = RateLimiter.disabled()
    calls: list[float] = []
    limiter.sleeper = calls.append

    assert limiter.sleep() == 0.0
    assert calls == []


def test_max_delay_raised_to_min() -> None:
    limiter = RateLimiter(min_delay=2.0, max_delay=0.5)
    assert limiter.max_delay == 2.0
    assert limiter.compute_delay() == 2.0


def test_jitter_stays_in_range() -> None:
    limiter = RateLimiter(min_delay=0.5, max_delay=1.5)
    for _ in range(20):
        assert 0.5 <= limiter.compute_delay() <= 1.5
