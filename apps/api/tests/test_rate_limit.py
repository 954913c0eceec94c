"""Tests for the sliding-window login rate limiter."""

from __future__ import annotations

import pytest

from app.core.rate_limit import LoginRateLimiter, retry_after_header


class FakeClock:
    def __init__(self) -> None:
        self.now = 1_000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def limiter(clock: FakeClock) -> LoginRateLimiter:
    return LoginRateLimiter(5, 900, clock=clock)


def test_sixth_attempt_inside_window_is_blocked(limiter: LoginRateLimiter) -> None:
    for _ in range(5):
        assert limiter.hit("10.0.0.1") is None

    assert limiter.hit("10.0.0.1") == pytest.approx(900)


def test_window_slides_as_attempts_age_out(limiter: LoginRateLimiter, clock: FakeClock) -> None:
    limiter.hit("10.0.0.1")
    clock.advance(600)
    for _ in range(4):
        limiter.hit("10.0.0.1")

    clock.advance(299)
    assert limiter.hit("10.0.0.1") == pytest.approx(1)

    clock.advance(1)
    assert limiter.hit("10.0.0.1") is None
    assert limiter.hit("10.0.0.1") is not None


def test_blocked_attempts_do_not_extend_the_window(
    limiter: LoginRateLimiter, clock: FakeClock
) -> None:
    for _ in range(5):
        limiter.hit("10.0.0.1")
    for _ in range(10):
        clock.advance(60)
        assert limiter.hit("10.0.0.1") is not None

    clock.advance(300)
    assert limiter.hit("10.0.0.1") is None


def test_origins_are_tracked_independently(limiter: LoginRateLimiter) -> None:
    for _ in range(5):
        limiter.hit("10.0.0.1")

    assert limiter.hit("10.0.0.1") is not None
    assert limiter.hit("10.0.0.2") is None
    assert limiter.remaining("10.0.0.2") == 4


def test_reset_and_close_forget_attempts(limiter: LoginRateLimiter) -> None:
    for _ in range(5):
        limiter.hit("10.0.0.1")
        limiter.hit("10.0.0.2")

    limiter.reset("10.0.0.1")
    assert limiter.remaining("10.0.0.1") == 5
    assert limiter.remaining("10.0.0.2") == 0

    limiter.close()
    assert limiter.remaining("10.0.0.2") == 5


@pytest.mark.parametrize("attempts, window", [(0, 900), (5, 0)])
def test_invalid_configuration_rejected(attempts: int, window: int) -> None:
    with pytest.raises(ValueError):
        LoginRateLimiter(attempts, window)


def test_retry_after_header_rounds_up() -> None:
    assert retry_after_header(12.2) == {"Retry-After": "13"}
    assert retry_after_header(0) == {"Retry-After": "1"}
