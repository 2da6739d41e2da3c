"""Monotonic microsecond counter and time interval helpers."""

from __future__ import annotations

import sys
import time

SECOND_S = 1
MINUTE_S = 60 * SECOND_S
HOUR_S = 60 * MINUTE_S
DAY_S = 24 * HOUR_S

SECOND_MS = SECOND_S * 1000
MINUTE_MS = MINUTE_S * 1000
HOUR_MS = HOUR_S * 1000
DAY_MS = DAY_S * 1000

SECOND_US = SECOND_MS * 1000
MINUTE_US = MINUTE_MS * 1000
HOUR_US = HOUR_MS * 1000
DAY_US = DAY_MS * 1000

TIMEPOINT_MIN = -(1 << 63)
TIMEPOINT_MAX = (1 << 63) - 1


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def from_timespec(tv_sec: int, tv_nsec: int) -> int:
    """Convert seconds and nanoseconds to microseconds."""
    return int(tv_sec) * SECOND_US + _truncating_div(int(tv_nsec), 1000)


def now() -> int:
    """Current counter value in microseconds.

    Uses the boot time clock on Linux and a monotonic clock elsewhere.
    """
    if sys.platform.startswith("linux") and hasattr(time, "CLOCK_BOOTTIME"):
        try:
            ns = time.clock_gettime_ns(time.CLOCK_BOOTTIME)
        except OSError:
            return 0
        return from_timespec(ns // 1_000_000_000, ns % 1_000_000_000)
    return time.monotonic_ns() // 1000


def elapsed_us(now_us: int, start_us: int, interval_us: int) -> bool:
    """True if at least ``interval_us`` passed between start and now."""
    return (now_us - start_us) >= interval_us


def elapsed_ms(now_us: int, start_us: int, interval_ms: int) -> bool:
    """Like elapsed_us with the interval given in milliseconds."""
    return elapsed_us(now_us, start_us, interval_ms * 1000)