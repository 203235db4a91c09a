"""Periodic loop timing on the monotonic clock."""

from __future__ import annotations

import time
from enum import Enum

MINIMUM_STEP_SIZE_NS = 10_000
"""Smallest step size accepted, in nanoseconds."""

_NS_PER_SECOND = 1_000_000_000


class TimingErrorKind(Enum):
    """Kinds of timing failure."""

    MONOTONIC_CLOCK_FAILED = 1
    SLEEP_FAILED = 2
    STEP_SIZE_BELOW_CLOCK_RESOLUTION = 3
    STEP_SIZE_LESS_THAN_MINIMUM = 4


class TimingError(Exception):
    """A timing operation failed."""

    def __init__(self, kind: TimingErrorKind) -> None:
        super().__init__(kind.name.replace("_", " ").lower())
        self.kind = kind


def _monotonic_ns() -> int:
    try:
        return time.monotonic_ns()
    except OSError as exc:
        raise TimingError(TimingErrorKind.MONOTONIC_CLOCK_FAILED) from exc


def _clock_resolution_ns() -> int:
    try:
        resolution = time.get_clock_info("monotonic").resolution
    except (OSError, ValueError) as exc:
        raise TimingError(TimingErrorKind.MONOTONIC_CLOCK_FAILED) from exc
    return max(1, round(resolution * _NS_PER_SECOND))


def _elapsed_seconds(later_ns: int, earlier_ns: int) -> float:
    """Non-negative difference ``later - earlier`` in seconds."""
    return max(0, later_ns - earlier_ns) / _NS_PER_SECOND


class PeriodicTimer:
    """Wakes at fixed steps measured from the moment it was started."""

    def __init__(self) -> None:
        self._step_size_ns = 0
        self._init_ns = 0
        self._step_req_ns = 0

    def initialize(self, step_size_ns: int) -> None:
        """Set the step size in nanoseconds.

        Raises ``TimingError`` if the step is below the clock resolution or the
        minimum step size; the previous step size is then kept.
        """
        if _clock_resolution_ns() > step_size_ns:
            raise TimingError(TimingErrorKind.STEP_SIZE_BELOW_CLOCK_RESOLUTION)
        if step_size_ns < MINIMUM_STEP_SIZE_NS:
            raise TimingError(TimingErrorKind.STEP_SIZE_LESS_THAN_MINIMUM)
        self._step_size_ns = int(step_size_ns)

    def start(self) -> None:
        """Take the current monotonic time as the start of the loop."""
        self._init_ns = _monotonic_ns()
        self._step_req_ns = self._init_ns

    def step(self) -> tuple[float, float]:
        """Sleep until the next step and return ``(nominal_time, remainder)`` in seconds.

        ``nominal_time`` is the target time since ``start``; ``remainder`` is how
        late the wake-up was past that target.
        """
        self._step_req_ns += self._step_size_ns
        while True:
            remaining_ns = self._step_req_ns - _monotonic_ns()
            if remaining_ns <= 0:
                break
            try:
                time.sleep(remaining_ns / _NS_PER_SECOND)
            except (OSError, ValueError) as exc:
                raise TimingError(TimingErrorKind.SLEEP_FAILED) from exc
        now_ns = _monotonic_ns()
        remainder = _elapsed_seconds(now_ns, self._step_req_ns)
        nominal_time = _elapsed_seconds(self._step_req_ns, self._init_ns)
        return nominal_time, remainder