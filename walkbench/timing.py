"""Timing and averaging for walkbench.

Durations are measured with :func:`time.perf_counter_ns`, a monotonic
clock, so adjustments to the time of day cannot skew results. They are
kept as integer nanoseconds; averaging uses integer division, which
truncates (durations are never negative).
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, TypeVar

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], int]


@dataclass(frozen=True, order=True)
class Duration:
    """Elapsed time with nanosecond resolution."""

    nanoseconds: int = 0

    def __post_init__(self):
        if self.nanoseconds < 0:
            raise InvalidArgumentError(f"Duration cannot be negative: {self.nanoseconds}ns")

    @classmethod
    def from_seconds(cls, seconds: float) -> "Duration":
        return cls(round(seconds * 1_000_000_000))

    def total_seconds(self) -> float:
        return self.nanoseconds / 1_000_000_000

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds + other.nanoseconds)

    def __floordiv__(self, divisor: int) -> "Duration":
        """Divide by a positive integer, truncating to whole nanoseconds."""
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return NotImplemented
        if divisor <= 0:
            raise InvalidArgumentError(f"Divisor must be positive, got {divisor}")
        return Duration(self.nanoseconds // divisor)

    def __str__(self) -> str:
        ns = self.nanoseconds
        if ns >= 1_000_000_000:
            return f"{ns / 1_000_000_000:.6f} s"
        if ns >= 1_000_000:
            return f"{ns / 1_000_000:.3f} ms"
        return f"{ns / 1_000:.3f} us"


Duration.ZERO = Duration(0)


class Timer:
    """Context manager measuring the elapsed time of a block.

    ``elapsed`` is set on exit whether or not the block raised, so the
    time spent before a failure stays available for diagnostics. The
    exception itself always propagates.

    Example:
        >>> with Timer() as timer:
        ...     strategy.traverse(root)
        >>> print(timer.elapsed)
    """

    def __init__(self, clock: Clock = time.perf_counter_ns):
        """Initialize timer.

        Args:
            clock: Monotonic clock returning integer nanoseconds
        """
        self._clock = clock
        self._start: Optional[int] = None
        self.elapsed: Optional[Duration] = None

    def __enter__(self) -> "Timer":
        self.elapsed = None
        self._start = self._clock()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        end = self._clock()
        self.elapsed = Duration(max(0, end - self._start))
        if exc_type is not None:
            logger.debug("Timed operation failed after %s: %s", self.elapsed, exc_val)
        return False


def time_call(operation: Callable[[], T],
              clock: Clock = time.perf_counter_ns) -> Tuple[T, Duration]:
    """Time a single invocation of ``operation``.

    Args:
        operation: Zero-argument callable to time
        clock: Monotonic clock returning integer nanoseconds

    Returns:
        Tuple of (operation result, elapsed Duration)

    Raises:
        Whatever ``operation`` raises, unchanged
    """
    with Timer(clock) as timer:
        result = operation()
    return result, timer.elapsed


@dataclass(frozen=True)
class AverageResult:
    """Arithmetic mean over repeated timed runs."""

    sample_count: int
    mean_duration: Duration
    total_duration: Duration = Duration.ZERO

    def __str__(self) -> str:
        return f"Average duration: {self.mean_duration} over {self.sample_count} run(s)"


def _check_sample_count(sample_count) -> None:
    if isinstance(sample_count, bool) or not isinstance(sample_count, int):
        raise InvalidArgumentError(
            f"sample_count must be a positive integer, got {sample_count!r}"
        )
    if sample_count <= 0:
        raise InvalidArgumentError(
            f"sample_count must be positive, got {sample_count}"
        )


def average(sample_count: int, operation: Callable[[], Duration]) -> AverageResult:
    """Run ``operation`` repeatedly and report the mean Duration.

    Runs are strictly sequential, never concurrent. No outliers are
    discarded: the statistic is a straight arithmetic mean, truncated to
    whole nanoseconds.

    Args:
        sample_count: Number of runs (positive integer)
        operation: Callable performing one run and returning its Duration

    Returns:
        AverageResult with the mean and total duration

    Raises:
        InvalidArgumentError: If sample_count is not a positive integer
        Whatever ``operation`` raises, on the first failing run
    """
    _check_sample_count(sample_count)

    total = Duration.ZERO
    for run in range(sample_count):
        duration = operation()
        logger.debug("Run %d/%d completed in %s", run + 1, sample_count, duration)
        total = total + duration

    return AverageResult(
        sample_count=sample_count,
        mean_duration=total // sample_count,
        total_duration=total,
    )
