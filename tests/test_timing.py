"""Unit tests for Duration, Timer and the averager."""

import sys
import unittest
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from walkbench.errors import InvalidArgumentError
from walkbench.timing import AverageResult, Duration, Timer, average, time_call


def fake_clock(*readings):
    """Clock returning the given nanosecond readings in order."""
    return iter(readings).__next__


class TestDuration(unittest.TestCase):

    def test_addition_and_sum(self):
        total = sum([Duration(5), Duration(7), Duration(30)], Duration.ZERO)
        self.assertEqual(total, Duration(42))

    def test_division_truncates(self):
        self.assertEqual(Duration(10) // 3, Duration(3))
        self.assertEqual(Duration(2) // 3, Duration.ZERO)

    def test_division_by_non_positive(self):
        with self.assertRaises(InvalidArgumentError):
            Duration(10) // 0
        with self.assertRaises(InvalidArgumentError):
            Duration(10) // -2

    def test_negative_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            Duration(-1)

    def test_seconds_conversion(self):
        self.assertEqual(Duration.from_seconds(1.5), Duration(1_500_000_000))
        self.assertEqual(Duration(250_000_000).total_seconds(), 0.25)

    def test_ordering(self):
        self.assertLess(Duration(1), Duration(2))
        self.assertEqual(max(Duration(3), Duration(9), Duration(4)), Duration(9))

    def test_formatting(self):
        self.assertEqual(str(Duration(1_500)), "1.500 us")
        self.assertEqual(str(Duration(12_345_678)), "12.346 ms")
        self.assertEqual(str(Duration(2_000_000_000)), "2.000000 s")


class TestTimer(unittest.TestCase):

    def test_measures_block(self):
        with Timer(fake_clock(1_000, 4_500)) as timer:
            pass
        self.assertEqual(timer.elapsed, Duration(3_500))

    def test_elapsed_recorded_when_block_fails(self):
        timer = Timer(fake_clock(100, 350))
        with self.assertRaises(RuntimeError):
            with timer:
                raise RuntimeError("boom")
        self.assertEqual(timer.elapsed, Duration(250))

    def test_real_clock_is_non_negative(self):
        with Timer() as timer:
            sum(range(1000))
        self.assertGreaterEqual(timer.elapsed, Duration.ZERO)


def test_time_call_returns_result_and_duration():
    result, duration = time_call(lambda: "done", clock=fake_clock(10, 60))
    assert result == "done"
    assert duration == Duration(50)


def test_time_call_propagates_failure():
    def fail():
        raise ValueError("bad tree")

    with pytest.raises(ValueError, match="bad tree"):
        time_call(fail, clock=fake_clock(0, 1))


@pytest.mark.parametrize("n", [1, 2, 5, 17])
def test_average_of_constant_is_constant(n):
    result = average(n, lambda: Duration(1234))
    assert result == AverageResult(sample_count=n, mean_duration=Duration(1234),
                                   total_duration=Duration(1234 * n))


def test_average_truncates():
    durations = iter([Duration(1), Duration(2)])
    result = average(2, lambda: next(durations))
    assert result.mean_duration == Duration(1)
    assert result.total_duration == Duration(3)


def test_average_runs_exactly_n_times_in_order():
    calls = []

    def operation():
        calls.append(len(calls))
        return Duration(len(calls))

    average(4, operation)
    assert calls == [0, 1, 2, 3]


@pytest.mark.parametrize("n", [0, -1, -100, 2.5, "3", True, None])
def test_average_rejects_invalid_sample_count(n):
    calls = []
    with pytest.raises(InvalidArgumentError):
        average(n, lambda: calls.append(1) or Duration(1))
    assert calls == []


def test_average_stops_at_first_failure():
    calls = []

    def operation():
        calls.append(1)
        if len(calls) == 2:
            raise RuntimeError("listing failed")
        return Duration(10)

    with pytest.raises(RuntimeError):
        average(5, operation)
    assert len(calls) == 2
