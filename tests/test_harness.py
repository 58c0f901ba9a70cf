"""Tests for the benchmark runner and its reports."""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from walkbench.config import BenchmarkConfig
from walkbench.core import TraversalResult
from walkbench.errors import InvalidArgumentError, TraversalError
from walkbench.harness import (
    BenchmarkRunner,
    StrategyReport,
    counts_agree,
    format_report,
    format_summary,
)
from walkbench.strategies import TraversalStrategy, available_strategies, create_strategy
from walkbench.testing import generate_tree
from walkbench.timing import AverageResult, Duration


class FailingStrategy(TraversalStrategy):
    """Fails on the given (1-based) run."""

    name = "failing"
    title = "Always Fails"

    def __init__(self, fail_on: int = 1):
        super().__init__()
        self.fail_on = fail_on
        self.calls = 0

    def traverse(self, root):
        self.calls += 1
        if self.calls >= self.fail_on:
            raise TraversalError(root, PermissionError("denied"))
        return TraversalResult(file_count=1, directory_count=1)


class CountingStrategy(TraversalStrategy):
    name = "counting"
    title = "Counting"

    def __init__(self):
        super().__init__()
        self.calls = 0

    def traverse(self, root):
        self.calls += 1
        return TraversalResult(file_count=0, directory_count=1)


@pytest.fixture
def tree(tmp_path):
    root = tmp_path.resolve()
    expected = generate_tree(root, depth=2, breadth=2, files_per_dir=3)
    return root, expected


def test_run_all_strategies(tree):
    root, expected = tree
    out = io.StringIO()
    reports = BenchmarkRunner(BenchmarkConfig(root=root, repeat_count=2), out=out).run()

    assert [r.name for r in reports] == available_strategies()
    for report in reports:
        assert report.succeeded
        assert report.result == expected
        assert report.average.sample_count == 2
    assert counts_agree(reports)

    output = out.getvalue()
    assert output.count("Average duration:") == 7
    assert output.count("Completed in:") == 14
    assert f"Files: {expected.file_count}, dirs: {expected.directory_count}." in output
    assert "TEST: Walk File Tree" in output


def test_failure_aborts_only_that_strategy(tree):
    root, expected = tree
    out = io.StringIO()
    runner = BenchmarkRunner(BenchmarkConfig(root=root, repeat_count=3), out=out)

    failing = FailingStrategy(fail_on=2)
    failed = runner.run_strategy(failing, root)
    ok = runner.run_strategy(create_strategy("queue"), root)

    assert not failed.succeeded
    assert isinstance(failed.error, TraversalError)
    assert failed.average is None
    assert failing.calls == 2  # no further runs after the failure
    # The successful first run is still reported
    assert failed.result == TraversalResult(file_count=1, directory_count=1)

    assert ok.succeeded
    assert ok.result == expected
    assert "FAILED:" in out.getvalue()


def test_failed_strategy_within_full_run(tree, monkeypatch):
    root, _ = tree
    failing = FailingStrategy()
    healthy = CountingStrategy()
    runner = BenchmarkRunner(BenchmarkConfig(root=root, repeat_count=2), out=io.StringIO())
    monkeypatch.setattr(runner, "_build_strategies", lambda: [failing, healthy])

    reports = runner.run()

    assert [r.succeeded for r in reports] == [False, True]
    assert healthy.calls == 2


def test_warmup_runs_are_not_timed(tree):
    root, _ = tree
    out = io.StringIO()
    strategy = CountingStrategy()
    config = BenchmarkConfig(root=root, repeat_count=2, warmup_runs=3)
    report = BenchmarkRunner(config, out=out).run_strategy(strategy, root)

    assert strategy.calls == 5
    assert report.average.sample_count == 2
    assert out.getvalue().count("Completed in:") == 2


def test_invalid_config_fails_before_timing(tree):
    root, _ = tree
    out = io.StringIO()
    runner = BenchmarkRunner(BenchmarkConfig(root=root, repeat_count=0), out=out)
    with pytest.raises(InvalidArgumentError):
        runner.run()
    assert out.getvalue() == ""


@pytest.mark.parametrize("repeat_count", [0, -1])
def test_run_strategy_rejects_invalid_repeat_count(tree, repeat_count):
    """A single-strategy run raises instead of reporting a failed strategy."""
    root, _ = tree
    out = io.StringIO()
    strategy = CountingStrategy()
    runner = BenchmarkRunner(BenchmarkConfig(root=root, repeat_count=repeat_count), out=out)

    with pytest.raises(InvalidArgumentError):
        runner.run_strategy(strategy, root)
    assert strategy.calls == 0
    assert out.getvalue() == ""


def test_missing_root_fails_before_timing(tmp_path):
    out = io.StringIO()
    runner = BenchmarkRunner(BenchmarkConfig(root=tmp_path / "missing"), out=out)
    with pytest.raises(InvalidArgumentError):
        runner.run()
    assert out.getvalue() == ""


def test_recursion_error_is_reported_not_raised(tree):
    class TooDeep(CountingStrategy):
        name = "too_deep"

        def traverse(self, root):
            raise RecursionError("maximum recursion depth exceeded")

    root, _ = tree
    report = BenchmarkRunner(BenchmarkConfig(root=root), out=io.StringIO()) \
        .run_strategy(TooDeep(), root)
    assert isinstance(report.error, RecursionError)


def _report(name, nanoseconds, result=TraversalResult(1, 1)):
    return StrategyReport(
        name=name,
        title=name.title(),
        result=result,
        average=AverageResult(sample_count=1, mean_duration=Duration(nanoseconds)),
    )


def test_summary_ranks_fastest_first():
    reports = [
        _report("slow", 3_000_000),
        _report("fast", 1_000_000),
        StrategyReport(name="broken", title="Broken", error=TraversalError("/x")),
    ]
    summary = format_summary(reports)
    lines = summary.splitlines()

    assert lines[3].strip().startswith("1. fast")
    assert lines[4].strip().startswith("2. slow")
    assert "FAILED" in lines[5]
    assert "disagree" not in summary


def test_summary_warns_on_disagreement():
    reports = [
        _report("a", 1, TraversalResult(4, 2)),
        _report("b", 2, TraversalResult(3, 2)),
    ]
    assert not counts_agree(reports)
    assert "WARNING: strategies disagree on counts" in format_summary(reports)


def test_format_report():
    text = format_report(_report("queue", 2_500_000, TraversalResult(4, 2)))
    assert "Queue (queue)" in text
    assert "Files: 4, dirs: 2." in text
    assert "Average duration: 2.500 ms over 1 run(s)" in text

    failed = format_report(StrategyReport(name="x", title="X", error=TraversalError("/x")))
    assert "FAILED: Could not list directory '/x'" in failed
