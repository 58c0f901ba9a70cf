"""Benchmark harness for walkbench.

The BenchmarkRunner is the bridge between a BenchmarkConfig and the
measurements. It validates the configuration before any timing begins,
then benchmarks one strategy at a time, one run at a time. Runs never
overlap.

A failure in one strategy aborts that strategy's benchmark only: it is
logged, recorded in the strategy's report and printed, and the
remaining strategies still run.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, TextIO

from .config import BenchmarkConfig
from .core.result import TraversalResult
from .errors import WalkBenchError
from .strategies import TraversalStrategy, create_strategy
from .timing import AverageResult, Duration, average, time_call

logger = logging.getLogger(__name__)


@dataclass
class StrategyReport:
    """Outcome of benchmarking one strategy."""

    name: str
    title: str
    result: Optional[TraversalResult] = None    # Counts from the last run
    average: Optional[AverageResult] = None
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.average is not None


def format_report(report: StrategyReport) -> str:
    """Render a single strategy report as text."""
    lines = [f"{report.title} ({report.name})"]
    if report.result is not None:
        lines.append(f"  {report.result}.")
    if report.succeeded:
        lines.append(f"  {report.average}")
    else:
        lines.append(f"  FAILED: {report.error}")
    return "\n".join(lines)


def counts_agree(reports: List[StrategyReport]) -> bool:
    """Check that every successful strategy produced the same counts."""
    results = {r.result for r in reports if r.succeeded}
    return len(results) <= 1


def format_summary(reports: List[StrategyReport]) -> str:
    """Render a summary ranking successful strategies, fastest first."""
    succeeded = sorted(
        (r for r in reports if r.succeeded),
        key=lambda r: r.average.mean_duration,
    )
    failed = [r for r in reports if not r.succeeded]

    lines = ["=" * 60, "SUMMARY (fastest first)", "=" * 60]
    for rank, report in enumerate(succeeded, start=1):
        lines.append(
            f"{rank:>2}. {report.name:<18} {str(report.average.mean_duration):>16}  "
            f"{report.result}"
        )
    for report in failed:
        lines.append(f" -. {report.name:<18} {'FAILED':>16}  {report.error}")
    if not counts_agree(reports):
        lines.append("WARNING: strategies disagree on counts")
    return "\n".join(lines)


class BenchmarkRunner:
    """Runs the configured strategies and prints their results."""

    def __init__(self, config: Optional[BenchmarkConfig] = None, out: Optional[TextIO] = None):
        """Create a runner.

        Args:
            config: Benchmark configuration (defaults to BenchmarkConfig())
            out: Stream results are printed to (defaults to sys.stdout)
        """
        self.config = config or BenchmarkConfig()
        self.out = out or sys.stdout

    def _print(self, *args) -> None:
        print(*args, file=self.out)

    def _build_strategies(self) -> List[TraversalStrategy]:
        return [
            create_strategy(name, max_workers=self.config.parallel_workers)
            for name in self.config.resolved_strategies()
        ]

    def run(self) -> List[StrategyReport]:
        """Benchmark every configured strategy in order.

        Returns:
            One StrategyReport per strategy

        Raises:
            InvalidArgumentError: If the configuration or root is invalid;
                raised before any timing begins
        """
        self.config.check()
        root = self.config.resolved_root()
        strategies = self._build_strategies()

        logger.debug("Benchmarking %d strategies under %s", len(strategies), root)
        return [self.run_strategy(strategy, root) for strategy in strategies]

    def run_strategy(self, strategy: TraversalStrategy, root: Path) -> StrategyReport:
        """Benchmark one strategy against an already validated root.

        Args:
            strategy: Strategy to benchmark
            root: Canonical root directory

        Returns:
            StrategyReport with the last counts and the mean duration,
            or with the error that aborted the benchmark

        Raises:
            InvalidArgumentError: If the configuration is invalid; raised
                before the strategy is announced or run
        """
        self.config.check()
        report = StrategyReport(name=strategy.name, title=strategy.title)
        self._print(f"\nTEST: {strategy.title}")

        def timed_run() -> Duration:
            result, duration = time_call(lambda: strategy.traverse(root))
            report.result = result
            self._print(f"Completed in: {duration}")
            return duration

        try:
            for _ in range(self.config.warmup_runs):
                strategy.traverse(root)
            report.average = average(self.config.repeat_count, timed_run)
        except (WalkBenchError, RecursionError) as exc:
            report.error = exc
            logger.warning("Strategy %s aborted: %s", strategy.name, exc)
            self._print(f"FAILED: {exc}")
            return report

        self._print(f"{report.result}.")
        self._print(f"Average duration: {report.average.mean_duration}")
        return report
