"""Command-line entry point for walkbench.

Usage:
    walkbench                          # Benchmark every strategy under cwd
    walkbench /data -n 10              # Ten timed runs per strategy
    walkbench -s visitor -s bfs        # Only the named strategies
    walkbench --warmup 1               # Prime caches before timing
    walkbench --generate 3 5 10        # Benchmark a synthetic tree
    walkbench --list                   # Show strategy names and aliases

For the least biased comparison, benchmark one strategy per execution
and prime with a warm-up run whose result is discarded.
"""

import argparse
import logging
import sys
import tempfile
from typing import List, Optional

from . import __version__
from .config import BenchmarkConfig, DEFAULT_REPEAT_COUNT
from .errors import InvalidArgumentError
from .harness import BenchmarkRunner, format_summary
from .logging_setup import setup_logging
from .strategies import STRATEGY_CLASSES
from .testing.fixtures import generate_tree

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="walkbench",
        description="Benchmark strategies for recursively counting files and directories",
    )
    parser.add_argument("root", nargs="?", default=".",
                        help="Directory to traverse (default: current directory)")
    parser.add_argument("-n", "--repeat", type=int, default=DEFAULT_REPEAT_COUNT,
                        help=f"Timed runs per strategy (default: {DEFAULT_REPEAT_COUNT})")
    parser.add_argument("-s", "--strategy", action="append", dest="strategies",
                        metavar="NAME", help="Strategy to benchmark (repeatable; default: all)")
    parser.add_argument("--warmup", type=int, default=0,
                        help="Untimed priming runs per strategy (default: 0)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker threads for the parallel strategy")
    parser.add_argument("--generate", type=int, nargs=3, metavar=("DEPTH", "BREADTH", "FILES"),
                        help="Benchmark a generated tree in a temporary directory instead of ROOT")
    parser.add_argument("--list", action="store_true", help="List strategies and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def list_strategies() -> str:
    lines = []
    for index, cls in enumerate(STRATEGY_CLASSES, start=1):
        lines.append(f"{index}. {cls.name:<18} {cls.title}")
    return "\n".join(lines)


def run_benchmark(config: BenchmarkConfig) -> int:
    """Run the benchmark and print results and a summary.

    Returns:
        Process exit code
    """
    runner = BenchmarkRunner(config)
    reports = runner.run()
    print()
    print(format_summary(reports))
    if all(report.succeeded for report in reports):
        return EXIT_OK
    return EXIT_FAILED


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.list:
        print(list_strategies())
        return EXIT_OK

    config = BenchmarkConfig(
        root=args.root,
        repeat_count=args.repeat,
        warmup_runs=args.warmup,
        parallel_workers=args.workers,
    )
    if args.strategies:
        config.strategies = args.strategies

    try:
        if args.generate:
            depth, breadth, files = args.generate
            with tempfile.TemporaryDirectory(prefix="walkbench-") as tmpdir:
                expected = generate_tree(tmpdir, depth=depth, breadth=breadth,
                                         files_per_dir=files)
                print(f"Generated tree at {tmpdir}: {expected}")
                config.root = tmpdir
                return run_benchmark(config)
        return run_benchmark(config)
    except InvalidArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
