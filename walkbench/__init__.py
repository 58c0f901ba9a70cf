"""walkbench - benchmark harness for recursive directory traversal.

walkbench compares seven interchangeable strategies for counting the files
and directories under a root, and measures their mean wall-clock duration
so you can pick one empirically for a given filesystem.

Every strategy shares one symlink-safe rule for deciding what to descend
into: an entry is a plain directory only if its canonical path equals its
literal path. Links, whatever they point to, count as one file and are
never followed.

Quick start:
    from walkbench import BenchmarkConfig, BenchmarkRunner
    reports = BenchmarkRunner(BenchmarkConfig(root="/data")).run()

Single strategy:
    from walkbench import create_strategy
    result = create_strategy("bfs").traverse("/data")
"""

__version__ = "0.1.0"

from .errors import (
    WalkBenchError,
    InvalidArgumentError,
    LinkResolutionError,
    TraversalError,
)
from .core import (
    EntryKind,
    FileSystemNode,
    FileSystemAdapter,
    TraversalResult,
    classify_entry,
    is_plain_directory,
)
from .strategies import (
    TraversalStrategy,
    available_strategies,
    create_strategy,
)
from .timing import Duration, Timer, AverageResult, time_call, average
from .config import BenchmarkConfig
from .harness import BenchmarkRunner, StrategyReport

__all__ = [
    "__version__",
    "WalkBenchError",
    "InvalidArgumentError",
    "LinkResolutionError",
    "TraversalError",
    "EntryKind",
    "FileSystemNode",
    "FileSystemAdapter",
    "TraversalResult",
    "classify_entry",
    "is_plain_directory",
    "TraversalStrategy",
    "available_strategies",
    "create_strategy",
    "Duration",
    "Timer",
    "AverageResult",
    "time_call",
    "average",
    "BenchmarkConfig",
    "BenchmarkRunner",
    "StrategyReport",
]
