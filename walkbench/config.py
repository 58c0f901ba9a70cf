"""Configuration system for walkbench.

A BenchmarkConfig says what to benchmark (root, strategies) and how
(repeat count, warm-up runs, parallel workers). Configuration comes
only from code or command-line arguments.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .errors import InvalidArgumentError
from .strategies import available_strategies, resolve_strategy_name

DEFAULT_REPEAT_COUNT = 5


@dataclass
class BenchmarkConfig:
    """Complete configuration for one benchmark run."""

    # What to traverse
    root: Union[str, Path] = "."

    # Strategy names or aliases, benchmarked in this order
    strategies: List[str] = field(default_factory=available_strategies)

    # Timed runs per strategy
    repeat_count: int = DEFAULT_REPEAT_COUNT

    # Untimed priming runs per strategy, discarded before timing
    warmup_runs: int = 0

    # Worker threads for the parallel strategy (None = executor default)
    parallel_workers: Optional[int] = None

    # Convenience constructors for common configurations

    @classmethod
    def quick(cls, root: Union[str, Path] = ".") -> 'BenchmarkConfig':
        """Create config for a single unprimed run of every strategy."""
        return cls(root=root, repeat_count=1, warmup_runs=0)

    @classmethod
    def primed(cls,
               root: Union[str, Path] = ".",
               repeat_count: int = DEFAULT_REPEAT_COUNT) -> 'BenchmarkConfig':
        """Create config that primes filesystem caches before timing.

        One discarded run per strategy makes the first timed run less
        dependent on what ran before it.
        """
        return cls(root=root, repeat_count=repeat_count, warmup_runs=1)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if isinstance(self.repeat_count, bool) or not isinstance(self.repeat_count, int):
            errors.append("repeat_count must be an integer")
        elif self.repeat_count <= 0:
            errors.append("repeat_count must be positive")

        if isinstance(self.warmup_runs, bool) or not isinstance(self.warmup_runs, int):
            errors.append("warmup_runs must be an integer")
        elif self.warmup_runs < 0:
            errors.append("warmup_runs cannot be negative")

        if self.parallel_workers is not None and (
                isinstance(self.parallel_workers, bool)
                or not isinstance(self.parallel_workers, int)
                or self.parallel_workers <= 0):
            errors.append("parallel_workers must be a positive integer")

        if not self.strategies:
            errors.append("at least one strategy is required")
        for name in self.strategies:
            try:
                resolve_strategy_name(name)
            except InvalidArgumentError as exc:
                errors.append(str(exc))

        return errors

    def check(self) -> None:
        """Raise if the configuration is invalid.

        Raises:
            InvalidArgumentError: Listing every validation error
        """
        errors = self.validate()
        if errors:
            raise InvalidArgumentError(f"Invalid configuration: {'; '.join(errors)}")

    def resolved_root(self) -> Path:
        """Normalize the root to an absolute, symlink-resolved path.

        Link comparisons made during traversal are only well defined
        against a canonical root.

        Raises:
            InvalidArgumentError: If the root is missing or not a directory
        """
        try:
            root = Path(self.root).resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise InvalidArgumentError(f"Root path does not exist: {self.root} ({exc})") from exc
        if not root.is_dir():
            raise InvalidArgumentError(f"Root path is not a directory: {root}")
        return root

    def resolved_strategies(self) -> List[str]:
        """Canonical names of the configured strategies, in order."""
        return [resolve_strategy_name(name) for name in self.strategies]
