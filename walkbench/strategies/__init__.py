"""Traversal strategies for walkbench.

Seven interchangeable ways to count the files and directories under a
root. They exist to be benchmarked against each other, not to offer
different features: all of them return identical results on the same
tree.
"""

from typing import Dict, List, Type

from ..errors import InvalidArgumentError
from .base import TraversalStrategy
from .visitor import FileVisitor, CountingVisitor, walk_file_tree, VisitorWalkStrategy
from .stream import iter_tree, SequentialStreamStrategy, ParallelStreamStrategy
from .recursive import count_recursive, RecursiveDescentStrategy, ExplicitStackStrategy
from .library import LibraryIteratorStrategy
from .breadth_first import BreadthFirstQueueStrategy

# Benchmark order
STRATEGY_CLASSES: List[Type[TraversalStrategy]] = [
    VisitorWalkStrategy,
    SequentialStreamStrategy,
    ParallelStreamStrategy,
    RecursiveDescentStrategy,
    LibraryIteratorStrategy,
    ExplicitStackStrategy,
    BreadthFirstQueueStrategy,
]

_ALIASES: Dict[str, str] = {
    'walk_file_tree': 'visitor',
    'sequential': 'stream_sequential',
    'parallel': 'stream_parallel',
    'list_files_recursive': 'recursive',
    'os_walk': 'library_iterator',
    'stack': 'explicit_stack',
    'breadth_first': 'queue',
    'bfs': 'queue',
}


def available_strategies() -> List[str]:
    """Canonical strategy names, in benchmark order."""
    return [cls.name for cls in STRATEGY_CLASSES]


def resolve_strategy_name(name: str) -> str:
    """Map a strategy name or alias to its canonical name.

    Raises:
        InvalidArgumentError: If the name is not recognized
    """
    key = name.lower().replace('-', '_')
    key = _ALIASES.get(key, key)
    if key not in available_strategies():
        choices = available_strategies() + sorted(_ALIASES)
        raise InvalidArgumentError(
            f"Unknown traversal strategy: {name}. "
            f"Choose from: {', '.join(choices)}"
        )
    return key


def create_strategy(name: str, **options) -> TraversalStrategy:
    """Create a strategy instance by name.

    Args:
        name: Strategy name or alias (e.g. 'visitor', 'bfs', 'os_walk')
        **options: Constructor options. ``max_workers`` is only passed to
            the parallel strategy; ``adapter`` goes to all of them.

    Returns:
        TraversalStrategy instance

    Raises:
        InvalidArgumentError: If the strategy name is not recognized
    """
    canonical = resolve_strategy_name(name)
    cls = next(c for c in STRATEGY_CLASSES if c.name == canonical)

    kwargs = {}
    if 'adapter' in options:
        kwargs['adapter'] = options['adapter']
    if cls is ParallelStreamStrategy and options.get('max_workers') is not None:
        kwargs['max_workers'] = options['max_workers']
    return cls(**kwargs)


__all__ = [
    'TraversalStrategy',
    'FileVisitor',
    'CountingVisitor',
    'walk_file_tree',
    'VisitorWalkStrategy',
    'iter_tree',
    'SequentialStreamStrategy',
    'ParallelStreamStrategy',
    'count_recursive',
    'RecursiveDescentStrategy',
    'ExplicitStackStrategy',
    'LibraryIteratorStrategy',
    'BreadthFirstQueueStrategy',
    'STRATEGY_CLASSES',
    'available_strategies',
    'resolve_strategy_name',
    'create_strategy',
]
