"""Declarative enumeration strategies.

The whole tree is exposed as a lazy sequence of classified nodes, then
partitioned by kind and each partition counted. The parallel variant
enumerates the root's subdirectories on worker threads and reduces the
per-subtree results; no counter is shared between workers.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterator, Optional, Union

from ..core.adapter import FileSystemAdapter
from ..core.node import FileSystemNode
from ..core.result import TraversalResult
from .base import TraversalStrategy

logger = logging.getLogger(__name__)


def iter_tree(root: Union[str, Path, FileSystemNode],
              adapter: Optional[FileSystemAdapter] = None) -> Iterator[FileSystemNode]:
    """Lazily enumerate every node in the tree, depth-first pre-order.

    The root node is yielded first. Symbolic links are yielded as leaf
    nodes and never expanded.

    Args:
        root: Directory (or an existing node) to start from
        adapter: Adapter used for listing and classification

    Yields:
        FileSystemNode for the root and each descendant
    """
    adapter = adapter or FileSystemAdapter()
    if not isinstance(root, FileSystemNode):
        root = adapter.create_root(root)

    def _traverse_recursive(node: FileSystemNode) -> Iterator[FileSystemNode]:
        yield node
        if not node.is_leaf():
            for child in adapter.get_children(node):
                yield from _traverse_recursive(child)

    yield from _traverse_recursive(root)


class SequentialStreamStrategy(TraversalStrategy):
    """Single-threaded enumerate-then-partition."""

    name = "stream_sequential"
    title = "Stream Sequential"

    def traverse(self, root: Union[str, Path]) -> TraversalResult:
        return TraversalResult.from_nodes(iter_tree(root, self.adapter))


class ParallelStreamStrategy(TraversalStrategy):
    """Enumerate-then-partition, fanned out over a thread pool.

    The root's children are listed on the calling thread; each plain
    subdirectory's subtree is then enumerated and partitioned by one
    worker. Visitation order is unobserved; only the reduced counts
    matter, and they equal the sequential variant's.
    """

    name = "stream_parallel"
    title = "Stream Parallel"

    def __init__(self,
                 adapter: Optional[FileSystemAdapter] = None,
                 max_workers: Optional[int] = None):
        """Initialize the strategy.

        Args:
            adapter: FileSystemAdapter used for listing and classification
            max_workers: Worker thread count (None = executor default)
        """
        super().__init__(adapter)
        self.max_workers = max_workers

    def _count_subtree(self, node: FileSystemNode) -> TraversalResult:
        return TraversalResult.from_nodes(iter_tree(node, self.adapter))

    def traverse(self, root: Union[str, Path]) -> TraversalResult:
        root_node = self.adapter.create_root(root)
        subdirs = []
        total = TraversalResult(directory_count=1)
        for child in self.adapter.get_children(root_node):
            if child.is_leaf():
                total = total + TraversalResult(file_count=1)
            else:
                subdirs.append(child)

        if not subdirs:
            return total

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(self._count_subtree, node) for node in subdirs]
            try:
                for future in as_completed(futures):
                    total = total + future.result()
            except Exception:
                # Fail fast: drop subtrees that have not started yet
                for future in futures:
                    future.cancel()
                logger.debug("Parallel traversal of %s aborted", root_node.path)
                raise
        return total
