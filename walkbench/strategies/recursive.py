"""Recursive-descent strategies.

Both variants list a directory, classify each child and descend into
plain subdirectories. The first uses the interpreter call stack and
returns an owned result per call that the caller sums. The second keeps
an explicit stack and so is not bounded by the recursion limit.
"""

from pathlib import Path
from typing import List, Optional, Union

from ..core.adapter import FileSystemAdapter
from ..core.node import EntryKind
from ..core.result import TraversalResult
from .base import TraversalStrategy


def count_recursive(directory: Union[str, Path],
                    adapter: Optional[FileSystemAdapter] = None) -> TraversalResult:
    """Recursively count the descendants of ``directory``.

    Note: the directory itself is not counted. Add one directory to the
    result to include it.

    Args:
        directory: Directory to recurse from
        adapter: Adapter used for listing and classification

    Returns:
        Counts of all descendants

    Raises:
        TraversalError: If a directory listing fails
        LinkResolutionError: If an entry cannot be canonicalized
    """
    adapter = adapter or FileSystemAdapter()
    files = 0
    dirs = 0
    for child in adapter.list_directory(directory):
        kind = adapter.classify(child)
        if kind is EntryKind.PLAIN_DIRECTORY:
            sub = count_recursive(child, adapter)
            files += sub.file_count
            dirs += sub.directory_count + 1
        elif kind is EntryKind.OTHER:
            files += 1
    return TraversalResult(file_count=files, directory_count=dirs)


class RecursiveDescentStrategy(TraversalStrategy):
    """Synchronous recursion on the call stack."""

    name = "recursive"
    title = "List Files Recursive"

    def traverse(self, root: Union[str, Path]) -> TraversalResult:
        root_path = self.adapter.create_root(root).path
        return count_recursive(root_path, self.adapter) + TraversalResult(directory_count=1)


class ExplicitStackStrategy(TraversalStrategy):
    """Same semantics as recursive descent, with an explicit LIFO stack."""

    name = "explicit_stack"
    title = "Explicit Stack"

    def traverse(self, root: Union[str, Path]) -> TraversalResult:
        stack: List[Path] = [self.adapter.create_root(root).path]
        files = 0
        dirs = 1  # the root

        while stack:
            directory = stack.pop()
            for child in self.adapter.list_directory(directory):
                kind = self.adapter.classify(child)
                if kind is EntryKind.PLAIN_DIRECTORY:
                    dirs += 1
                    stack.append(child)
                elif kind is EntryKind.OTHER:
                    files += 1

        return TraversalResult(file_count=files, directory_count=dirs)
