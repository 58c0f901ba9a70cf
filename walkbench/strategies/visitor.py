"""Visitor-based walk.

A single depth-first traversal drives a :class:`FileVisitor`: one
callback per non-directory on discovery, one per directory once all of
its children have been processed. Directories are counted on post-visit.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ..core.adapter import FileSystemAdapter
from ..core.node import EntryKind
from ..core.result import TraversalResult
from .base import TraversalStrategy


class FileVisitor(ABC):
    """Callbacks invoked synchronously by :func:`walk_file_tree`."""

    @abstractmethod
    def visit_file(self, path: Path) -> None:
        """Called once for each entry that is not a plain directory.

        This includes symbolic links of any kind, which are never
        descended into.
        """
        pass

    @abstractmethod
    def post_visit_directory(self, path: Path) -> None:
        """Called once per plain directory after all its children."""
        pass


class CountingVisitor(FileVisitor):
    """A FileVisitor that counts files and directories."""

    def __init__(self):
        self.files = 0
        self.dirs = 0

    def visit_file(self, path: Path) -> None:
        self.files += 1

    def post_visit_directory(self, path: Path) -> None:
        self.dirs += 1

    def result(self) -> TraversalResult:
        return TraversalResult(file_count=self.files, directory_count=self.dirs)


def walk_file_tree(root: Union[str, Path],
                   visitor: FileVisitor,
                   adapter: Optional[FileSystemAdapter] = None) -> None:
    """Walk a file tree depth-first, driving ``visitor``.

    The root itself gets a ``post_visit_directory`` call. Entries that
    vanish between listing and probing get no callback.

    Args:
        root: Directory to start from
        visitor: Callbacks to invoke
        adapter: Adapter used for listing and classification

    Raises:
        TraversalError: If a directory listing fails
        LinkResolutionError: If an entry cannot be canonicalized
    """
    adapter = adapter or FileSystemAdapter()

    def _walk(directory: Path) -> None:
        for child in adapter.list_directory(directory):
            kind = adapter.classify(child)
            if kind is EntryKind.PLAIN_DIRECTORY:
                _walk(child)
            elif kind is EntryKind.OTHER:
                visitor.visit_file(child)
        visitor.post_visit_directory(directory)

    _walk(Path(root).absolute())


class VisitorWalkStrategy(TraversalStrategy):
    """Counts entries with a visitor driven by :func:`walk_file_tree`."""

    name = "visitor"
    title = "Walk File Tree"

    def traverse(self, root: Union[str, Path]) -> TraversalResult:
        counter = CountingVisitor()
        walk_file_tree(root, counter, self.adapter)
        return counter.result()
