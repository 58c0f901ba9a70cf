"""Filesystem adapter for walkbench.

The adapter holds the navigation logic shared by the traversal
strategies: listing a directory (fail-fast, handle released before the
caller recurses) and turning listed paths into classified nodes.
"""

import os
from pathlib import Path
from typing import Iterator, List, Union

from ..errors import TraversalError
from .node import EntryKind, FileSystemNode
from .predicate import classify_entry


class FileSystemAdapter:
    """Adapter for read-only filesystem traversal.

    Listing failures are never swallowed: the first directory that
    cannot be listed raises :class:`TraversalError`, aborting the
    traversal.
    """

    def list_directory(self, path: Union[str, Path]) -> List[Path]:
        """List the direct children of a directory.

        The directory handle is closed before this returns, so callers
        can recurse without accumulating open handles on deep or wide
        trees.

        Args:
            path: Directory to list

        Returns:
            Paths of the direct children, in filesystem order

        Raises:
            TraversalError: If the listing could not be obtained
        """
        try:
            with os.scandir(path) as entries:
                return [Path(entry.path) for entry in entries]
        except OSError as exc:
            raise TraversalError(path, exc) from exc

    def classify(self, path: Union[str, Path]) -> EntryKind:
        """Classify a listed entry with the plain-directory predicate."""
        return classify_entry(path)

    def create_root(self, path: Union[str, Path]) -> FileSystemNode:
        """Create the node a traversal starts from.

        The root is never filtered by the predicate: it always counts as
        one directory, even if it is reached through a link.
        """
        return FileSystemNode(Path(path).absolute(), EntryKind.PLAIN_DIRECTORY)

    def get_children(self, node: FileSystemNode) -> Iterator[FileSystemNode]:
        """Get classified child nodes, skipping entries that vanished.

        Leaf nodes have no children. The listing is materialized before
        the first child is yielded.
        """
        if node.is_leaf():
            return
        for child_path in self.list_directory(node.path):
            kind = self.classify(child_path)
            if kind is EntryKind.MISSING:
                continue
            yield FileSystemNode(child_path, kind)
