"""Core abstractions for walkbench.

This package holds the pieces every traversal strategy shares: the node
type, the symlink-safe plain-directory predicate, the filesystem adapter
and the result type.
"""

from .node import EntryKind, FileSystemNode
from .predicate import classify_entry, is_plain_directory, is_symbolic_link
from .adapter import FileSystemAdapter
from .result import TraversalResult

__all__ = [
    "EntryKind",
    "FileSystemNode",
    "classify_entry",
    "is_plain_directory",
    "is_symbolic_link",
    "FileSystemAdapter",
    "TraversalResult",
]
