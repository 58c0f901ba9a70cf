"""FileSystemNode abstraction for walkbench.

A node is intentionally a small, read-only data container: a path plus
the classification the plain-directory predicate assigned to it. How to
list children is the adapter's job, not the node's.
"""

from enum import Enum
from pathlib import Path
from typing import Union


class EntryKind(Enum):
    """How a directory entry takes part in counting and descent."""
    PLAIN_DIRECTORY = "directory"   # Real directory: counted and descended into
    OTHER = "file"                  # Regular file, symlink of any kind, special file
    MISSING = "missing"             # Vanished between listing and probing


class FileSystemNode:
    """A single entry observed during one traversal.

    Nodes are never mutated and never outlive the traversal that
    produced them. Equality and hashing are based on the identifier,
    so nodes can be stored in sets and used as dict keys.
    """

    __slots__ = ("path", "kind")

    def __init__(self, path: Union[str, Path], kind: EntryKind):
        """Initialize a filesystem node.

        Args:
            path: Path to the entry
            kind: Classification assigned by the plain-directory predicate
        """
        self.path = Path(path) if isinstance(path, str) else path
        self.kind = kind

    def identifier(self) -> str:
        """Return the path as unique identifier."""
        return str(self.path)

    def is_leaf(self) -> bool:
        """Check if this node must not be descended into."""
        return self.kind is not EntryKind.PLAIN_DIRECTORY

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.PLAIN_DIRECTORY

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"FileSystemNode(path={self.path!r}, kind={self.kind.name})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, FileSystemNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())
