"""Traversal result value type."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from .node import EntryKind, FileSystemNode


@dataclass(frozen=True)
class TraversalResult:
    """Counts produced by one traversal.

    Every strategy applies the same counting policy, so results from
    different strategies over the same tree compare equal:

    - the root contributes 1 to ``directory_count``
    - each descendant plain directory contributes 1 to ``directory_count``
    - each other descendant (files, symlinks, special files) contributes
      1 to ``file_count``
    """

    file_count: int = 0
    directory_count: int = 0

    def __post_init__(self):
        if self.file_count < 0 or self.directory_count < 0:
            raise ValueError("Traversal counts cannot be negative")

    @property
    def total(self) -> int:
        """Number of entries visited."""
        return self.file_count + self.directory_count

    def __add__(self, other: "TraversalResult") -> "TraversalResult":
        if not isinstance(other, TraversalResult):
            return NotImplemented
        return TraversalResult(
            file_count=self.file_count + other.file_count,
            directory_count=self.directory_count + other.directory_count,
        )

    def __str__(self) -> str:
        return f"Files: {self.file_count}, dirs: {self.directory_count}"

    @classmethod
    def from_nodes(cls, nodes: Iterable[FileSystemNode]) -> "TraversalResult":
        """Partition a sequence of nodes by kind and count each partition.

        MISSING nodes are counted in neither partition.
        """
        counts = Counter(node.kind for node in nodes)
        return cls(
            file_count=counts[EntryKind.OTHER],
            directory_count=counts[EntryKind.PLAIN_DIRECTORY],
        )
