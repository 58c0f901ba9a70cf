"""Traversal strategy base class for walkbench.

Strategies implement different mechanisms for walking a directory tree.
They are interchangeable black boxes: all of them apply the same
counting policy and must return identical results on the same tree.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ..core.adapter import FileSystemAdapter
from ..core.result import TraversalResult


class TraversalStrategy(ABC):
    """Abstract base class for tree traversal strategies.

    Every strategy is fail-fast: the first directory that cannot be
    listed aborts the traversal with ``TraversalError``, and a failed
    canonical-path resolution propagates as ``LinkResolutionError``.
    """

    #: Registry name used by ``create_strategy``
    name: str = ""
    #: Human readable label used in benchmark output
    title: str = ""

    def __init__(self, adapter: Optional[FileSystemAdapter] = None):
        """Initialize strategy with an adapter.

        Args:
            adapter: FileSystemAdapter used for listing and classification
        """
        self.adapter = adapter or FileSystemAdapter()

    @abstractmethod
    def traverse(self, root: Union[str, Path]) -> TraversalResult:
        """Walk the tree under ``root`` and count its entries.

        Args:
            root: Directory to start from. It always counts as one
                directory and is never filtered by the predicate.

        Returns:
            A fresh TraversalResult

        Raises:
            TraversalError: If a directory listing fails
            LinkResolutionError: If an entry cannot be canonicalized
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
