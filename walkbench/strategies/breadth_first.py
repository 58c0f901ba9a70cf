"""Breadth-first queue traversal."""

from collections import deque
from pathlib import Path
from typing import Deque, Union

from ..core.node import EntryKind
from ..core.result import TraversalResult
from .base import TraversalStrategy


class BreadthFirstQueueStrategy(TraversalStrategy):
    """Expands plain directories level by level from a FIFO queue.

    Dequeue a directory, list and classify its children, count them,
    and enqueue newly found plain subdirectories until the queue is
    empty.
    """

    name = "queue"
    title = "Breadth-First Queue"

    def traverse(self, root: Union[str, Path]) -> TraversalResult:
        queue: Deque[Path] = deque([self.adapter.create_root(root).path])
        files = 0
        dirs = 1  # the root

        while queue:
            directory = queue.popleft()
            for child in self.adapter.list_directory(directory):
                kind = self.adapter.classify(child)
                if kind is EntryKind.PLAIN_DIRECTORY:
                    dirs += 1
                    queue.append(child)
                elif kind is EntryKind.OTHER:
                    files += 1

        return TraversalResult(file_count=files, directory_count=dirs)
