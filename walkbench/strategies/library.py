"""Library-provided recursive iterator.

Uses :func:`os.walk`. Its own notion of "directory" follows symlinks, so
every yielded name is re-classified with the plain-directory predicate
and only plain directories are kept for descent. ``os.walk`` silently
ignores listing errors by default; the ``onerror`` hook turns them into
a fail-fast ``TraversalError``.
"""

import os
from pathlib import Path
from typing import NoReturn, Union

from ..core.node import EntryKind
from ..core.result import TraversalResult
from ..errors import TraversalError
from .base import TraversalStrategy
from .recursive import count_recursive


def _raise_listing_error(exc: OSError) -> NoReturn:
    raise TraversalError(exc.filename or "<unknown>", exc) from exc


class LibraryIteratorStrategy(TraversalStrategy):
    """Counts entries yielded by ``os.walk(followlinks=False)``."""

    name = "library_iterator"
    title = "os.walk"

    def traverse(self, root: Union[str, Path]) -> TraversalResult:
        top = self.adapter.create_root(root).path
        files = 0
        dirs = 1  # the root

        for dirpath, dirnames, filenames in os.walk(top, onerror=_raise_listing_error,
                                                    followlinks=False):
            descend = []
            for name in dirnames:
                kind = self.adapter.classify(os.path.join(dirpath, name))
                if kind is EntryKind.PLAIN_DIRECTORY:
                    dirs += 1
                    descend.append(name)
                elif kind is EntryKind.OTHER:
                    files += 1
            for name in filenames:
                kind = self.adapter.classify(os.path.join(dirpath, name))
                if kind is EntryKind.PLAIN_DIRECTORY:
                    # Became a directory after listing; os.walk will not descend it
                    late = count_recursive(os.path.join(dirpath, name), self.adapter)
                    files += late.file_count
                    dirs += late.directory_count + 1
                elif kind is EntryKind.OTHER:
                    files += 1
            # Prune in place so os.walk only descends plain directories
            dirnames[:] = descend

        return TraversalResult(file_count=files, directory_count=dirs)
