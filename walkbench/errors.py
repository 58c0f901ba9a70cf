"""Exceptions raised by walkbench.

Every error carries enough context (path, underlying cause) to be
actionable. Nothing here is retried: a traversal either completes against
a single consistent view of the filesystem or fails.
"""

from pathlib import Path
from typing import Optional, Union


class WalkBenchError(Exception):
    """Base class for all walkbench errors."""
    pass


class InvalidArgumentError(WalkBenchError, ValueError):
    """Raised for bad input detected before any timing begins.

    Examples: a non-positive repeat count, an unknown strategy name,
    or a root path that does not exist or is not a directory.
    """
    pass


class _PathError(WalkBenchError):
    """Error tied to a specific filesystem path."""

    action = "access"

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        message = f"Could not {self.action} '{self.path}'"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class LinkResolutionError(_PathError):
    """Raised when the canonical path of an entry cannot be resolved.

    Typical causes are permission denied on an ancestor, an I/O error,
    or a dangling mount point.
    """

    action = "resolve canonical path of"


class TraversalError(_PathError):
    """Raised when a directory listing could not be obtained.

    Aborts the current traversal. The benchmark runner catches it at
    the strategy boundary so other strategies still run.
    """

    action = "list directory"
