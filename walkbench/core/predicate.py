"""Symlink-safe plain-directory predicate.

An entry is a *plain directory* iff the filesystem reports it as a
directory AND its canonical (symlink-resolved) absolute path is identical
to its literal absolute path. The literal path is built from the canonical
form of the parent plus the entry's own name, so a symlinked ancestor of
the traversal root does not make every entry look like a link.

Comparing canonical against literal paths detects a link portably,
without relying on a platform "is symlink" flag that may disagree with
how links are actually followed. Any directory entry whose canonical form
differs is a link and must never be descended into, wherever it points.
This is what stops infinite recursion on cyclic links and double counting
of subtrees reachable through two links.
"""

import errno
import os
from pathlib import Path
from typing import Optional, Union

from ..errors import LinkResolutionError
from .node import EntryKind


def _canonical(path: Path) -> Optional[Path]:
    """Resolve ``path`` to its canonical form.

    Returns:
        The canonical path, or None if the entry vanished meanwhile

    Raises:
        LinkResolutionError: If resolution fails for any other reason
    """
    try:
        return path.resolve(strict=True)
    except FileNotFoundError:
        return None
    except (OSError, RuntimeError) as exc:
        # RuntimeError is how older interpreters report a symlink loop
        raise LinkResolutionError(path, exc) from exc


def _is_link_loop(exc: Optional[BaseException]) -> bool:
    if isinstance(exc, RuntimeError):
        return True
    return isinstance(exc, OSError) and exc.errno == errno.ELOOP


def _literal(path: Path) -> Optional[Path]:
    """Absolute path of ``path`` with its parent canonicalized."""
    parent = path.parent
    if parent == path:
        return path
    canonical_parent = _canonical(parent)
    if canonical_parent is None:
        return None
    return canonical_parent / path.name


def classify_entry(path: Union[str, Path]) -> EntryKind:
    """Classify a directory entry for counting and descent.

    Args:
        path: Entry to classify (normally a child produced by a listing)

    Returns:
        PLAIN_DIRECTORY for a real directory, OTHER for anything else
        (regular files, special files, symlinks to anything including
        dangling and self-referencing links), MISSING if the entry no
        longer exists when probed.

    Raises:
        LinkResolutionError: If the canonical path cannot be resolved
    """
    path = Path(path).absolute()

    try:
        os.lstat(path)
    except FileNotFoundError:
        return EntryKind.MISSING
    except OSError as exc:
        raise LinkResolutionError(path, exc) from exc

    # Follows links; False for dangling links and link loops
    if not os.path.isdir(path):
        return EntryKind.OTHER

    literal = _literal(path)
    if literal is None:
        return EntryKind.MISSING
    canonical = _canonical(literal)
    if canonical is None:
        return EntryKind.MISSING

    if canonical == literal:
        return EntryKind.PLAIN_DIRECTORY
    return EntryKind.OTHER


def is_plain_directory(path: Union[str, Path]) -> bool:
    """Check if ``path`` is a directory that is not a symbolic link.

    Args:
        path: Entry to test

    Returns:
        True if the entry is a directory whose canonical and literal
        absolute paths coincide. False for files, links and entries
        that no longer exist.

    Raises:
        LinkResolutionError: If the canonical path cannot be resolved
    """
    return classify_entry(path) is EntryKind.PLAIN_DIRECTORY


def is_symbolic_link(path: Union[str, Path]) -> bool:
    """Check if ``path`` is likely a symbolic link, by path comparison.

    Unlike :func:`os.path.islink` this also reports entries reached
    through a link, since their canonical form differs from the
    literal one. Links in a cycle, including a link to itself, are
    links too.

    Raises:
        LinkResolutionError: If the canonical path cannot be resolved
            for a reason other than a link cycle
    """
    path = Path(path).absolute()
    literal = _literal(path)
    if literal is None:
        return False
    try:
        canonical = _canonical(literal)
    except LinkResolutionError as exc:
        # Self-referencing or cyclic link
        if _is_link_loop(exc.cause) and os.path.lexists(literal):
            return True
        raise
    if canonical is None:
        # Dangling: the link itself exists but points nowhere
        return os.path.lexists(literal)
    return canonical != literal
