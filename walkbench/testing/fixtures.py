"""Tree fixtures for walkbench tests and synthetic benchmarks.

Each builder creates a known tree under a caller-owned directory and
returns the TraversalResult every strategy is expected to produce for it.
"""

import os
from pathlib import Path
from typing import Union

from ..core.result import TraversalResult


def symlinks_supported(base: Union[str, Path]) -> bool:
    """Check if symbolic links can be created under ``base``.

    Windows without developer mode, and some mounted filesystems, refuse
    to create links.
    """
    probe = Path(base) / ".walkbench-symlink-probe"
    try:
        os.symlink(str(base), str(probe), target_is_directory=True)
    except (OSError, NotImplementedError):
        return False
    os.unlink(str(probe))
    return True


def create_sample_tree(base: Union[str, Path]) -> TraversalResult:
    """Create the reference tree with a link back to its own root.

    Structure::

        base/
        ├── a.txt
        ├── b.txt
        ├── loop -> base
        └── sub/
            └── c.txt

    ``loop`` counts as one file-like entry and is never descended into.

    Returns:
        The expected result: 4 files (including ``loop``), 2 directories
    """
    base = Path(base)
    (base / "a.txt").write_text("a")
    (base / "b.txt").write_text("b")
    (base / "sub").mkdir()
    (base / "sub" / "c.txt").write_text("c")
    os.symlink(str(base), str(base / "loop"), target_is_directory=True)
    return TraversalResult(file_count=4, directory_count=2)


def generate_tree(base: Union[str, Path],
                  depth: int = 3,
                  breadth: int = 5,
                  files_per_dir: int = 10) -> TraversalResult:
    """Generate a balanced tree without links.

    Every directory above ``depth`` holds ``breadth`` subdirectories;
    every directory, including the leaves, holds ``files_per_dir`` files.

    Args:
        base: Existing directory to populate (it is the root)
        depth: Levels of subdirectories below ``base``
        breadth: Subdirectories per directory
        files_per_dir: Files per directory

    Returns:
        The expected result, counting ``base`` as a directory
    """
    files = 0
    dirs = 1

    def create_level(parent: Path, current_depth: int) -> None:
        nonlocal files, dirs
        for i in range(files_per_dir):
            (parent / f"file_{i}.txt").write_text(f"Content {i}")
            files += 1
        if current_depth >= depth:
            return
        for i in range(breadth):
            subdir = parent / f"dir_{current_depth}_{i}"
            subdir.mkdir()
            dirs += 1
            create_level(subdir, current_depth + 1)

    create_level(Path(base), 0)
    return TraversalResult(file_count=files, directory_count=dirs)
