"""Helper functions over the paths examples read from and write to."""

from __future__ import annotations

import glob
import os
import shutil
from pathlib import Path

from loguru import logger

from dualrun.datastructures.type_aliases import ByteSize, PathPattern


def path_exists(path: str | os.PathLike[str]) -> bool:
    """Whether ``path`` is a directory holding at least one entry.

    Wildcards in ``path`` are expanded. Hidden entries such as ``.crc`` files
    count.
    """
    pattern = os.path.join(os.fspath(path), "*")
    return any(True for _ in glob.iglob(pattern, include_hidden=True))


def delete_path(path: str | os.PathLike[str]) -> bool:
    """Recursively delete ``path``, returning whether anything was removed."""
    target = Path(path)
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()
    else:
        return False
    logger.debug("Deleted {}", target)
    return True


def path_size(pattern: PathPattern | os.PathLike[str]) -> ByteSize:
    """Total byte size of the files matched by ``pattern``, directories included."""
    total = 0
    for match in glob.iglob(os.fspath(pattern), include_hidden=True):
        matched = Path(match)
        if matched.is_file():
            total += matched.stat().st_size
        elif matched.is_dir():
            total += sum(
                child.stat().st_size for child in matched.rglob("*") if child.is_file()
            )
    return total


def size_string(size: ByteSize) -> str:
    """Format a byte size in (decimal) gigabytes, e.g. ``"1.5GB"``."""
    return f"{size / (1000 * 1000 * 1000)}GB"
