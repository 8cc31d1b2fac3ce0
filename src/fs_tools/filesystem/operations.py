"""File and directory operations.

Most helpers here are designed to "guarantee" that a resource does or does
not exist, abstracting common filesystem chores into small calls.
"""

import math
import os
import shutil
from typing import Optional

from fs_tools.core import get_logger
from fs_tools.core.exceptions import UnrecoverableError
from fs_tools.listing.walker import iter_tree
from fs_tools.path import abs_path, exists, is_file
from fs_tools.schemas import TouchOptions, WriteOptions

logger = get_logger(__name__)

KB: float = 1024
MB: float = 1024 * KB
GB: float = 1024 * MB
TB: float = 1024 * GB
PB: float = 1024 * TB

_SIZE_UNITS = (("PB", PB), ("TB", TB), ("GB", GB), ("MB", MB), ("KB", KB))


def mkdirp(path: str) -> str:
    """Create the full directory path if it does not already exist (``mkdir -p``).

    Returns:
        The absolute path of the directory
    """
    path = abs_path(path)
    os.makedirs(path, exist_ok=True)
    return path


def touch(path: str, options: Optional[TouchOptions] = None) -> str:
    """Create a file or directory if it does not already exist.

    A missing path with an extension is created as an empty file, anything
    else as a directory tree. ``options.force_file`` treats an
    extension-less path as a file; ``options.force_directory`` treats a
    path as a directory even when it has an extension, and wins over
    ``force_file``.

    Args:
        path: Path to create
        options: Flags overriding the extension heuristic

    Returns:
        The absolute path

    Raises:
        UnrecoverableError: If the file cannot be created
    """
    options = options or TouchOptions()
    path = abs_path(path)

    if exists(path):
        return path

    _, ext = os.path.splitext(path)
    if not options.force_directory and (options.force_file or ext):
        mkdirp(os.path.dirname(path))
        try:
            with open(path, "a"):
                pass
        except OSError as e:
            error_msg = f"Failed to create file '{path}': {e}"
            logger.error(error_msg, error=str(e))
            raise UnrecoverableError(error_msg) from e
        logger.debug("Touched file", path=path)
    else:
        mkdirp(path)
        logger.debug("Touched directory", path=path)

    return path


def clean(path: str) -> str:
    """Ensure the directory exists and is empty.

    Existing contents are deleted; a missing directory is created. If the
    path is a file, its parent directory is cleaned instead.

    Returns:
        The absolute path of the cleaned directory
    """
    path = abs_path(path)
    if is_file(path):
        path = os.path.dirname(path)

    if exists(path):
        logger.info("Cleaning directory", path=path)
        shutil.rmtree(path)

    return mkdirp(path)


def write_text_file(
    path: str, content: str, options: Optional[WriteOptions] = None
) -> str:
    """Write text to a file, creating it and its parents if necessary.

    Args:
        path: File to write
        content: Text written as UTF-8, replacing existing content
        options: Optional permission bits applied after writing

    Returns:
        The absolute path of the file
    """
    options = options or WriteOptions()
    path = touch(path, TouchOptions(force_file=True))

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    if options.permissions is not None:
        os.chmod(path, options.permissions)

    return path


def read_text_file(path: str) -> str:
    """Read a UTF-8 text file."""
    with open(abs_path(path), encoding="utf-8") as f:
        return f.read()


def byte_size(path: str) -> int:
    """Return the number of bytes used by a file, or by all files under a directory.

    Symlinks are counted by their own size and never followed.

    Raises:
        FileNotFoundError: If the path does not exist
        OSError: If any node cannot be inspected
    """
    return sum(
        entry.size for entry in iter_tree(abs_path(path)) if not entry.is_directory
    )


def _round_half_up(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100


def format_size(size_bytes: int, sigfigs: int = 2) -> str:
    """Return a human-readable representation of a byte count, such as ``3.14MB``.

    Args:
        size_bytes: Number of bytes
        sigfigs: Decimal places shown for KB and above

    Returns:
        Formatted size; plain bytes (``512B``) below one kilobyte
    """
    for unit, threshold in _SIZE_UNITS:
        if size_bytes >= threshold:
            return f"{_round_half_up(size_bytes / threshold):.{sigfigs}f}{unit}"

    return f"{size_bytes}B"


def size(path: str, sigfigs: int = 2) -> str:
    """Return the human-readable size of a file or directory."""
    return format_size(byte_size(path), sigfigs)
