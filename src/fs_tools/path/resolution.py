"""Path resolution and type checks."""

import os
from datetime import datetime

from fs_tools.core import get_logger

logger = get_logger(__name__)


def abs_path(path: str) -> str:
    """Return the absolute, OS-native form of a path, even if it does not exist.

    Symlinks are not resolved. Running ``abs_path("./does/not/exist")`` from
    ``/home/user`` gives ``/home/user/does/not/exist``.
    """
    return os.path.abspath(path)


def exists(path: str) -> bool:
    """Determine whether a file or directory exists."""
    if not path:
        return False

    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        # The path may exist but be unreachable (e.g. a parent without search
        # permission); treat it as missing rather than failing a predicate.
        logger.debug("Stat failed during existence check", path=path, error=str(e))
        return False

    return True


def is_file(path: str) -> bool:
    """Determine whether the path represents something other than a directory."""
    return exists(path) and not os.path.isdir(path)


def is_directory(path: str) -> bool:
    """Determine whether the path represents a directory."""
    return exists(path) and os.path.isdir(path)


def is_symlink(path: str) -> bool:
    """Determine whether the path is a symbolic link with a non-empty target."""
    try:
        return len(os.readlink(path)) > 0
    except (OSError, ValueError):
        return False


def symlink(target: str, name: str) -> None:
    """Create a symbolic link ``name`` pointing at ``target``."""
    logger.debug("Creating symlink", target=target, name=name)
    os.symlink(target, name)


def last_modified(path: str) -> datetime:
    """Identify the last time the path was modified.

    Raises:
        FileNotFoundError: If the path does not exist
    """
    return datetime.fromtimestamp(os.stat(path).st_mtime)
