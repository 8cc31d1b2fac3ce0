"""Directory tree traversal with glob-based exclusion.

This module provides the recursive and shallow directory walkers used by the
listing operations and by the transfer and archive modules.
"""

import os
import stat
from collections.abc import Callable, Collection, Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fs_tools.core import get_logger, get_tracer
from fs_tools.listing.ignore import is_ignored_path, validate_pattern
from fs_tools.path import abs_path
from fs_tools.schemas import ListOptions, TraversalMode

logger = get_logger(__name__)
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class PathEntry:
    """A filesystem node visited by a walk.

    Attributes:
        absolute_path: Fully resolved path of the node
        is_directory: True if the node is a directory
        size: Size in bytes as reported by stat
        modified: Last modification time
    """

    absolute_path: str
    is_directory: bool
    size: int
    modified: datetime

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> "PathEntry":
        return cls(
            absolute_path=path,
            is_directory=stat.S_ISDIR(st.st_mode),
            size=st.st_size,
            modified=datetime.fromtimestamp(st.st_mtime),
        )


def iter_tree(
    root: str,
    ignore: tuple[str, ...] = (),
    on_error: Optional[Callable[[OSError], None]] = None,
    prune: Collection[str] = (),
) -> Iterator[PathEntry]:
    """Yield ``root`` and its descendants depth-first, pre-order.

    Nodes are stat-ed without following symlinks, so a link to a directory
    is yielded as a non-directory and never descended. Children are visited
    in lexical name order. A node matching ``ignore``, or whose path is in
    ``prune``, is skipped along with its subtree. A directory is listed only
    after its own entry has been consumed.

    Args:
        root: Absolute path to start from
        ignore: Glob patterns of paths to skip
        on_error: Called with the ``OSError`` when a descendant cannot be
            stat-ed or listed; that branch is then skipped. Without it the
            error propagates. Failures on ``root`` itself always propagate.
        prune: Absolute paths to skip, e.g. a destination inside the tree

    Raises:
        FileNotFoundError: If ``root`` does not exist
        OSError: If a node cannot be stat-ed or a directory cannot be read
    """
    stack = [root]
    while stack:
        path = stack.pop()
        if path in prune or is_ignored_path(path, *ignore):
            logger.debug("Pruned path", path=path)
            continue

        try:
            st = os.lstat(path)
        except OSError as e:
            if on_error is None or path == root:
                raise
            on_error(e)
            continue

        entry = PathEntry.from_stat(path, st)
        yield entry
        if not entry.is_directory:
            continue

        try:
            names = os.listdir(path)
        except OSError as e:
            if on_error is None or path == root:
                raise
            on_error(e)
            continue

        # Reversed so the stack pops siblings in lexical order
        stack.extend(
            os.path.join(path, name) for name in sorted(names, reverse=True)
        )


def _shallow_entries(directory: str, ignore: tuple[str, ...]) -> list[PathEntry]:
    try:
        names = sorted(os.listdir(directory))
    except (FileNotFoundError, NotADirectoryError):
        return []

    entries = []
    for name in names:
        path = os.path.join(directory, name)
        if is_ignored_path(path, *ignore):
            continue
        try:
            st = os.stat(path)
        except FileNotFoundError:
            # Dangling symlink
            st = os.lstat(path)
        entries.append(PathEntry.from_stat(path, st))

    return entries


def walk_entries(
    directory: str,
    mode: TraversalMode = TraversalMode.recursive,
    *ignore: str,
) -> list[PathEntry]:
    """Enumerate filesystem entries under a directory.

    Args:
        directory: Directory to walk; resolved to an absolute path first
        mode: Recursive walks the whole subtree including the root itself;
            shallow lists only the immediate children
        *ignore: Glob patterns matched against each absolute path

    Returns:
        List of PathEntry in traversal order. Empty if the directory does
        not exist.

    Raises:
        ValidationError: If an ignore pattern is malformed
        OSError: If the walk fails for any reason other than a missing root
    """
    for pattern in ignore:
        validate_pattern(pattern)

    directory = abs_path(directory)
    mode = TraversalMode(mode)

    with tracer.start_as_current_span("walk_entries") as span:
        span.set_attribute("fs.path", directory)
        span.set_attribute("fs.mode", mode.value)

        if mode == TraversalMode.shallow:
            entries = _shallow_entries(directory, ignore)
        else:
            try:
                entries = list(iter_tree(directory, ignore))
            except FileNotFoundError as e:
                if e.filename != directory:
                    raise
                entries = []

    logger.debug(
        "Directory walked",
        path=directory,
        mode=mode.value,
        ignore=list(ignore),
        entry_count=len(entries),
    )
    return entries


def _walk_with_options(directory: str, options: Optional[ListOptions]) -> list[PathEntry]:
    options = options or ListOptions()
    return walk_entries(directory, options.mode, *options.ignore)


def list_paths(directory: str, options: Optional[ListOptions] = None) -> list[str]:
    """List absolute paths of all entries (directories and files).

    Args:
        directory: Directory to list
        options: Traversal mode and ignore patterns; defaults to a
            recursive listing with no exclusions

    Returns:
        List of absolute paths
    """
    return [entry.absolute_path for entry in _walk_with_options(directory, options)]


def list_directories(
    directory: str, options: Optional[ListOptions] = None
) -> list[str]:
    """List absolute paths of directories only, ignoring files."""
    return [
        entry.absolute_path
        for entry in _walk_with_options(directory, options)
        if entry.is_directory
    ]


def list_files(directory: str, options: Optional[ListOptions] = None) -> list[str]:
    """List absolute paths of files only, ignoring directories."""
    return [
        entry.absolute_path
        for entry in _walk_with_options(directory, options)
        if not entry.is_directory
    ]
