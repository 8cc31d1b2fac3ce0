"""Move and copy operations for files and directory trees.

Transfers are best-effort, not transactional: entries handled before a
failure stay where they were put.
"""

import os
import shutil
from typing import Callable, Optional

from fs_tools.core import get_logger, get_tracer
from fs_tools.filesystem import mkdirp
from fs_tools.listing.walker import iter_tree
from fs_tools.path import abs_path, is_symlink
from fs_tools.schemas import TransferPolicy

logger = get_logger(__name__)
tracer = get_tracer(__name__)

COPY_FILE_MODE = 0o644


def _map_target(source_root: str, entry_path: str, destination: str) -> str:
    """Map a path under ``source_root`` onto ``destination``."""
    stub = entry_path[len(source_root) :].lstrip(os.sep)
    return os.path.join(destination, stub) if stub else destination


def _rename_file(path: str, target: str) -> None:
    os.rename(path, target)


def _copy_file(path: str, target: str) -> None:
    def opener(name: str, flags: int) -> int:
        return os.open(name, flags, COPY_FILE_MODE)

    with open(path, "rb") as src, open(target, "wb", opener=opener) as dst:
        shutil.copyfileobj(src, dst)


def _transfer(
    operation: str,
    transfer_file: Callable[[str, str], None],
    source: str,
    destination: str,
    policy: Optional[TransferPolicy],
) -> int:
    policy = policy or TransferPolicy()
    source = abs_path(source)
    destination = abs_path(destination)

    logger.info(
        f"Starting {operation}",
        source=source,
        destination=destination,
        ignore_errors=policy.ignore_errors,
    )

    transferred = 0
    failed = 0

    def on_walk_error(e: OSError) -> None:
        nonlocal failed
        failed += 1
        logger.warning(
            f"Ignoring {operation} failure", path=e.filename, error=str(e)
        )

    # A destination inside the source must not be walked into
    prune = (destination,) if destination.startswith(source + os.sep) else ()

    with tracer.start_as_current_span(operation) as span:
        span.set_attribute("fs.source", source)
        span.set_attribute("fs.destination", destination)

        entries = iter_tree(
            source,
            on_error=on_walk_error if policy.ignore_errors else None,
            prune=prune,
        )
        for entry in entries:
            target = _map_target(source, entry.absolute_path, destination)
            if not entry.is_directory and is_symlink(entry.absolute_path):
                logger.debug("Skipping symlink", path=entry.absolute_path)
                continue

            try:
                if entry.is_directory:
                    mkdirp(target)
                else:
                    transfer_file(entry.absolute_path, target)
                    transferred += 1
            except OSError as e:
                if not policy.ignore_errors:
                    logger.error(
                        f"{operation.capitalize()} failed",
                        path=entry.absolute_path,
                        target=target,
                        error=str(e),
                    )
                    raise
                failed += 1
                logger.warning(
                    f"Ignoring {operation} failure",
                    path=entry.absolute_path,
                    target=target,
                    error=str(e),
                )

        span.set_attribute("fs.transferred", transferred)

    logger.info(
        f"Finished {operation}",
        source=source,
        destination=destination,
        transferred=transferred,
        failed=failed,
    )
    return transferred


def move(
    source: str, destination: str, policy: Optional[TransferPolicy] = None
) -> int:
    """Move a file or the files of a directory tree to another location.

    Directories are recreated under the destination and files are renamed
    into them; the source directories themselves are left in place.
    Symlinks are skipped.

    Args:
        source: File or directory to move
        destination: Target path; a file source is renamed to exactly this path
            (a destination inside the source tree is not walked into)
        policy: Error policy; by default the first failure aborts the move

    Returns:
        Number of files moved

    Raises:
        FileNotFoundError: If the source does not exist
        OSError: On the first failure, unless ``policy.ignore_errors`` is set,
            in which case unreadable files and unlistable directories are
            logged and skipped
    """
    return _transfer("move", _rename_file, source, destination, policy)


def copy(
    source: str, destination: str, policy: Optional[TransferPolicy] = None
) -> int:
    """Copy a file or directory tree to another location.

    File contents are duplicated into newly created (or truncated) files
    with mode ``0o644``. Symlinks are skipped.

    Args:
        source: File or directory to copy
        destination: Target path; a file source is copied to exactly this path
            (a destination inside the source tree is not walked into)
        policy: Error policy; by default the first failure aborts the copy

    Returns:
        Number of files copied

    Raises:
        FileNotFoundError: If the source does not exist
        OSError: On the first failure, unless ``policy.ignore_errors`` is set,
            in which case unreadable files and unlistable directories are
            logged and skipped
    """
    return _transfer("copy", _copy_file, source, destination, policy)
