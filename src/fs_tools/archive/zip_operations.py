"""Zip archive creation and extraction.

Archives are built from leaf files only; directory structure is implied by
the stored entry names. Extraction refuses any entry that would land
outside the destination directory ("zip slip").
"""

import os
import shutil
import stat
import zipfile
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fs_tools.core import get_logger, get_tracer
from fs_tools.core.exceptions import PathNotFoundError, PathTraversalError
from fs_tools.listing.walker import iter_tree
from fs_tools.path import abs_path, exists, is_symlink

logger = get_logger(__name__)
tracer = get_tracer(__name__)

DEFAULT_FILE_MODE = 0o644
DEFAULT_DIRECTORY_MODE = 0o755

# Earliest timestamp the zip format can represent
_ZIP_EPOCH = datetime(1980, 1, 1)


@dataclass(frozen=True)
class ArchiveEntry:
    """A single file destined for an archive.

    Attributes:
        relative_path: Entry name relative to the archive root, ``/``-separated
        is_directory: True for directory entries
        content: Full file content
        mode: Permission bits recorded in the archive
        modified: Last modification time recorded in the archive
    """

    relative_path: str
    is_directory: bool
    content: bytes
    mode: int = DEFAULT_FILE_MODE
    modified: datetime = _ZIP_EPOCH

    def to_zip_info(self) -> zipfile.ZipInfo:
        """Build the zip header for this entry."""
        info = zipfile.ZipInfo(
            self.relative_path,
            date_time=max(self.modified, _ZIP_EPOCH).timetuple()[:6],
        )
        info.compress_type = zipfile.ZIP_DEFLATED
        file_type = stat.S_IFDIR if self.is_directory else stat.S_IFREG
        info.external_attr = (file_type | (self.mode & 0o7777)) << 16
        return info


def _relative_name(source: str, path: str) -> str:
    stub = path[len(source) :].lstrip(os.sep)
    if not stub:
        # A single-file source is stored under its own name
        stub = os.path.basename(path)
    return stub.replace(os.sep, "/")


def iter_archive_entries(
    source: str, exclude: Optional[str] = None
) -> Iterator[ArchiveEntry]:
    """Yield an ArchiveEntry for every regular file under ``source``.

    Directories and symlinks are skipped. Entries follow traversal order.

    Args:
        source: Absolute path of a file or directory
        exclude: Absolute path to leave out, typically the archive being written

    Raises:
        OSError: If the tree cannot be walked or a file cannot be read
    """
    for entry in iter_tree(source, prune=(exclude,) if exclude else ()):
        path = entry.absolute_path
        if entry.is_directory or is_symlink(path):
            continue

        with open(path, "rb") as f:
            content = f.read()

        yield ArchiveEntry(
            relative_path=_relative_name(source, path),
            is_directory=False,
            content=content,
            mode=stat.S_IMODE(os.lstat(path).st_mode),
            modified=entry.modified,
        )


def zip_path(source: str, destination: Optional[str] = None) -> str:
    """Zip a file or directory. Symlinks are not followed.

    Args:
        source: File or directory to archive
        destination: Archive path; defaults to the source's base name with its
            extension replaced by ``.zip``, in the current working directory

    Returns:
        Absolute path of the written archive

    Raises:
        PathNotFoundError: If the source does not exist
        OSError: If reading a file or writing the archive fails; a partially
            written archive is left on disk
    """
    source = abs_path(source)
    if not exists(source):
        error_msg = f"{source} does not exist"
        logger.error(error_msg, source=source)
        raise PathNotFoundError(error_msg)

    if destination is None:
        stem, _ = os.path.splitext(os.path.basename(source))
        destination = stem + ".zip"
    destination = abs_path(destination)

    logger.info("Creating archive", source=source, destination=destination)

    entry_count = 0
    with tracer.start_as_current_span("zip") as span:
        span.set_attribute("fs.source", source)
        span.set_attribute("fs.destination", destination)

        with zipfile.ZipFile(destination, "w", zipfile.ZIP_DEFLATED) as archive:
            for entry in iter_archive_entries(source, exclude=destination):
                archive.writestr(entry.to_zip_info(), entry.content)
                entry_count += 1

        span.set_attribute("fs.entries", entry_count)

    logger.info("Archive created", destination=destination, entry_count=entry_count)
    return destination


def _safe_target(root: str, name: str) -> str:
    """Join an entry name onto the extraction root, rejecting escapes.

    Raises:
        PathTraversalError: If the joined path is not inside ``root``
    """
    prefix = root if root.endswith(os.sep) else root + os.sep
    target = os.path.normpath(os.path.join(root, name))
    if not target.startswith(prefix):
        error_msg = f"Illegal file path: {target}"
        logger.error(error_msg, entry=name, destination=root)
        raise PathTraversalError(error_msg)
    return target


def _extract_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo, target: str) -> None:
    mode = (info.external_attr >> 16) & 0o777

    if info.is_dir():
        os.makedirs(target, mode or DEFAULT_DIRECTORY_MODE, exist_ok=True)
        return

    os.makedirs(os.path.dirname(target), DEFAULT_DIRECTORY_MODE, exist_ok=True)

    def opener(name: str, flags: int) -> int:
        return os.open(name, flags, mode or DEFAULT_FILE_MODE)

    with archive.open(info) as src, open(target, "wb", opener=opener) as dst:
        shutil.copyfileobj(src, dst)


def unzip(source: str, destination: str) -> list[str]:
    """Extract a zip archive into a directory.

    The destination is created if absent. Entries are extracted in archive
    order; the first failure aborts and already-extracted entries are kept.

    Args:
        source: Archive to extract
        destination: Directory to extract into

    Returns:
        Absolute paths of the extracted entries

    Raises:
        PathNotFoundError: If the archive does not exist
        PathTraversalError: If an entry would be written outside ``destination``
        zipfile.BadZipFile: If the source is not a zip archive
        OSError: If an entry cannot be written
    """
    source = abs_path(source)
    if not exists(source):
        error_msg = f"{source} does not exist"
        logger.error(error_msg, source=source)
        raise PathNotFoundError(error_msg)

    destination = os.path.normpath(abs_path(destination))
    logger.info("Extracting archive", source=source, destination=destination)

    extracted = []
    with tracer.start_as_current_span("unzip") as span:
        span.set_attribute("fs.source", source)
        span.set_attribute("fs.destination", destination)

        with zipfile.ZipFile(source) as archive:
            os.makedirs(destination, DEFAULT_DIRECTORY_MODE, exist_ok=True)
            for info in archive.infolist():
                target = _safe_target(destination, info.filename)
                _extract_entry(archive, info, target)
                extracted.append(target)

        span.set_attribute("fs.entries", len(extracted))

    logger.info(
        "Archive extracted", destination=destination, entry_count=len(extracted)
    )
    return extracted
