"""A lightweight cross-platform set of helpers for interacting with the file system.

Most helpers are designed to "guarantee" that a resource does or does not
exist, wrapping common path, file and archive chores into small calls.

Key Features:
    - Path resolution and type checks
    - Touch, mkdir -p, clean and text file read/write
    - Readable/writable/executable probes
    - Recursive or shallow directory listing with glob exclusion
    - Move and copy of directory trees with an optional ignore-errors policy
    - Zip and unzip with path traversal protection

Recommended Usage:
    >>> from fs_tools import ListOptions, list_files, zip_path
    >>> files = list_files("./data", ListOptions(ignore=["**/.git"]))
    >>> archive = zip_path("./data")
"""

__version__ = "0.1.0"

from .archive import ArchiveEntry, unzip, zip_path
from .core.exceptions import (
    FSToolsError,
    PathNotFoundError,
    PathTraversalError,
    UnrecoverableError,
    ValidationError,
)
from .filesystem import (
    GB,
    KB,
    MB,
    PB,
    TB,
    byte_size,
    clean,
    format_size,
    is_executable,
    is_readable,
    is_writable,
    mkdirp,
    read_text_file,
    size,
    touch,
    write_text_file,
)
from .listing import (
    PathEntry,
    is_ignored_path,
    list_directories,
    list_files,
    list_paths,
    walk_entries,
)
from .path import (
    abs_path,
    exists,
    is_directory,
    is_file,
    is_symlink,
    last_modified,
    symlink,
)
from .schemas import (
    ListOptions,
    TouchOptions,
    TransferPolicy,
    TraversalMode,
    WriteOptions,
)
from .transfer import copy, move

__all__ = [
    # Options
    "ListOptions",
    "TouchOptions",
    "TransferPolicy",
    "TraversalMode",
    "WriteOptions",
    # Errors
    "FSToolsError",
    "PathNotFoundError",
    "PathTraversalError",
    "UnrecoverableError",
    "ValidationError",
    # Paths
    "abs_path",
    "exists",
    "is_directory",
    "is_file",
    "is_symlink",
    "last_modified",
    "symlink",
    # Files and directories
    "KB",
    "MB",
    "GB",
    "TB",
    "PB",
    "byte_size",
    "clean",
    "format_size",
    "is_executable",
    "is_readable",
    "is_writable",
    "mkdirp",
    "read_text_file",
    "size",
    "touch",
    "write_text_file",
    # Listing
    "PathEntry",
    "is_ignored_path",
    "list_directories",
    "list_files",
    "list_paths",
    "walk_entries",
    # Transfer and archives
    "copy",
    "move",
    "ArchiveEntry",
    "unzip",
    "zip_path",
]
