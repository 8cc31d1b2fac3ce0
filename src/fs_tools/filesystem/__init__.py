"""Filesystem operations and utilities."""

from .operations import (
    GB,
    KB,
    MB,
    PB,
    TB,
    byte_size,
    clean,
    format_size,
    mkdirp,
    read_text_file,
    size,
    touch,
    write_text_file,
)
from .permissions import (
    ExecutableDetector,
    get_executable_detector,
    is_executable,
    is_readable,
    is_writable,
)

__all__ = [
    "KB",
    "MB",
    "GB",
    "TB",
    "PB",
    "byte_size",
    "clean",
    "format_size",
    "mkdirp",
    "read_text_file",
    "size",
    "touch",
    "write_text_file",
    "ExecutableDetector",
    "get_executable_detector",
    "is_executable",
    "is_readable",
    "is_writable",
]
