"""Access probes for the active system user."""

from .access_verification import (
    ExecutableDetector,
    PosixExecutableDetector,
    WindowsExecutableDetector,
    get_executable_detector,
    is_executable,
    is_readable,
    is_writable,
)

__all__ = [
    "ExecutableDetector",
    "PosixExecutableDetector",
    "WindowsExecutableDetector",
    "get_executable_detector",
    "is_executable",
    "is_readable",
    "is_writable",
]
