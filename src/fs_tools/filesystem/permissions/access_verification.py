"""Read, write and execute probes for the active system user."""

import os
import stat
import struct
import sys
from abc import ABC, abstractmethod
from typing import Optional

from fs_tools.core import get_logger
from fs_tools.path import abs_path, exists

logger = get_logger(__name__)

IMAGE_FILE_MACHINE_UNKNOWN = 0x0
_PE_OFFSET_POINTER = 0x3C


def _allow_file_action(path: str, flags: int, access_mode: int) -> bool:
    """Probe access by opening the path with ``flags``.

    Permission denied becomes False. Directories cannot be opened for
    writing, so they are probed with ``os.access`` instead.
    """
    path = abs_path(path)
    if not exists(path):
        return False

    if os.path.isdir(path):
        return os.access(path, access_mode)

    try:
        fd = os.open(path, flags)
    except PermissionError:
        logger.debug("Access denied", path=path, flags=flags)
        return False
    os.close(fd)
    return True


def is_readable(path: str) -> bool:
    """Determine whether the file or directory is readable."""
    return _allow_file_action(path, os.O_RDONLY, os.R_OK)


def is_writable(path: str) -> bool:
    """Determine whether the file or directory is writable."""
    return _allow_file_action(path, os.O_WRONLY, os.W_OK)


class ExecutableDetector(ABC):
    """Abstract base class for platform-specific executable detection."""

    @abstractmethod
    def is_executable(self, path: str) -> bool:
        """Determine whether the given path is executable.

        Args:
            path: Absolute path of an existing file or directory

        Returns:
            True if the path is executable on this platform
        """
        pass


class PosixExecutableDetector(ExecutableDetector):
    """Detects executables by their permission bits."""

    def is_executable(self, path: str) -> bool:
        try:
            mode = os.stat(path).st_mode
        except OSError:
            return False
        return bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


class WindowsExecutableDetector(ExecutableDetector):
    """Detects executables by their Portable Executable header.

    A file qualifies when it starts with the ``MZ`` DOS stub, the offset at
    0x3C points to a ``PE\\0\\0`` signature, and the COFF header names a
    known machine type.
    """

    def is_executable(self, path: str) -> bool:
        try:
            with open(path, "rb") as f:
                if f.read(2) != b"MZ":
                    return False

                f.seek(_PE_OFFSET_POINTER)
                pointer = f.read(4)
                if len(pointer) != 4:
                    return False
                (pe_offset,) = struct.unpack("<I", pointer)

                f.seek(pe_offset)
                header = f.read(6)
        except OSError:
            return False

        if len(header) != 6 or header[:4] != b"PE\0\0":
            return False

        (machine,) = struct.unpack("<H", header[4:])
        return machine != IMAGE_FILE_MACHINE_UNKNOWN


def get_executable_detector(platform: Optional[str] = None) -> ExecutableDetector:
    """Select the executable detector for a platform.

    Args:
        platform: A ``sys.platform`` value; defaults to the running platform

    Returns:
        WindowsExecutableDetector on Windows, PosixExecutableDetector elsewhere
    """
    platform = platform or sys.platform
    if platform.startswith("win"):
        return WindowsExecutableDetector()
    return PosixExecutableDetector()


def is_executable(path: str) -> bool:
    """Determine whether the file or directory is executable."""
    path = abs_path(path)
    if not exists(path):
        return False

    return get_executable_detector().is_executable(path)
