from .resolution import (
    abs_path,
    exists,
    is_directory,
    is_file,
    is_symlink,
    last_modified,
    symlink,
)

__all__ = [
    "abs_path",
    "exists",
    "is_directory",
    "is_file",
    "is_symlink",
    "last_modified",
    "symlink",
]
