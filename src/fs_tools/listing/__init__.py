"""Directory listing with glob-based exclusion."""

from .ignore import is_ignored_path, validate_pattern
from .walker import (
    PathEntry,
    iter_tree,
    list_directories,
    list_files,
    list_paths,
    walk_entries,
)

__all__ = [
    "PathEntry",
    "is_ignored_path",
    "iter_tree",
    "list_directories",
    "list_files",
    "list_paths",
    "validate_pattern",
    "walk_entries",
]
