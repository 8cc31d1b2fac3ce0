"""Zip archive operations."""

from .zip_operations import ArchiveEntry, iter_archive_entries, unzip, zip_path

__all__ = ["ArchiveEntry", "iter_archive_entries", "unzip", "zip_path"]
