"""Move and copy operations."""

from .operations import copy, move

__all__ = ["copy", "move"]
