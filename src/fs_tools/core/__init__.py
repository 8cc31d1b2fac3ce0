"""Core utilities and shared components for fs-tools."""

from .config import settings
from .exceptions import FSToolsError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "FSToolsError", "ValidationError", "get_logger", "get_tracer"]
