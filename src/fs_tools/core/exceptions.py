"""Exception hierarchy for fs-tools.

Failures of the underlying storage layer are not wrapped: they reach the
caller as the original ``OSError``. The classes below cover the conditions
the library detects itself.
"""


class FSToolsError(Exception):
    """Base exception for all fs-tools errors."""

    pass


class ValidationError(FSToolsError):
    """Raised when caller-supplied configuration is invalid (e.g. a malformed glob)."""

    pass


class PathNotFoundError(FSToolsError, FileNotFoundError):
    """Raised when a path that must exist is not found."""

    pass


class PathTraversalError(FSToolsError):
    """Raised when an archive entry resolves outside the extraction root."""

    pass


class UnrecoverableError(FSToolsError):
    """Raised for failures that should never happen, such as touch failing to create a file."""

    pass
