"""Glob-based path exclusion.

Patterns are matched against full absolute paths with shell glob rules:
``*``, ``?`` and ``[...]`` never match a path separator, while ``**``
spans any number of directories (``**/`` may also match none).
"""

import os
import re
from functools import lru_cache

from fs_tools.core import get_logger
from fs_tools.core.exceptions import ValidationError

logger = get_logger(__name__)

_SEPARATORS = "/\\" if os.sep == "\\" else "/"
_SEP_CLASS = re.escape(_SEPARATORS)
_NOT_SEP = f"[^{_SEP_CLASS}]"


def _malformed(pattern: str, reason: str) -> ValidationError:
    error_msg = f"Malformed glob pattern '{pattern}': {reason}"
    logger.error(error_msg, pattern=pattern)
    return ValidationError(error_msg)


def _class_end(pattern: str, start: int) -> int:
    """Return the index of the ``]`` closing the class opened at ``start``."""
    j = start + 1
    if j < len(pattern) and pattern[j] == "!":
        j += 1
    # A leading ']' is a member of the class, not its end
    if j < len(pattern) and pattern[j] == "]":
        j += 1
    close = pattern.find("]", j)
    if close == -1:
        raise _malformed(pattern, "unterminated '['")
    return close


def _translate_class(body: str) -> str:
    negate = body.startswith("!")
    if negate:
        body = body[1:]
    members = "".join("-" if ch == "-" else re.escape(ch) for ch in body)
    if negate:
        return f"[^{members}{_SEP_CLASS}]"
    return f"(?![{_SEP_CLASS}])[{members}]"


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a glob pattern into a compiled regular expression.

    Raises:
        ValidationError: If the pattern is malformed
    """
    parts = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            if pattern.startswith("**", i):
                i += 2
                if i < n and pattern[i] in _SEPARATORS:
                    parts.append(f"(?:.*[{_SEP_CLASS}])?")
                    i += 1
                else:
                    parts.append(".*")
                continue
            parts.append(f"{_NOT_SEP}*")
        elif c == "?":
            parts.append(_NOT_SEP)
        elif c == "[":
            close = _class_end(pattern, i)
            parts.append(_translate_class(pattern[i + 1 : close]))
            i = close
        else:
            parts.append(re.escape(c))
        i += 1

    try:
        return re.compile("".join(parts) + r"\Z", re.DOTALL)
    except re.error as e:
        raise _malformed(pattern, str(e)) from e


def validate_pattern(pattern: str) -> None:
    """Reject malformed glob patterns such as ``/data/[abc`` or ``[z-a]``.

    Raises:
        ValidationError: If the pattern is malformed
    """
    compile_pattern(pattern)


def is_ignored_path(path: str, *patterns: str) -> bool:
    """Check a path against glob patterns.

    Patterns are tested in order and the first match wins.
    ``/root/*.txt`` matches ``/root/a.txt`` but not ``/root/sub/b.txt``;
    ``/root/**/file.txt`` matches ``/root/a/b/file.txt``.

    Args:
        path: Absolute path to test
        *patterns: Shell-style glob patterns (``*``, ``**``, ``?``, ``[...]``)

    Returns:
        True if the path matches any pattern

    Raises:
        ValidationError: If a pattern is malformed
    """
    for pattern in patterns:
        if compile_pattern(pattern).match(path):
            return True

    return False
