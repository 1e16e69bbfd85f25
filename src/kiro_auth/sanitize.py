"""Filename sanitization for untrusted identity strings.

Emails and tenant identifiers come from tokens and URLs we do not control, so
they are turned into safe filename components in two explicit passes:

1. Percent-encoded separators (``%2F``, ``%5C``, ``%2E``, ``%00``) collapse to
   ``_``. Any other ``%`` becomes ``_`` and the characters after it are kept,
   so double-encoded input such as ``%252F`` is never decoded twice.
2. Separators, characters reserved on Windows, whitespace and control
   characters map 1:1 to ``_``. A dot followed by another dot becomes ``_``,
   which leaves ``..`` as ``_.`` and keeps ordinary dots like ``example.com``.

The result never contains ``/``, ``\\``, NUL, ``%`` or ``..``, and sanitizing
it again returns it unchanged.
"""

from __future__ import annotations

import re

REPLACEMENT_CHAR = "_"

_ENCODED_UNSAFE_PATTERN = re.compile(r"%(?:2f|5c|2e|00)", re.IGNORECASE)

# Add newly discovered unsafe characters here.
UNSAFE_FILENAME_CHARS = frozenset('/\\:*?"<>|%')


def _is_unsafe_char(char: str) -> bool:
    if char in UNSAFE_FILENAME_CHARS or char.isspace():
        return True
    codepoint = ord(char)
    return codepoint < 0x20 or codepoint == 0x7F


def _neutralize_encoded(value: str) -> str:
    return _ENCODED_UNSAFE_PATTERN.sub(REPLACEMENT_CHAR, value)


def _replace_unsafe_chars(value: str) -> str:
    result = []
    last_index = len(value) - 1
    for index, char in enumerate(value):
        if _is_unsafe_char(char):
            result.append(REPLACEMENT_CHAR)
        elif char == "." and index < last_index and value[index + 1] == ".":
            result.append(REPLACEMENT_CHAR)
        else:
            result.append(char)
    return "".join(result)


def sanitize_email_for_filename(value: str) -> str:
    """Return ``value`` as a filesystem-safe filename component.

    Examples:
        >>> sanitize_email_for_filename("user name@example.com")
        'user_name@example.com'
        >>> sanitize_email_for_filename("../../../etc/passwd")
        '_.__.__._etc_passwd'
        >>> sanitize_email_for_filename("%2E%2E%2Fetc%2Fpasswd")
        '___etc_passwd'
    """
    if not value:
        return ""
    return _replace_unsafe_chars(_neutralize_encoded(value))
