"""Text processing utilities for codeweave.

Provides the identifier validity rule shared by all node catalogs and the
word splitting behind identifier case conversion.

Example:
    >>> from codeweave.utils.text import is_identifier, to_snake
    >>> is_identifier("userID")
    True
    >>> to_snake("HTTPServerName")
    'http_server_name'
"""

from __future__ import annotations

import re

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Acronym runs stop before a capital that starts a lower-case word:
# "HTTPServer" -> "HTTP", "Server". Trailing digits stay with their word.
_WORD = re.compile(r"[A-Z]+(?![a-z])[0-9]*|[A-Z]?[a-z]+[0-9]*|[0-9]+")


def is_identifier(name: str) -> bool:
    """Check the identifier rule: a letter or underscore, then letters, digits or underscores.

    Only ASCII letters count; the empty string is not an identifier.
    """
    return bool(name) and _IDENTIFIER.fullmatch(name) is not None


def split_words(name: str) -> list[str]:
    """Split a name into words on separators, case changes and acronym boundaries.

    Examples:
        >>> split_words("get-user_byID")
        ['get', 'user', 'by', 'ID']
        >>> split_words("HTTP2Server")
        ['HTTP2', 'Server']
    """
    return _WORD.findall(name)


def to_pascal(name: str) -> str:
    """Convert to PascalCase: ``"user_id"`` -> ``"UserId"``."""
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(name))


def to_camel(name: str) -> str:
    """Convert to camelCase: ``"UserID"`` -> ``"userId"``."""
    words = split_words(name)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in rest)


def to_snake(name: str) -> str:
    """Convert to snake_case: ``"UserID"`` -> ``"user_id"``."""
    return "_".join(word.lower() for word in split_words(name))
