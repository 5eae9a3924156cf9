"""Go lexical helpers: keywords, identifier checks and literal quoting.

Quoting follows the Go escaping rules for interpreted string and rune
literals: printable characters are kept, everything else is escaped.
"""

from __future__ import annotations

from codeweave.errors import InvalidIdentifierError
from codeweave.utils.text import is_identifier

KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
}


def check_identifier(name: str, kind: str = "identifier") -> str:
    """Return ``name`` unchanged, or raise InvalidIdentifierError."""
    if not isinstance(name, str) or not is_identifier(name):
        raise InvalidIdentifierError(name, kind)
    return name


def check_optional_identifier(name: str, kind: str = "identifier") -> str:
    """Like check_identifier, but the empty string means "no name"."""
    if name == "":
        return name
    return check_identifier(name, kind)


def is_exported(name: str) -> bool:
    return is_identifier(name) and name[0].isupper()


def is_package_alias(name: str) -> bool:
    """A usable package alias: a non-keyword identifier that is not exported."""
    return is_identifier(name) and name not in KEYWORDS and not name[0].isupper()


def has_surrogate(text: str) -> bool:
    """Whether text holds a lone UTF-16 surrogate, which no Go literal can spell."""
    return any(0xD800 <= ord(ch) <= 0xDFFF for ch in text)


def _escape(ch: str, quote: str) -> str:
    if ch == quote:
        return "\\" + ch
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch]
    if ch.isprintable():
        return ch
    code = ord(ch)
    if code < 0x80:
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(text: str) -> str:
    """Quote text as a Go interpreted string literal.

    Example:
        >>> quote('say "hi"\\n')
        '"say \\\\"hi\\\\"\\\\n"'
    """
    return '"' + "".join(_escape(ch, '"') for ch in text) + '"'


def quote_rune(ch: str) -> str:
    """Quote a single character as a Go rune literal."""
    return "'" + _escape(ch, "'") + "'"


def line_comment(text: str) -> str:
    """Spell text as ``//`` comment lines, without a trailing newline."""
    return "\n".join(f"// {line}" if line else "//" for line in text.split("\n"))


def doc_prefix(text: str) -> str:
    """Doc comment placed on the lines above a declaration ("" when absent)."""
    return line_comment(text) + "\n" if text else ""


__all__ = [
    "KEYWORDS",
    "check_identifier",
    "doc_prefix",
    "has_surrogate",
    "line_comment",
    "check_optional_identifier",
    "is_exported",
    "is_package_alias",
    "quote",
    "quote_rune",
]
