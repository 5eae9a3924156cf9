"""Identifier casing modes.

Generators convert source names (schema keys, operation IDs, Python field
names) before handing them to node constructors.

Example:
    >>> Casing.PASCAL.apply("list_users")
    'ListUsers'
    >>> convert_case("list_users", "kebab")
    'list_users'
"""

from __future__ import annotations

from enum import StrEnum

from codeweave.utils.text import to_camel, to_pascal, to_snake


class Casing(StrEnum):
    """Case conversion applied to generated identifiers."""

    NONE = ""
    PASCAL = "pascal"
    CAMEL = "camel"
    SNAKE = "snake"

    def apply(self, name: str) -> str:
        match self:
            case Casing.PASCAL:
                return to_pascal(name)
            case Casing.CAMEL:
                return to_camel(name)
            case Casing.SNAKE:
                return to_snake(name)
        return name


def convert_case(name: str, casing: Casing | str) -> str:
    """Apply ``casing`` to ``name``; unrecognized modes pass the name through."""
    try:
        mode = Casing(casing)
    except ValueError:
        return name
    return mode.apply(name)


__all__ = ["Casing", "convert_case"]
