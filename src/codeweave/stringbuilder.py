"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Used as the in-memory buffer behind
IndentWriter until the writer is flushed to its sink.

Thread Safety:
StringBuilder instances are local to each writer.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("package ").append("main").build()
            'package main'

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts."""
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        """Return total number of characters accumulated."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
