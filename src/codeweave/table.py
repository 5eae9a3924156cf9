"""Column-aligned table rendering.

A table is the sequence of rows handed to one write_table() call. Every
column index is padded to the widest cell at that index across the whole
table, so same-index cells start at the same offset on every row.

Example:
    >>> from codeweave.writer import write_string
    >>> rows = [row("a", "bb"), row("ccc", "d")]
    >>> write_string(lambda w: write_table(w, rows))
    'a   bb\\nccc d\\n'

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from codeweave.writer import IndentWriter


@dataclass(frozen=True, slots=True)
class Row:
    """One table row.

    Attributes:
        prefix: Text written verbatim before the first column (e.g. a doc
            comment ending in a newline); never padded
        columns: Cell strings; a row without columns renders as its prefix
            followed by a newline

    """

    prefix: str = ""
    columns: tuple[str, ...] = ()


SEPARATOR = Row()


def row(*columns: str, prefix: str = "") -> Row:
    """Build a Row from positional cells."""
    return Row(prefix=prefix, columns=tuple(columns))


def column_widths(rows: Iterable[Row]) -> list[int]:
    """Widest cell per column index over all rows."""
    widths: list[int] = []
    for r in rows:
        for idx, col in enumerate(r.columns):
            if idx < len(widths):
                widths[idx] = max(widths[idx], len(col))
            else:
                widths.append(len(col))
    return widths


def write_table(w: IndentWriter, rows: Sequence[Row]) -> None:
    """Write rows so that same-index columns align vertically."""
    widths = column_widths(rows)

    for r in rows:
        if r.prefix:
            w.write(r.prefix)

        last = len(r.columns) - 1
        for idx, col in enumerate(r.columns):
            if idx > 0:
                w.space()
            w.write(col)
            if idx < last:
                w.write(" " * (widths[idx] - len(col)))

        w.newline()


__all__ = ["Row", "SEPARATOR", "column_widths", "row", "write_table"]
