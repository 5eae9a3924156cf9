"""Indentation-aware output stream.

IndentWriter wraps an output sink and tracks the current indentation depth
and whether the next character starts a new line. Indentation is emitted
lazily: only when the first non-newline character of a line is written, so
blank lines never carry trailing whitespace.

Example:
    >>> def body(w: IndentWriter) -> None:
    ...     w.write("func main() {")
    ...     w.newline()
    ...     with w.indent():
    ...         w.write("run()\\n")
    ...     w.write("}")
    >>> write_string(body)
    'func main() {\\n\\trun()\\n}'

Thread Safety:
A writer belongs to exactly one render call and is never shared.

"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from codeweave.config import DEFAULT_INDENT_UNIT, get_render_config
from codeweave.stringbuilder import StringBuilder
from codeweave.utils.logger import get_logger

logger = get_logger(__name__)


class IndentWriter:
    """Output stream that prefixes every line with the current indentation.

    Text is buffered in a StringBuilder and handed to the sink on flush().
    Used as a context manager, the writer flushes on exit, including when
    the body raises.

    """

    __slots__ = ("_sink", "_buf", "_indent_unit", "_depth", "_at_line_start")

    def __init__(self, sink: TextIO, indent_unit: str | None = None) -> None:
        """Initialize writer.

        Args:
            sink: Text stream receiving the output on flush()
            indent_unit: Text emitted per indentation level; defaults to the
                active RenderConfig, and an empty string falls back to a tab
        """
        if indent_unit is None:
            indent_unit = get_render_config().indent_unit
        self._sink = sink
        self._buf = StringBuilder()
        self._indent_unit = indent_unit or DEFAULT_INDENT_UNIT
        self._depth = 0
        self._at_line_start = True

    @property
    def indent_unit(self) -> str:
        return self._indent_unit

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def at_line_start(self) -> bool:
        return self._at_line_start

    def write(self, text: str) -> int:
        """Write text, indenting every line that receives content.

        Returns:
            Number of characters consumed from ``text``
        """
        for idx, line in enumerate(text.split("\n")):
            if idx > 0:
                self._buf.append("\n")
                self._at_line_start = True
            if line:
                self._ensure_indented()
                self._buf.append(line)
        return len(text)

    def write_char(self, ch: str) -> None:
        """Write a single character."""
        if len(ch) != 1:
            raise ValueError(f"write_char expects a single character, got {ch!r}")
        if ch == "\n":
            self._at_line_start = True
        else:
            self._ensure_indented()
        self._buf.append(ch)

    def newline(self) -> None:
        self.write_char("\n")

    def space(self) -> None:
        self.write_char(" ")

    @contextmanager
    def indent(self) -> Iterator[IndentWriter]:
        """Scope one level of deeper indentation.

        The depth is restored on exit even if the body raises.
        """
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1

    def flush(self) -> None:
        """Hand buffered text to the sink."""
        if self._buf:
            self._sink.write(self._buf.build())
            self._buf.clear()

    def close(self) -> None:
        """Flush remaining output. The sink itself stays open."""
        self.flush()

    def __enter__(self) -> IndentWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _ensure_indented(self) -> None:
        if not self._at_line_start:
            return
        if self._depth:
            self._buf.append(self._indent_unit * self._depth)
        self._at_line_start = False


def write_string(action: Callable[[IndentWriter], None], indent_unit: str | None = None) -> str:
    """Run ``action`` against a fresh writer and return what it wrote."""
    sink = io.StringIO()
    with IndentWriter(sink, indent_unit) as w:
        action(w)
    return sink.getvalue()


def write_file(
    path: str | Path,
    action: Callable[[IndentWriter], None],
    indent_unit: str | None = None,
) -> Path:
    """Render ``action`` into a file, creating parent directories as needed.

    The whole text is rendered before the file is opened, so a failing
    render never leaves a partially written file behind.

    Returns:
        The path that was written
    """
    text = write_string(action, indent_unit)
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(text), target)
    return target


__all__ = ["IndentWriter", "write_file", "write_string"]
