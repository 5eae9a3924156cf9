"""
Codeweave — source text emission for code generators.

Build typed node trees for Go or SQL and render them as formatted source:
indentation is tracked by the output stream, related lines are aligned in
columns, and every construct picks its inline or block form from the shape
of the tree alone.

Quick Start:
    >>> from codeweave import golang as go
    >>> unit = go.Unit("api")
    >>> unit.add(go.TypeDecls((go.TypeSpec("ID", go.INT64),)))
    >>> text = unit.render()

    >>> from codeweave import sql
    >>> text = sql.render(sql.select(sql.STAR), "sqlserver")

Layout primitives:
    >>> from codeweave import row, write_string, write_table
    >>> write_string(lambda w: write_table(w, [row("a", "bb"), row("ccc", "d")]))
    'a   bb\\nccc d\\n'

Installation:
    pip install codeweave              # zero dependencies
    pip install codeweave[test]        # + pytest and hypothesis
"""

from codeweave.casing import Casing, convert_case
from codeweave.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from codeweave.errors import (
    AliasCollisionError,
    CodeweaveError,
    InvalidIdentifierError,
    RenderError,
    UnknownDialectError,
    UnsupportedConstructError,
    UnsupportedOperatorError,
)
from codeweave.stringbuilder import StringBuilder
from codeweave.table import SEPARATOR, Row, column_widths, row, write_table
from codeweave.writer import IndentWriter, write_file, write_string

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Stream
    "IndentWriter",
    "StringBuilder",
    "write_file",
    "write_string",
    # Tables
    "Row",
    "SEPARATOR",
    "column_widths",
    "row",
    "write_table",
    # Casing
    "Casing",
    "convert_case",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "AliasCollisionError",
    "CodeweaveError",
    "InvalidIdentifierError",
    "RenderError",
    "UnknownDialectError",
    "UnsupportedConstructError",
    "UnsupportedOperatorError",
]
