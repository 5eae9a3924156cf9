"""SQL dialects.

A Dialect supplies the vendor-specific spelling rules for the shared query
grammar: name quoting, parameter markers, literals, operator keywords and
row limiting. The base class spells standard SQL; vendor dialects override
only what differs.

Dialects hold no state and can be shared freely.

Example:
    >>> get_dialect("postgres").param(2)
    '$2'
    >>> get_dialect("sqlserver").quote_name("order")
    '[order]'

"""

from __future__ import annotations

import os

from codeweave.errors import UnknownDialectError, UnsupportedConstructError, UnsupportedOperatorError
from codeweave.sql.nodes import CompareOp, JoinKind, Select, SetOp
from codeweave.utils.logger import get_logger

logger = get_logger(__name__)

DIALECT_ENV_VAR = "CODEWEAVE_SQL_DIALECT"
DEFAULT_DIALECT = "ansi"


class Dialect:
    """Standard SQL spelling; the fallback for every vendor dialect."""

    name = "ansi"

    # -------------------------------------------------------------------------
    # Names, parameters and literals
    # -------------------------------------------------------------------------

    def quote_name(self, name: str) -> str:
        """Quote an identifier, doubling embedded quote characters."""
        return '"' + name.replace('"', '""') + '"'

    def param(self, index: int) -> str:
        return "?"

    def boolean(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"

    def literal(self, value: None | bool | int | float | str) -> str:
        """Render a Python value as a SQL literal."""
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return self.boolean(value)
        if isinstance(value, int):
            return str(int(value))
        if isinstance(value, float):
            return repr(float(value))
        return "'" + value.replace("'", "''") + "'"

    # -------------------------------------------------------------------------
    # Operators and keywords
    # -------------------------------------------------------------------------

    def compare_op(self, op: CompareOp) -> str:
        return self._operator(CompareOp, op).value

    def join_keyword(self, kind: JoinKind) -> str:
        match self._operator(JoinKind, kind):
            case JoinKind.INNER:
                return "INNER JOIN"
            case JoinKind.LEFT:
                return "LEFT OUTER JOIN"
            case JoinKind.RIGHT:
                return "RIGHT OUTER JOIN"
            case JoinKind.FULL:
                return "FULL OUTER JOIN"
            case JoinKind.CROSS:
                return "CROSS JOIN"
        raise UnsupportedOperatorError(kind, self.name)

    def set_operator(self, op: SetOp, all_: bool) -> str:
        keyword = self._operator(SetOp, op).value
        return f"{keyword} ALL" if all_ else keyword

    def _operator[E: (CompareOp, JoinKind, SetOp)](self, kind: type[E], op: str) -> E:
        """Coerce an operator string, rejecting spellings this dialect lacks."""
        try:
            return kind(op)
        except ValueError as exc:
            raise UnsupportedOperatorError(op, self.name) from exc

    def with_keyword(self, recursive: bool) -> str:
        return "WITH RECURSIVE" if recursive else "WITH"

    # -------------------------------------------------------------------------
    # Row limiting
    # -------------------------------------------------------------------------

    def select_keyword(self, select: Select) -> str:
        return "SELECT DISTINCT" if select.distinct else "SELECT"

    def limit_rows(self, select: Select) -> list[tuple[str, str]]:
        """(keyword, text) rows placed at the end of a SELECT."""
        rows = []
        if select.limit is not None:
            rows.append(("LIMIT", str(select.limit)))
        if select.offset is not None:
            rows.append(("OFFSET", str(select.offset)))
        return rows

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PostgresDialect(Dialect):
    """PostgreSQL: numbered $n parameters."""

    name = "postgres"

    def param(self, index: int) -> str:
        return f"${index}"


class SqlServerDialect(Dialect):
    """Microsoft SQL Server (T-SQL)."""

    name = "sqlserver"

    def quote_name(self, name: str) -> str:
        return "[" + name.replace("]", "]]") + "]"

    def param(self, index: int) -> str:
        return f"@p{index}"

    def boolean(self, value: bool) -> str:
        return "1" if value else "0"

    def set_operator(self, op: SetOp, all_: bool) -> str:
        if all_ and self._operator(SetOp, op) is not SetOp.UNION:
            raise UnsupportedOperatorError(f"{SetOp(op).value} ALL", self.name)
        return super().set_operator(op, all_)

    def with_keyword(self, recursive: bool) -> str:
        # Recursive CTEs need no keyword in T-SQL
        return "WITH"

    def select_keyword(self, select: Select) -> str:
        keyword = super().select_keyword(select)
        if select.limit is not None and select.offset is None:
            keyword += f" TOP ({select.limit})"
        return keyword

    def limit_rows(self, select: Select) -> list[tuple[str, str]]:
        if select.offset is None:
            return []
        if not select.order_by:
            raise UnsupportedConstructError("OFFSET", "requires ORDER BY in SQL Server")
        rows = [("OFFSET", f"{select.offset} ROWS")]
        if select.limit is not None:
            rows.append(("FETCH", f"NEXT {select.limit} ROWS ONLY"))
        return rows


_DIALECT_REGISTRY: dict[str, type[Dialect]] = {
    "ansi": Dialect,
    "postgres": PostgresDialect,
    "postgresql": PostgresDialect,
    "sqlserver": SqlServerDialect,
    "mssql": SqlServerDialect,
}


def register_dialect(name: str, dialect_cls: type[Dialect]) -> None:
    """Make ``dialect_cls`` available to get_dialect() under ``name``."""
    _DIALECT_REGISTRY[name.lower()] = dialect_cls


def available_dialects() -> list[str]:
    return sorted(_DIALECT_REGISTRY)


def get_dialect(name: str | None = None) -> Dialect:
    """Return a dialect instance.

    Resolution order:
      - ``name`` argument (if provided)
      - CODEWEAVE_SQL_DIALECT environment variable
      - "ansi"

    Raises:
        UnknownDialectError: The resolved name is not registered
    """
    resolved = (name or os.getenv(DIALECT_ENV_VAR) or DEFAULT_DIALECT).lower()

    try:
        dialect_cls = _DIALECT_REGISTRY[resolved]
    except KeyError as exc:
        raise UnknownDialectError(resolved, available_dialects()) from exc

    logger.debug("Using SQL dialect %s for %r", dialect_cls.__name__, resolved)
    return dialect_cls()


__all__ = [
    "DEFAULT_DIALECT",
    "DIALECT_ENV_VAR",
    "Dialect",
    "PostgresDialect",
    "SqlServerDialect",
    "available_dialects",
    "get_dialect",
    "register_dialect",
]
