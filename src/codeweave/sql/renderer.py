"""SQL renderer.

SELECT statements are laid out as a two-column table, clause keyword and
clause text, so that the clause bodies start at the same column:

    SELECT   "u"."id",
             "u"."name"
    FROM     "app"."users" AS "u"
    WHERE    "u"."active" = TRUE
    AND      "u"."age" >= ?
    ORDER BY "u"."name"

Subqueries and CTE bodies are indented blocks inside parentheses. Every
statement line ends with a newline.

"""

from __future__ import annotations

from collections.abc import Iterable

from codeweave.errors import RenderError
from codeweave.sql.dialects import Dialect, get_dialect
from codeweave.sql.nodes import (
    CTE,
    And,
    Column,
    Compare,
    Cond,
    FromClause,
    Func,
    Join,
    JoinKind,
    Literal,
    Name,
    Not,
    NullCheck,
    ObjectName,
    Or,
    OrderItem,
    Param,
    QuerySet,
    QueryStmt,
    Select,
    SelectColumn,
    SqlNode,
    Star,
    precedence,
)
from codeweave.table import Row, row, write_table
from codeweave.writer import IndentWriter, write_string


class SqlRenderer:
    """Render SQL nodes with the spelling rules of one dialect."""

    __slots__ = ("dialect",)

    def __init__(self, dialect: Dialect | str | None = None) -> None:
        if not isinstance(dialect, Dialect):
            dialect = get_dialect(dialect)
        self.dialect = dialect

    def render(self, node: SqlNode, indent_unit: str | None = None) -> str:
        return write_string(lambda w: self.write(node, w), indent_unit)

    def write(self, node: SqlNode, w: IndentWriter) -> None:
        """Write a node at the writer's current position."""
        match node:
            case QueryStmt():
                self._write_query_stmt(node, w)
            case Select():
                self._write_select(node, w)
            case QuerySet():
                self._write_query_set(node, w)
            case Or() | And() | Not() | Compare() | NullCheck():
                self._write_cond(node, w)
            case Name():
                w.write(self.dialect.quote_name(node.value))
            case ObjectName():
                if node.schema:
                    w.write(self.dialect.quote_name(node.schema))
                    w.write_char(".")
                w.write(self.dialect.quote_name(node.name))
            case Column():
                if node.table:
                    w.write(self.dialect.quote_name(node.table))
                    w.write_char(".")
                w.write(self.dialect.quote_name(node.name))
            case Star():
                if node.table:
                    w.write(self.dialect.quote_name(node.table))
                    w.write_char(".")
                w.write_char("*")
            case Literal():
                w.write(self.dialect.literal(node.value))
            case Param():
                w.write(self.dialect.param(node.index))
            case Func():
                w.write(node.name.upper())
                w.write_char("(")
                self._write_list(node.args, w)
                w.write_char(")")
            case SelectColumn():
                self.write(node.expr, w)
                self._write_alias(node.alias, w)
            case OrderItem():
                self.write(node.expr, w)
                if node.desc:
                    w.write(" DESC")
            case FromClause():
                self._write_source(node.source, w)
                self._write_alias(node.alias, w)
            case Join():
                w.write(self._join_text(node, w))
            case CTE():
                self._write_cte(node, w)
            case _:
                raise RenderError(f"cannot render {type(node).__name__}: not a SQL node")

    # =========================================================================
    # Queries
    # =========================================================================

    def _write_select(self, select: Select, w: IndentWriter) -> None:
        rows: list[Row] = []
        last = len(select.columns) - 1

        keyword = self.dialect.select_keyword(select)
        for idx, column in enumerate(select.columns):
            text = self._text(column, w)
            if idx < last:
                text += ","
            rows.append(row(keyword if idx == 0 else "", text))

        if select.from_ is not None:
            rows.append(row("FROM", self._text(select.from_, w)))

        for join in select.joins:
            rows.append(row(self.dialect.join_keyword(join.kind), self._join_text(join, w)))

        if select.where is not None:
            rows.extend(self._cond_rows("WHERE", select.where, w))

        if select.group_by:
            rows.append(row("GROUP BY", self._text_list(select.group_by, w)))

        if select.having is not None:
            rows.extend(self._cond_rows("HAVING", select.having, w))

        if select.order_by:
            rows.append(row("ORDER BY", self._text_list(select.order_by, w)))

        rows.extend(row(kw, text) for kw, text in self.dialect.limit_rows(select))

        write_table(w, rows)

    def _cond_rows(self, keyword: str, cond: Cond, w: IndentWriter) -> list[Row]:
        """One row per top-level AND operand: WHERE a / AND b / AND c."""
        if not isinstance(cond, And):
            return [row(keyword, self._text(cond, w))]

        parent = precedence(cond)
        return [
            row(keyword if idx == 0 else "AND", self._cond_text(operand, parent, w))
            for idx, operand in enumerate(cond.operands)
        ]

    def _join_text(self, join: Join, w: IndentWriter) -> str:
        text = write_string(lambda sub: self._write_source(join.source, sub), w.indent_unit)
        if join.alias:
            text += " AS " + self.dialect.quote_name(join.alias)
        if join.kind != JoinKind.CROSS:
            text += " ON " + self._text(join.on, w)
        return text

    def _write_source(self, source: SqlNode, w: IndentWriter) -> None:
        if isinstance(source, (Select, QuerySet)):
            self._write_subquery(source, w)
        else:
            self.write(source, w)

    def _write_subquery(self, query: Select | QuerySet, w: IndentWriter) -> None:
        w.write_char("(")
        w.newline()
        with w.indent():
            self.write(query, w)
        w.write_char(")")

    def _write_query_set(self, query: QuerySet, w: IndentWriter) -> None:
        keyword = self.dialect.set_operator(query.op, query.all)
        self.write(query.lhs, w)
        w.write(keyword)
        w.newline()
        if isinstance(query.rhs, QuerySet):
            # Keep the right operand grouped: a UNION (b EXCEPT c)
            self._write_subquery(query.rhs, w)
            w.newline()
        else:
            self.write(query.rhs, w)

    def _write_query_stmt(self, stmt: QueryStmt, w: IndentWriter) -> None:
        if stmt.with_:
            w.write(self.dialect.with_keyword(any(cte.recursive for cte in stmt.with_)))
            w.space()
            for idx, cte in enumerate(stmt.with_):
                if idx > 0:
                    w.write_char(",")
                    w.newline()
                self._write_cte(cte, w)
            w.newline()
        self.write(stmt.query, w)

    def _write_cte(self, cte: CTE, w: IndentWriter) -> None:
        w.write(self.dialect.quote_name(cte.name))
        if cte.columns:
            w.write(" (")
            w.write(", ".join(self.dialect.quote_name(column) for column in cte.columns))
            w.write_char(")")
        w.write(" AS ")
        self._write_subquery(cte.query, w)

    # =========================================================================
    # Conditions
    # =========================================================================

    def _write_cond(self, cond: Cond, w: IndentWriter) -> None:
        match cond:
            case Or():
                self._write_operands(cond.operands, " OR ", precedence(cond), w)
            case And():
                self._write_operands(cond.operands, " AND ", precedence(cond), w)
            case Not():
                w.write("NOT ")
                w.write(self._cond_text(cond.operand, precedence(cond), w))
            case Compare():
                self.write(cond.lhs, w)
                w.write(f" {self.dialect.compare_op(cond.op)} ")
                self.write(cond.rhs, w)
            case NullCheck():
                self.write(cond.expr, w)
                w.write(" IS NOT NULL" if cond.negated else " IS NULL")

    def _write_operands(
        self, operands: Iterable[Cond], separator: str, parent: int, w: IndentWriter
    ) -> None:
        for idx, operand in enumerate(operands):
            if idx > 0:
                w.write(separator)
            w.write(self._cond_text(operand, parent, w))

    def _cond_text(self, cond: Cond, parent: int, w: IndentWriter) -> str:
        """Operand text, parenthesized when it binds weaker than its parent."""
        text = self._text(cond, w)
        if precedence(cond) < parent:
            return f"({text})"
        return text

    # =========================================================================
    # Helpers
    # =========================================================================

    def _write_alias(self, alias: str, w: IndentWriter) -> None:
        if alias:
            w.write(" AS ")
            w.write(self.dialect.quote_name(alias))

    def _write_list(self, nodes: Iterable[SqlNode], w: IndentWriter) -> None:
        for idx, node in enumerate(nodes):
            if idx > 0:
                w.write(", ")
            self.write(node, w)

    def _text(self, node: SqlNode, w: IndentWriter) -> str:
        return self.render(node, w.indent_unit)

    def _text_list(self, nodes: Iterable[SqlNode], w: IndentWriter) -> str:
        return write_string(lambda sub: self._write_list(nodes, sub), w.indent_unit)


def render(node: SqlNode, dialect: Dialect | str | None = None, indent_unit: str | None = None) -> str:
    """Render a SQL node with ``dialect`` (a Dialect, a registered name, or None for the default)."""
    return SqlRenderer(dialect).render(node, indent_unit)


__all__ = ["SqlRenderer", "render"]
