"""Typed SQL nodes for codeweave.

The catalog covers the query subset that generators need: names and
expressions, boolean conditions with precedence, SELECT statements with
joins, set operations and common table expressions. Nodes carry no
dialect knowledge; quoting, parameter markers and keyword spelling are
decided by the Dialect at render time.

Node Hierarchy:
SqlNode (base)
├── Expressions: Name, Column, Star, Literal, Param, Func
├── Conditions: Or, And, Not, Compare, NullCheck
├── Queries: Select, QuerySet
└── Parts: ObjectName, SelectColumn, FromClause, Join, OrderItem, CTE,
           QueryStmt

"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from codeweave.errors import InvalidIdentifierError, UnsupportedConstructError
from codeweave.utils.text import is_identifier

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class SqlNode:
    """Base class for all SQL nodes."""


def _check_name(name: str) -> None:
    # Names are always quoted, so any non-empty text is allowed
    if not name:
        raise UnsupportedConstructError(name, "is not a SQL name")


# =============================================================================
# Names and Expressions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Name(SqlNode):
    """Unqualified quoted name, e.g. a column alias in ORDER BY."""

    value: str

    def __post_init__(self) -> None:
        _check_name(self.value)


@dataclass(frozen=True, slots=True)
class ObjectName(SqlNode):
    """Schema-qualified table or view. SQL: "schema"."name" """

    name: str
    schema: str = ""

    def __post_init__(self) -> None:
        _check_name(self.name)


@dataclass(frozen=True, slots=True)
class Column(SqlNode):
    """SQL: "table"."name" """

    name: str
    table: str = ""

    def __post_init__(self) -> None:
        _check_name(self.name)


@dataclass(frozen=True, slots=True)
class Star(SqlNode):
    """SQL: * or "table".*"""

    table: str = ""


@dataclass(frozen=True, slots=True)
class Literal(SqlNode):
    """Constant value: None, bool, int, float or str."""

    value: None | bool | int | float | str

    def __post_init__(self) -> None:
        if not isinstance(self.value, (type(None), bool, int, float, str)):
            raise UnsupportedConstructError(self.value, "has no SQL literal")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise UnsupportedConstructError(self.value, "has no SQL literal")


@dataclass(frozen=True, slots=True)
class Param(SqlNode):
    """Positional statement parameter, numbered from 1."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 1:
            raise UnsupportedConstructError(self.index, "is not a parameter number")


@dataclass(frozen=True, slots=True)
class Func(SqlNode):
    """Function call. SQL: NAME(args)"""

    name: str
    args: tuple[Expr, ...] = ()

    def __post_init__(self) -> None:
        if not is_identifier(self.name):
            raise InvalidIdentifierError(self.name, "function name")


STAR = Star()
NULL = Literal(None)


# =============================================================================
# Conditions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Or(SqlNode):
    operands: tuple[Cond, ...]


@dataclass(frozen=True, slots=True)
class And(SqlNode):
    operands: tuple[Cond, ...]


@dataclass(frozen=True, slots=True)
class Not(SqlNode):
    operand: Cond


class CompareOp(StrEnum):
    EQ = "="
    NE = "<>"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    LIKE = "LIKE"


@dataclass(frozen=True, slots=True)
class Compare(SqlNode):
    """SQL: lhs op rhs"""

    op: CompareOp
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True, slots=True)
class NullCheck(SqlNode):
    """SQL: expr IS NULL or expr IS NOT NULL"""

    expr: Expr
    negated: bool = False


def precedence(cond: Cond) -> int:
    """Binding strength: OR < AND < NOT < predicates."""
    match cond:
        case Or():
            return 0
        case And():
            return 1
        case Not():
            return 2
    return 3


def _combine(kind: type[Or] | type[And], conds: tuple[Cond | None, ...]) -> Cond | None:
    operands: list[Cond] = []
    for cond in conds:
        if cond is None:
            continue
        if isinstance(cond, kind):
            operands.extend(cond.operands)
        else:
            operands.append(cond)

    match len(operands):
        case 0:
            return None
        case 1:
            return operands[0]
    return kind(tuple(operands))


def or_(*conds: Cond | None) -> Cond | None:
    """Disjunction; nested ORs are flattened and None operands dropped.

    Returns None when no operand remains and the operand itself when one does.
    """
    return _combine(Or, conds)


def and_(*conds: Cond | None) -> Cond | None:
    """Conjunction; nested ANDs are flattened and None operands dropped."""
    return _combine(And, conds)


def not_(cond: Cond) -> Not:
    return Not(cond)


def compare(op: CompareOp | str, lhs: Expr, rhs: Expr) -> Compare:
    return Compare(CompareOp(op), lhs, rhs)


def eq(lhs: Expr, rhs: Expr) -> Compare:
    return Compare(CompareOp.EQ, lhs, rhs)


def is_null(expr: Expr) -> NullCheck:
    return NullCheck(expr)


def is_not_null(expr: Expr) -> NullCheck:
    return NullCheck(expr, negated=True)


# =============================================================================
# Queries
# =============================================================================


@dataclass(frozen=True, slots=True)
class SelectColumn(SqlNode):
    """SQL: expr AS "alias" """

    expr: Expr
    alias: str = ""


@dataclass(frozen=True, slots=True)
class FromClause(SqlNode):
    """Table or subquery in FROM, with optional alias."""

    source: ObjectName | Query
    alias: str = ""


class JoinKind(StrEnum):
    INNER = "inner"
    LEFT = "left"
    RIGHT = "right"
    FULL = "full"
    CROSS = "cross"


@dataclass(frozen=True, slots=True)
class Join(SqlNode):
    """SQL: INNER JOIN source AS alias ON cond"""

    kind: JoinKind
    source: ObjectName | Query
    alias: str = ""
    on: Cond | None = None

    def __post_init__(self) -> None:
        if self.kind == JoinKind.CROSS and self.on is not None:
            raise UnsupportedConstructError(self.kind, "join takes no ON condition")
        if self.kind != JoinKind.CROSS and self.on is None:
            raise UnsupportedConstructError(self.kind, "join needs an ON condition")


@dataclass(frozen=True, slots=True)
class OrderItem(SqlNode):
    expr: Expr
    desc: bool = False


@dataclass(frozen=True, slots=True)
class Select(SqlNode):
    """SELECT statement.

    SQL: SELECT [DISTINCT] columns FROM ... [joins] [WHERE] [GROUP BY]
         [HAVING] [ORDER BY] [limit and offset, spelled by the dialect]

    """

    columns: tuple[SelectColumn, ...]
    from_: FromClause | None = None
    joins: tuple[Join, ...] = ()
    where: Cond | None = None
    group_by: tuple[Expr, ...] = ()
    having: Cond | None = None
    order_by: tuple[OrderItem, ...] = ()
    limit: int | None = None
    offset: int | None = None
    distinct: bool = False

    def __post_init__(self) -> None:
        if not self.columns:
            raise UnsupportedConstructError("SELECT", "needs at least one column")
        if self.joins and self.from_ is None:
            raise UnsupportedConstructError("JOIN", "needs a FROM clause")
        for value in (self.limit, self.offset):
            if value is not None and value < 0:
                raise UnsupportedConstructError(value, "is not a row count")


class SetOp(StrEnum):
    UNION = "UNION"
    INTERSECT = "INTERSECT"
    EXCEPT = "EXCEPT"


@dataclass(frozen=True, slots=True)
class QuerySet(SqlNode):
    """SQL: lhs UNION [ALL] rhs"""

    op: SetOp
    lhs: Query
    rhs: Query
    all: bool = False


@dataclass(frozen=True, slots=True)
class CTE(SqlNode):
    """Common table expression. SQL: "name" ("col", ...) AS ( query )"""

    name: str
    query: Query
    columns: tuple[str, ...] = ()
    recursive: bool = False

    def __post_init__(self) -> None:
        _check_name(self.name)
        for column in self.columns:
            _check_name(column)


@dataclass(frozen=True, slots=True)
class QueryStmt(SqlNode):
    """Query with its WITH clause."""

    query: Query
    with_: tuple[CTE, ...] = ()


type Expr = Name | Column | Star | Literal | Param | Func
type Cond = Or | And | Not | Compare | NullCheck
type Query = Select | QuerySet


def select(*columns: Expr | SelectColumn, **clauses: object) -> Select:
    """Select with plain expressions wrapped into unaliased columns."""
    wrapped = tuple(col if isinstance(col, SelectColumn) else SelectColumn(col) for col in columns)
    return Select(wrapped, **clauses)
