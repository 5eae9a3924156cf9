"""
SQL backend for codeweave.

Quick Start:
    >>> from codeweave.sql import Column, ObjectName, FromClause, select, render
    >>> query = select(Column("id"), from_=FromClause(ObjectName("users")))
    >>> print(render(query, "postgres"), end="")
    SELECT "id"
    FROM   "users"

Dialects:
    ansi       standard SQL (default)
    postgres   $n parameters
    sqlserver  [names], @pN parameters, TOP and OFFSET ... FETCH
"""

from codeweave.sql.dialects import (
    Dialect,
    PostgresDialect,
    SqlServerDialect,
    available_dialects,
    get_dialect,
    register_dialect,
)
from codeweave.sql.nodes import (
    CTE,
    NULL,
    STAR,
    And,
    Column,
    Compare,
    CompareOp,
    Cond,
    Expr,
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
    Query,
    QuerySet,
    QueryStmt,
    Select,
    SelectColumn,
    SetOp,
    SqlNode,
    Star,
    and_,
    compare,
    eq,
    is_not_null,
    is_null,
    not_,
    or_,
    precedence,
    select,
)
from codeweave.sql.renderer import SqlRenderer, render

__all__ = [
    # Rendering
    "SqlRenderer",
    "render",
    # Dialects
    "Dialect",
    "PostgresDialect",
    "SqlServerDialect",
    "available_dialects",
    "get_dialect",
    "register_dialect",
    # Nodes
    "SqlNode",
    "Expr",
    "Cond",
    "Query",
    "Name",
    "ObjectName",
    "Column",
    "Star",
    "STAR",
    "Literal",
    "NULL",
    "Param",
    "Func",
    "Or",
    "And",
    "Not",
    "Compare",
    "CompareOp",
    "NullCheck",
    "SelectColumn",
    "FromClause",
    "Join",
    "JoinKind",
    "OrderItem",
    "Select",
    "QuerySet",
    "SetOp",
    "CTE",
    "QueryStmt",
    # Builders
    "and_",
    "compare",
    "eq",
    "is_not_null",
    "is_null",
    "not_",
    "or_",
    "precedence",
    "select",
]
