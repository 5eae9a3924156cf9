"""Construction helpers for Go trees.

Short factories over the node constructors: they accept any iterable where
a node stores a tuple, and pick the literal node from the Python type of a
value.

Example:
    >>> from codeweave.golang.renderer import render
    >>> render(if_(binary("!=", sym("err"), NIL), ret(sym("err"))))
    'if err != nil { return err }'

"""

from __future__ import annotations

from collections.abc import Iterable

from codeweave.errors import UnsupportedConstructError
from codeweave.golang.nodes import (
    FALSE,
    NIL,
    TRUE,
    Assign,
    AssignOp,
    Binary,
    BinaryOp,
    Block,
    Call,
    Expr,
    Field,
    FloatLit,
    If,
    Index,
    IntLit,
    Member,
    Param,
    Paren,
    Return,
    Stmt,
    StringLit,
    Symbol,
    Tag,
    Type,
    TypeParam,
    Unary,
    UnaryOp,
)

# =============================================================================
# Expressions
# =============================================================================


def lit(value: object) -> Expr:
    """Literal node for a Python value.

    None -> nil, bool -> true/false, int, float and str -> their literals.

    Raises:
        UnsupportedConstructError: No Go literal exists for the value's type
    """
    match value:
        case None:
            return NIL
        case bool():
            return TRUE if value else FALSE
        case int():
            return IntLit(value)
        case float():
            return FloatLit(value)
        case str():
            return StringLit(value)
    raise UnsupportedConstructError(value, "has no Go literal")


def sym(name: str, package: str = "", args: Iterable[Type] = ()) -> Symbol:
    return Symbol(name, package, tuple(args))


def member(expr: Expr, *names: str) -> Expr:
    """Chained selector: member(x, "a", "b") is x.a.b."""
    for name in names:
        expr = Member(expr, name)
    return expr


def call(func: Expr, *args: Expr) -> Call:
    return Call(func, args)


def index(expr: Expr, idx: Expr) -> Index:
    return Index(expr, idx)


def paren(expr: Expr) -> Paren:
    return Paren(expr)


def identity(expr: Expr) -> Unary:
    return Unary(UnaryOp.IDENTITY, expr)


def negate(expr: Expr) -> Unary:
    return Unary(UnaryOp.NEGATE, expr)


def not_(expr: Expr) -> Unary:
    return Unary(UnaryOp.NOT, expr)


def compl(expr: Expr) -> Unary:
    return Unary(UnaryOp.COMPL, expr)


def addr_of(expr: Expr) -> Unary:
    return Unary(UnaryOp.ADDR_OF, expr)


def deref(expr: Expr) -> Unary:
    return Unary(UnaryOp.DEREF, expr)


def binary(op: BinaryOp | str, lhs: Expr, rhs: Expr) -> Binary:
    """Binary expression; ``op`` may be given as its Go spelling ("&&", "<")."""
    return Binary(BinaryOp(op), lhs, rhs)


# =============================================================================
# Statements
# =============================================================================


def _assign(op: AssignOp, targets: Expr | Iterable[Expr], values: Expr | Iterable[Expr]) -> Assign:
    return Assign(_exprs(targets), _exprs(values), op)


def assign(targets: Expr | Iterable[Expr], values: Expr | Iterable[Expr]) -> Assign:
    """Go: targets = values"""
    return _assign(AssignOp.ASSIGN, targets, values)


def define(targets: Expr | Iterable[Expr], values: Expr | Iterable[Expr]) -> Assign:
    """Go: targets := values"""
    return _assign(AssignOp.DEFINE, targets, values)


def add_assign(target: Expr, value: Expr) -> Assign:
    return _assign(AssignOp.ADD, target, value)


def sub_assign(target: Expr, value: Expr) -> Assign:
    return _assign(AssignOp.SUB, target, value)


def ret(*values: Expr) -> Return:
    return Return(values)


def block(*stmts: Stmt) -> Block:
    return Block(stmts)


def if_(cond: Expr, *then: Stmt, else_: Block | If | None = None, init: Stmt | None = None) -> If:
    """Go: if init; cond { then... } else ..."""
    return If(cond, Block(then), else_, init)


# =============================================================================
# Declaration parts
# =============================================================================


def param(name: str, typ: Type, variadic: bool = False) -> Param:
    return Param(typ, name, variadic)


def type_param(name: str, constraint: Type) -> TypeParam:
    return TypeParam(name, constraint)


def field(name: str, typ: Type, *tags: Tag, doc: str = "") -> Field:
    return Field(typ, name, tags, doc)


def tag(name: str, value: str) -> Tag:
    return Tag(name, value)


def _exprs(value: Expr | Iterable[Expr]) -> tuple[Expr, ...]:
    # Nodes are not iterable, so anything iterable here is a sequence of nodes
    if isinstance(value, Iterable):
        return tuple(value)
    return (value,)


__all__ = [
    "add_assign",
    "addr_of",
    "assign",
    "binary",
    "block",
    "call",
    "compl",
    "define",
    "deref",
    "field",
    "identity",
    "if_",
    "index",
    "lit",
    "member",
    "negate",
    "not_",
    "param",
    "paren",
    "ret",
    "sub_assign",
    "sym",
    "tag",
    "type_param",
]
