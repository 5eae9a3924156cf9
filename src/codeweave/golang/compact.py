"""Compactness analysis for Go nodes.

A node is compact when it has a lossless single-line spelling: it has an
inline form and every child it renders is compact too. The renderer asks
before choosing between the inline form and the block form of a construct.

Declaration groups, struct fields and interface members follow the
membership rule: zero members, or exactly one compact member. Two or more
members always take the block form so that they can align in columns.

The decision depends only on the shape of the tree, never on line width
or on the current output column.
"""

from __future__ import annotations

from collections.abc import Iterable

from codeweave.errors import RenderError
from codeweave.golang.imports import Imports
from codeweave.golang.nodes import (
    Assign,
    Binary,
    Block,
    BoolLit,
    Break,
    Call,
    Comment,
    ConstDecls,
    Continue,
    ExprStmt,
    Field,
    FloatLit,
    For,
    ForRange,
    FuncDecl,
    FuncLit,
    FuncType,
    GoNode,
    If,
    IncDec,
    Index,
    IntLit,
    InterfaceType,
    MapEntry,
    MapLit,
    MapType,
    Member,
    Method,
    NamedType,
    Nil,
    PackageClause,
    Param,
    Paren,
    PointerType,
    Return,
    RuneLit,
    SliceExpr,
    SliceLit,
    SliceType,
    StringLit,
    StructLit,
    StructType,
    Symbol,
    TypeDecls,
    TypeParam,
    TypeSpec,
    TypeTerm,
    Unary,
    UnionType,
    ValueSpec,
    VarDecls,
)


def all_compact(nodes: Iterable[GoNode | None]) -> bool:
    """True if every present node is compact (absent optional parts count as compact)."""
    return all(node is None or is_compact(node) for node in nodes)


def group_compact(members: tuple[GoNode, ...]) -> bool:
    """Membership rule for aggregates: no members, or one compact member."""
    match len(members):
        case 0:
            return True
        case 1:
            return is_compact(members[0])
    return False


def is_compact(node: GoNode | Imports) -> bool:
    """Answer whether ``node`` renders losslessly on a single line."""
    match node:
        # Leaves
        case Nil() | BoolLit() | RuneLit() | IntLit() | FloatLit() | StringLit():
            return True
        case Break() | Continue() | PackageClause():
            return True
        case Comment():
            return False

        # Types
        case NamedType() | Symbol():
            return all_compact(node.args)
        case PointerType():
            return is_compact(node.target)
        case SliceType():
            return all_compact((node.length, node.item))
        case MapType():
            return all_compact((node.key, node.value))
        case StructType():
            return group_compact(node.fields)
        case Field():
            return not node.doc and is_compact(node.type)
        case InterfaceType():
            members: tuple[GoNode, ...] = node.methods
            if node.terms:
                members = (UnionType(node.terms), *members)
            return group_compact(members)
        case UnionType():
            return all_compact(node.terms)
        case TypeTerm():
            return is_compact(node.type)
        case Method() | FuncType():
            return all_compact((*node.params, *node.results))
        case Param():
            return is_compact(node.type)
        case TypeParam():
            return is_compact(node.constraint)

        # Expressions
        case StructLit():
            return not node.fields
        case MapLit():
            return not node.entries
        case MapEntry():
            return all_compact((node.key, node.value))
        case SliceLit():
            return all_compact((node.type, *node.items))
        case FuncLit():
            return all_compact((*node.params, *node.results, node.body))
        case Member():
            return is_compact(node.expr)
        case Call():
            return all_compact((node.func, *node.args))
        case Index():
            return all_compact((node.expr, node.index))
        case SliceExpr():
            return all_compact((node.expr, node.low, node.high))
        case Paren() | Unary():
            return is_compact(node.expr)
        case Binary():
            return all_compact((node.lhs, node.rhs))

        # Statements
        case Assign():
            return all_compact((*node.targets, *node.values))
        case Block():
            return group_compact(node.stmts)
        case ExprStmt() | IncDec():
            return is_compact(node.expr)
        case Return():
            return all_compact(node.values)
        case If():
            return all_compact((node.init, node.cond, node.then, node.else_))
        case For():
            return all_compact((node.init, node.cond, node.post, node.body))
        case ForRange():
            return all_compact((node.key, node.value, node.expr, node.body))

        # Declarations
        case TypeDecls():
            return group_compact(node.specs)
        case TypeSpec():
            return not node.doc and all_compact((*node.params, node.type))
        case VarDecls() | ConstDecls():
            return group_compact(node.specs)
        case ValueSpec():
            return not node.doc and all_compact((node.type, node.value))
        case FuncDecl():
            return not node.doc and all_compact(
                (node.receiver, *node.type_params, *node.params, *node.results, node.body)
            )
        case Imports():
            return len(node) < 2

    raise RenderError(f"cannot analyze {type(node).__name__}: not a Go node")


__all__ = ["all_compact", "group_compact", "is_compact"]
