"""
Go backend for codeweave.

Build a tree of typed nodes, hand it to a Unit, render the file.

Quick Start:
    >>> from codeweave.golang import Unit, TypeDecls, TypeSpec, INT
    >>> unit = Unit("main")
    >>> unit.add(TypeDecls((TypeSpec("ID", INT),)))
    >>> text = unit.render()

Layout follows gofmt: constructs with a single compact member stay on one
line, everything else opens an indented block, and declaration groups align
their members in columns.
"""

from codeweave.golang.builders import (
    add_assign,
    addr_of,
    assign,
    binary,
    block,
    call,
    compl,
    define,
    deref,
    field,
    identity,
    if_,
    index,
    lit,
    member,
    negate,
    not_,
    param,
    paren,
    ret,
    sub_assign,
    sym,
    tag,
    type_param,
)
from codeweave.golang.compact import is_compact
from codeweave.golang.httpmap import RouteMapGenerator
from codeweave.golang.imports import BLANK_ALIAS, Import, Imports
from codeweave.golang.nodes import (
    ANY,
    BOOL,
    BREAK,
    BYTE,
    COMPARABLE,
    CONTINUE,
    ERROR,
    FALSE,
    FLOAT32,
    FLOAT64,
    IGNORE,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    NIL,
    RUNE,
    STRING,
    TRUE,
    UINT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    Assign,
    AssignOp,
    Binary,
    BinaryOp,
    Block,
    BoolLit,
    Break,
    Call,
    Comment,
    ConstDecls,
    Continue,
    Decl,
    Expr,
    ExprStmt,
    Field,
    FieldValue,
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
    Stmt,
    StringLit,
    StructLit,
    StructType,
    Symbol,
    Tag,
    Type,
    TypeDecls,
    TypeParam,
    TypeSpec,
    TypeTerm,
    Unary,
    UnaryOp,
    UnionType,
    ValueSpec,
    VarDecls,
)
from codeweave.golang.reflect import go_struct, go_type
from codeweave.golang.renderer import GoRenderer, render
from codeweave.golang.unit import Unit

__all__ = [
    # Assembly
    "Unit",
    "Import",
    "Imports",
    "BLANK_ALIAS",
    "RouteMapGenerator",
    # Rendering
    "GoRenderer",
    "render",
    "is_compact",
    # Reflection
    "go_struct",
    "go_type",
    # Node base and families
    "GoNode",
    "Type",
    "Expr",
    "Stmt",
    "Decl",
    # Types
    "NamedType",
    "PointerType",
    "SliceType",
    "MapType",
    "StructType",
    "Field",
    "Tag",
    "InterfaceType",
    "UnionType",
    "TypeTerm",
    "Method",
    "FuncType",
    "Param",
    "TypeParam",
    "ANY",
    "BOOL",
    "BYTE",
    "RUNE",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "FLOAT32",
    "FLOAT64",
    "STRING",
    "ERROR",
    "COMPARABLE",
    # Expressions
    "Nil",
    "BoolLit",
    "RuneLit",
    "IntLit",
    "FloatLit",
    "StringLit",
    "StructLit",
    "FieldValue",
    "MapLit",
    "MapEntry",
    "SliceLit",
    "FuncLit",
    "Symbol",
    "Member",
    "Call",
    "Index",
    "SliceExpr",
    "Paren",
    "Unary",
    "UnaryOp",
    "Binary",
    "BinaryOp",
    "NIL",
    "TRUE",
    "FALSE",
    "IGNORE",
    # Statements
    "Assign",
    "AssignOp",
    "Block",
    "Break",
    "Continue",
    "ExprStmt",
    "IncDec",
    "If",
    "For",
    "ForRange",
    "Return",
    "BREAK",
    "CONTINUE",
    # Declarations
    "Comment",
    "PackageClause",
    "TypeDecls",
    "TypeSpec",
    "VarDecls",
    "ConstDecls",
    "ValueSpec",
    "FuncDecl",
    # Builders
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
