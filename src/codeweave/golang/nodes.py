"""Typed Go nodes for codeweave.

All nodes are frozen dataclasses with slots:
- Immutability: predeclared types and shared leaves are safe to reuse
- Validation: identifiers are checked at construction, never at render time
- Pattern matching: the renderer and the compactness analyzer dispatch
  with match statements over this closed set of variants

Node Hierarchy:
GoNode (base)
├── Types: NamedType, PointerType, SliceType, MapType, StructType,
│          InterfaceType, UnionType, FuncType
├── Expressions: Nil, BoolLit, RuneLit, IntLit, FloatLit, StringLit,
│                StructLit, MapLit, SliceLit, FuncLit, Symbol, Member,
│                Call, Index, SliceExpr, Paren, Unary, Binary
├── Statements: Assign, Block, Break, Continue, ExprStmt, IncDec, If,
│               For, ForRange, Return
├── Declarations: Comment, PackageClause, TypeDecls, VarDecls, ConstDecls, FuncDecl
└── Parts: Field, Tag, TypeTerm, Method, Param, TypeParam, FieldValue,
           MapEntry, TypeSpec, ValueSpec

Sequences are tuples; the construction helpers in codeweave.golang.builders
accept any iterable.

"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from codeweave.errors import UnsupportedConstructError
from codeweave.golang.lexical import check_identifier, check_optional_identifier, has_surrogate

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class GoNode:
    """Base class for all Go nodes."""


# =============================================================================
# Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class NamedType(GoNode):
    """Reference to a named type, optionally package-qualified and instantiated.

    Go: pkg.Name[Arg1, Arg2]

    ``package`` is the alias the unit assigned to the import path, not the
    path itself.

    """

    name: str
    package: str = ""
    args: tuple[Type, ...] = ()

    def __post_init__(self) -> None:
        check_identifier(self.name)
        check_optional_identifier(self.package, "package alias")


@dataclass(frozen=True, slots=True)
class PointerType(GoNode):
    """Go: *Target"""

    target: Type


@dataclass(frozen=True, slots=True)
class SliceType(GoNode):
    """Slice, or array when a length is given.

    Go: []Item or [Length]Item

    """

    item: Type
    length: Expr | None = None


@dataclass(frozen=True, slots=True)
class MapType(GoNode):
    """Go: map[Key]Value"""

    key: Type
    value: Type


@dataclass(frozen=True, slots=True)
class Tag(GoNode):
    """One struct tag entry. Go: name:"value" """

    name: str
    value: str

    def __post_init__(self) -> None:
        if not self.name or any(ch in self.name for ch in ' :"`'):
            raise UnsupportedConstructError(self.name, "is not a valid struct tag key")
        if "`" in self.value:
            raise UnsupportedConstructError(self.value, "cannot appear in a raw struct tag")
        if has_surrogate(self.value):
            raise UnsupportedConstructError(self.value, "contains a surrogate code point")


@dataclass(frozen=True, slots=True)
class Field(GoNode):
    """Struct field. An empty name declares an embedded field."""

    type: Type
    name: str = ""
    tags: tuple[Tag, ...] = ()
    doc: str = ""

    def __post_init__(self) -> None:
        check_optional_identifier(self.name)


@dataclass(frozen=True, slots=True)
class StructType(GoNode):
    """Go: struct { Name Type `tags` ... }"""

    fields: tuple[Field, ...] = ()


@dataclass(frozen=True, slots=True)
class TypeTerm(GoNode):
    """Constraint term. Go: Type or ~Type"""

    type: Type
    approx: bool = False


@dataclass(frozen=True, slots=True)
class UnionType(GoNode):
    """Constraint union. Go: ~int | ~string"""

    terms: tuple[TypeTerm, ...]


@dataclass(frozen=True, slots=True)
class Method(GoNode):
    """Interface method. Go: Name(params) results"""

    name: str
    params: tuple[Param, ...] = ()
    results: tuple[Param, ...] = ()

    def __post_init__(self) -> None:
        check_identifier(self.name)


@dataclass(frozen=True, slots=True)
class InterfaceType(GoNode):
    """Go: interface { ~int | ~string; Method() }"""

    terms: tuple[TypeTerm, ...] = ()
    methods: tuple[Method, ...] = ()


@dataclass(frozen=True, slots=True)
class FuncType(GoNode):
    """Go: func(params) results"""

    params: tuple[Param, ...] = ()
    results: tuple[Param, ...] = ()


@dataclass(frozen=True, slots=True)
class Param(GoNode):
    """Function parameter or result. An empty name declares an unnamed one."""

    type: Type
    name: str = ""
    variadic: bool = False

    def __post_init__(self) -> None:
        check_optional_identifier(self.name)


@dataclass(frozen=True, slots=True)
class TypeParam(GoNode):
    """Generic type parameter. Go: T constraint"""

    name: str
    constraint: Type

    def __post_init__(self) -> None:
        check_identifier(self.name)


# Predeclared types, shared everywhere
ANY = NamedType("any")
BOOL = NamedType("bool")
BYTE = NamedType("byte")
RUNE = NamedType("rune")
INT = NamedType("int")
INT8 = NamedType("int8")
INT16 = NamedType("int16")
INT32 = NamedType("int32")
INT64 = NamedType("int64")
UINT = NamedType("uint")
UINT8 = NamedType("uint8")
UINT16 = NamedType("uint16")
UINT32 = NamedType("uint32")
UINT64 = NamedType("uint64")
FLOAT32 = NamedType("float32")
FLOAT64 = NamedType("float64")
STRING = NamedType("string")
ERROR = NamedType("error")
COMPARABLE = NamedType("comparable")


# =============================================================================
# Expressions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Nil(GoNode):
    """Go: nil"""


@dataclass(frozen=True, slots=True)
class BoolLit(GoNode):
    value: bool


@dataclass(frozen=True, slots=True)
class RuneLit(GoNode):
    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise UnsupportedConstructError(self.value, "is not a single character")
        if has_surrogate(self.value):
            raise UnsupportedConstructError(self.value, "is a surrogate code point")


@dataclass(frozen=True, slots=True)
class IntLit(GoNode):
    value: int


@dataclass(frozen=True, slots=True)
class FloatLit(GoNode):
    value: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise UnsupportedConstructError(self.value, "has no Go literal spelling")


@dataclass(frozen=True, slots=True)
class StringLit(GoNode):
    value: str

    def __post_init__(self) -> None:
        if has_surrogate(self.value):
            raise UnsupportedConstructError(self.value, "contains a surrogate code point")


@dataclass(frozen=True, slots=True)
class FieldValue(GoNode):
    """Keyed element of a struct literal. Go: Name: value"""

    name: str
    value: Expr

    def __post_init__(self) -> None:
        check_identifier(self.name)


@dataclass(frozen=True, slots=True)
class StructLit(GoNode):
    """Go: Type{Name: value, ...}"""

    type: Type | None = None
    fields: tuple[FieldValue, ...] = ()


@dataclass(frozen=True, slots=True)
class MapEntry(GoNode):
    key: Expr
    value: Expr


@dataclass(frozen=True, slots=True)
class MapLit(GoNode):
    """Go: map[K]V{key: value, ...}"""

    type: Type | None = None
    entries: tuple[MapEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class SliceLit(GoNode):
    """Go: []T{a, b, c}"""

    type: Type | None = None
    items: tuple[Expr, ...] = ()


@dataclass(frozen=True, slots=True)
class Block(GoNode):
    """Statement block. Go: { stmt; ... }"""

    stmts: tuple[Stmt, ...] = ()


@dataclass(frozen=True, slots=True)
class FuncLit(GoNode):
    """Go: func(params) results { body }"""

    params: tuple[Param, ...] = ()
    results: tuple[Param, ...] = ()
    body: Block = Block()


@dataclass(frozen=True, slots=True)
class Symbol(GoNode):
    """Reference to a named value, optionally package-qualified and instantiated.

    Go: pkg.Name[TypeArg]

    """

    name: str
    package: str = ""
    args: tuple[Type, ...] = ()

    def __post_init__(self) -> None:
        check_identifier(self.name)
        check_optional_identifier(self.package, "package alias")


@dataclass(frozen=True, slots=True)
class Member(GoNode):
    """Go: expr.Name"""

    expr: Expr
    name: str

    def __post_init__(self) -> None:
        check_identifier(self.name)


@dataclass(frozen=True, slots=True)
class Call(GoNode):
    """Go: func(args...)"""

    func: Expr
    args: tuple[Expr, ...] = ()


@dataclass(frozen=True, slots=True)
class Index(GoNode):
    """Go: expr[index]"""

    expr: Expr
    index: Expr


@dataclass(frozen=True, slots=True)
class SliceExpr(GoNode):
    """Go: expr[low:high]"""

    expr: Expr
    low: Expr | None = None
    high: Expr | None = None


@dataclass(frozen=True, slots=True)
class Paren(GoNode):
    """Go: (expr)"""

    expr: Expr


class UnaryOp(StrEnum):
    IDENTITY = "+"
    NEGATE = "-"
    NOT = "!"
    COMPL = "^"
    ADDR_OF = "&"
    DEREF = "*"


@dataclass(frozen=True, slots=True)
class Unary(GoNode):
    op: UnaryOp
    expr: Expr


class BinaryOp(StrEnum):
    MUL = "*"
    DIV = "/"
    REM = "%"
    ADD = "+"
    SUB = "-"
    SHL = "<<"
    SHR = ">>"
    BIT_AND = "&"
    BIT_XOR = "^"
    BIT_OR = "|"
    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    AND = "&&"
    OR = "||"


@dataclass(frozen=True, slots=True)
class Binary(GoNode):
    op: BinaryOp
    lhs: Expr
    rhs: Expr


NIL = Nil()
TRUE = BoolLit(True)
FALSE = BoolLit(False)
IGNORE = Symbol("_")


# =============================================================================
# Statements
# =============================================================================


class AssignOp(StrEnum):
    ASSIGN = "="
    DEFINE = ":="
    ADD = "+="
    SUB = "-="
    MUL = "*="
    DIV = "/="
    REM = "%="
    AND = "&="
    OR = "|="
    XOR = "^="
    SHL = "<<="
    SHR = ">>="


@dataclass(frozen=True, slots=True)
class Assign(GoNode):
    """Go: a, b = x, y"""

    targets: tuple[Expr, ...]
    values: tuple[Expr, ...]
    op: AssignOp = AssignOp.ASSIGN


@dataclass(frozen=True, slots=True)
class Break(GoNode):
    pass


@dataclass(frozen=True, slots=True)
class Continue(GoNode):
    pass


@dataclass(frozen=True, slots=True)
class ExprStmt(GoNode):
    expr: Expr


@dataclass(frozen=True, slots=True)
class IncDec(GoNode):
    """Go: x++ or x--"""

    expr: Expr
    increment: bool = True


@dataclass(frozen=True, slots=True)
class If(GoNode):
    """Go: if init; cond { then } else ...

    ``else_`` is either a Block or a chained If.

    """

    cond: Expr
    then: Block = Block()
    else_: Block | If | None = None
    init: Stmt | None = None


@dataclass(frozen=True, slots=True)
class For(GoNode):
    """Go: for init; cond; post { body }, for cond { body } or for { body }"""

    body: Block = Block()
    cond: Expr | None = None
    init: Stmt | None = None
    post: Stmt | None = None


@dataclass(frozen=True, slots=True)
class ForRange(GoNode):
    """Go: for key, value := range expr { body }"""

    expr: Expr
    body: Block = Block()
    key: Expr | None = None
    value: Expr | None = None
    define: bool = True


@dataclass(frozen=True, slots=True)
class Return(GoNode):
    """Go: return a, b"""

    values: tuple[Expr, ...] = ()


BREAK = Break()
CONTINUE = Continue()


# =============================================================================
# Declarations
# =============================================================================


@dataclass(frozen=True, slots=True)
class Comment(GoNode):
    """Line comment block. Go: // text"""

    text: str


@dataclass(frozen=True, slots=True)
class PackageClause(GoNode):
    """Go: package name"""

    name: str

    def __post_init__(self) -> None:
        check_identifier(self.name, "package name")


@dataclass(frozen=True, slots=True)
class TypeSpec(GoNode):
    """One type declaration. Go: Name[params] Type or Name = Type"""

    name: str
    type: Type
    params: tuple[TypeParam, ...] = ()
    doc: str = ""
    alias: bool = False

    def __post_init__(self) -> None:
        check_identifier(self.name)


@dataclass(frozen=True, slots=True)
class TypeDecls(GoNode):
    """Go: type X T, or type ( ... ) for several specs"""

    specs: tuple[TypeSpec, ...] = ()


@dataclass(frozen=True, slots=True)
class ValueSpec(GoNode):
    """One var or const declaration. Go: name Type = value"""

    name: str
    type: Type | None = None
    value: Expr | None = None
    doc: str = ""

    def __post_init__(self) -> None:
        check_identifier(self.name)
        if self.type is None and self.value is None:
            raise UnsupportedConstructError(self.name, "needs a type or a value")


@dataclass(frozen=True, slots=True)
class VarDecls(GoNode):
    """Go: var x T = v, or var ( ... ) for several specs"""

    specs: tuple[ValueSpec, ...] = ()


@dataclass(frozen=True, slots=True)
class ConstDecls(GoNode):
    """Go: const x T = v, or const ( ... ) for several specs"""

    specs: tuple[ValueSpec, ...] = ()


@dataclass(frozen=True, slots=True)
class FuncDecl(GoNode):
    """Function or method declaration.

    Go: func (recv T) Name[TP any](params) results { body }

    """

    name: str
    params: tuple[Param, ...] = ()
    results: tuple[Param, ...] = ()
    body: Block = Block()
    receiver: Param | None = None
    type_params: tuple[TypeParam, ...] = ()
    doc: str = ""

    def __post_init__(self) -> None:
        check_identifier(self.name)


# PEP 695 type aliases for the node families
type Type = (
    NamedType
    | PointerType
    | SliceType
    | MapType
    | StructType
    | InterfaceType
    | UnionType
    | FuncType
)

type Expr = (
    Nil
    | BoolLit
    | RuneLit
    | IntLit
    | FloatLit
    | StringLit
    | StructLit
    | MapLit
    | SliceLit
    | FuncLit
    | Symbol
    | Member
    | Call
    | Index
    | SliceExpr
    | Paren
    | Unary
    | Binary
)

type Decl = Comment | PackageClause | TypeDecls | VarDecls | ConstDecls | FuncDecl

type Stmt = (
    Assign
    | Block
    | Break
    | Continue
    | ExprStmt
    | IncDec
    | If
    | For
    | ForRange
    | Return
    | TypeDecls
    | VarDecls
    | ConstDecls
)
