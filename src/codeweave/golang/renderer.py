"""Go renderer.

Writes Go nodes to an IndentWriter. Every construct with an inline and a
block spelling asks the compactness analyzer which one to use; declaration
groups and struct bodies put their members in an aligned table.

Example:
    >>> from codeweave.golang import nodes as go
    >>> render(go.TypeDecls((go.TypeSpec("ID", go.INT64),)))
    'type ID int64'

Thread Safety:
GoRenderer holds no state; every render() call creates its own writer.

"""

from __future__ import annotations

from collections.abc import Sequence

from codeweave.errors import RenderError
from codeweave.golang.compact import is_compact
from codeweave.golang.imports import Imports
from codeweave.golang.lexical import doc_prefix, line_comment, quote, quote_rune
from codeweave.golang.nodes import (
    IGNORE,
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
    StringLit,
    StructLit,
    StructType,
    Symbol,
    Tag,
    TypeDecls,
    TypeParam,
    TypeSpec,
    TypeTerm,
    Unary,
    UnionType,
    ValueSpec,
    VarDecls,
)
from codeweave.table import Row, row, write_table
from codeweave.writer import IndentWriter, write_string

# Operator pairs that Go lexes as one token
_MERGED_TOKENS = frozenset({"++", "--", "&&", "&^"})


class GoRenderer:
    """Render Go nodes as source text."""

    __slots__ = ()

    def render(self, node: GoNode | Imports, indent_unit: str | None = None) -> str:
        """Render a node to a string."""
        return write_string(lambda w: self.write(node, w), indent_unit)

    def write(self, node: GoNode | Imports, w: IndentWriter) -> None:
        """Write a node at the writer's current position."""
        match node:
            case (
                NamedType()
                | PointerType()
                | SliceType()
                | MapType()
                | StructType()
                | InterfaceType()
                | UnionType()
                | FuncType()
            ):
                self._write_type(node, w)
            case (
                Nil()
                | BoolLit()
                | RuneLit()
                | IntLit()
                | FloatLit()
                | StringLit()
                | StructLit()
                | MapLit()
                | SliceLit()
                | FuncLit()
                | Symbol()
                | Member()
                | Call()
                | Index()
                | SliceExpr()
                | Paren()
                | Unary()
                | Binary()
            ):
                self._write_expr(node, w)
            case (
                Assign()
                | Block()
                | Break()
                | Continue()
                | ExprStmt()
                | IncDec()
                | If()
                | For()
                | ForRange()
                | Return()
            ):
                self._write_stmt(node, w)
            case (
                Comment()
                | PackageClause()
                | TypeDecls()
                | VarDecls()
                | ConstDecls()
                | FuncDecl()
                | Imports()
            ):
                self._write_decl(node, w)
            case Param():
                self._write_param(node, w)
            case TypeParam():
                w.write(node.name)
                w.space()
                self.write(node.constraint, w)
            case TypeTerm():
                if node.approx:
                    w.write_char("~")
                self.write(node.type, w)
            case Field():
                w.write(" ".join(cell for cell in self._field_cells(node, w) if cell))
            case Tag():
                w.write(_tags((node,)))
            case Method():
                w.write(node.name)
                self._write_signature(node.params, node.results, w)
            case FieldValue():
                w.write(node.name)
                w.write(": ")
                self.write(node.value, w)
            case MapEntry():
                self.write(node.key, w)
                w.write(": ")
                self.write(node.value, w)
            case TypeSpec():
                self._write_type_spec(node, w)
            case ValueSpec():
                self._write_value_spec(node, w)
            case _:
                raise RenderError(f"cannot render {type(node).__name__}: not a Go node")

    # =========================================================================
    # Types
    # =========================================================================

    def _write_type(self, node: GoNode, w: IndentWriter) -> None:
        match node:
            case NamedType():
                self._write_qualified(node.package, node.name, node.args, w)
            case PointerType():
                w.write_char("*")
                self.write(node.target, w)
            case SliceType():
                w.write_char("[")
                if node.length is not None:
                    self.write(node.length, w)
                w.write_char("]")
                self.write(node.item, w)
            case MapType():
                w.write("map[")
                self.write(node.key, w)
                w.write_char("]")
                self.write(node.value, w)
            case StructType():
                self._write_struct(node, w)
            case InterfaceType():
                self._write_interface(node, w)
            case UnionType():
                for idx, term in enumerate(node.terms):
                    if idx > 0:
                        w.write(" | ")
                    self.write(term, w)
            case FuncType():
                w.write("func")
                self._write_signature(node.params, node.results, w)

    def _write_struct(self, node: StructType, w: IndentWriter) -> None:
        if not node.fields:
            w.write("struct{}")
            return

        if is_compact(node):
            w.write("struct{ ")
            self.write(node.fields[0], w)
            w.write(" }")
            return

        w.write("struct {")
        w.newline()
        with w.indent():
            rows = [
                Row(prefix=doc_prefix(field.doc), columns=tuple(self._field_cells(field, w)))
                for field in node.fields
            ]
            write_table(w, rows)
        w.write_char("}")

    def _field_cells(self, field: Field, w: IndentWriter) -> list[str]:
        typ = self._text(field.type, w)
        tags = _tags(field.tags)

        if field.name:
            cells = [field.name, typ]
            if tags:
                cells.append(tags)
        else:
            cells = [typ]
            if tags:
                cells.extend(("", tags))

        return cells

    def _write_interface(self, node: InterfaceType, w: IndentWriter) -> None:
        members: list[GoNode] = []
        if node.terms:
            members.append(UnionType(node.terms))
        members.extend(node.methods)

        if not members:
            w.write("interface{}")
            return

        if is_compact(node):
            w.write("interface{ ")
            self.write(members[0], w)
            w.write(" }")
            return

        w.write("interface {")
        w.newline()
        with w.indent():
            for member in members:
                self.write(member, w)
                w.newline()
        w.write_char("}")

    def _write_signature(
        self, params: Sequence[Param], results: Sequence[Param], w: IndentWriter
    ) -> None:
        self._write_params(params, w)

        if not results:
            return

        w.space()
        if len(results) == 1 and not results[0].name:
            self.write(results[0].type, w)
        else:
            self._write_params(results, w)

    def _write_params(self, params: Sequence[Param], w: IndentWriter) -> None:
        w.write_char("(")
        self._write_list(params, w)
        w.write_char(")")

    def _write_param(self, param: Param, w: IndentWriter) -> None:
        if param.name:
            w.write(param.name)
            w.space()
        if param.variadic:
            w.write("...")
        self.write(param.type, w)

    def _write_type_params(self, params: Sequence[TypeParam], w: IndentWriter) -> None:
        if not params:
            return
        w.write_char("[")
        self._write_list(params, w)
        w.write_char("]")

    def _write_qualified(
        self, package: str, name: str, args: Sequence[GoNode], w: IndentWriter
    ) -> None:
        if package:
            w.write(package)
            w.write_char(".")
        w.write(name)
        if args:
            w.write_char("[")
            self._write_list(args, w)
            w.write_char("]")

    # =========================================================================
    # Expressions
    # =========================================================================

    def _write_expr(self, node: GoNode, w: IndentWriter) -> None:
        match node:
            case Nil():
                w.write("nil")
            case BoolLit():
                w.write("true" if node.value else "false")
            case RuneLit():
                w.write(quote_rune(node.value))
            case IntLit():
                w.write(str(int(node.value)))
            case FloatLit():
                w.write(repr(float(node.value)))
            case StringLit():
                w.write(quote(node.value))
            case StructLit():
                self._write_keyed_lit(node.type, node.fields, w)
            case MapLit():
                self._write_keyed_lit(node.type, node.entries, w)
            case SliceLit():
                if node.type is not None:
                    self.write(node.type, w)
                self._write_elements(node.items, "{", "}", is_compact(node), w)
            case FuncLit():
                w.write("func")
                self._write_signature(node.params, node.results, w)
                w.space()
                self.write(node.body, w)
            case Symbol():
                self._write_qualified(node.package, node.name, node.args, w)
            case Member():
                self.write(node.expr, w)
                w.write_char(".")
                w.write(node.name)
            case Call():
                self.write(node.func, w)
                self._write_elements(node.args, "(", ")", all(map(is_compact, node.args)), w)
            case Index():
                self.write(node.expr, w)
                w.write_char("[")
                self.write(node.index, w)
                w.write_char("]")
            case SliceExpr():
                self.write(node.expr, w)
                w.write_char("[")
                if node.low is not None:
                    self.write(node.low, w)
                w.write_char(":")
                if node.high is not None:
                    self.write(node.high, w)
                w.write_char("]")
            case Paren():
                w.write_char("(")
                self.write(node.expr, w)
                w.write_char(")")
            case Unary():
                operand = node.expr
                if node.op + self._text(operand, w)[:1] in _MERGED_TOKENS:
                    operand = Paren(operand)
                w.write(node.op)
                self.write(operand, w)
            case Binary():
                self.write(node.lhs, w)
                w.write(f" {node.op} ")
                self.write(node.rhs, w)

    def _write_keyed_lit(
        self, typ: GoNode | None, elements: Sequence[GoNode], w: IndentWriter
    ) -> None:
        if typ is not None:
            self.write(typ, w)
        # Keyed literals keep one element per line unless empty
        self._write_elements(elements, "{", "}", not elements, w)

    def _write_elements(
        self, elements: Sequence[GoNode], open_: str, close: str, inline: bool, w: IndentWriter
    ) -> None:
        w.write(open_)
        if inline:
            self._write_list(elements, w)
        else:
            w.newline()
            with w.indent():
                for element in elements:
                    self.write(element, w)
                    w.write_char(",")
                    w.newline()
        w.write(close)

    def _write_list(self, nodes: Sequence[GoNode], w: IndentWriter) -> None:
        for idx, node in enumerate(nodes):
            if idx > 0:
                w.write(", ")
            self.write(node, w)

    # =========================================================================
    # Statements
    # =========================================================================

    def _write_stmt(self, node: GoNode, w: IndentWriter) -> None:
        match node:
            case Assign():
                self._write_list(node.targets, w)
                w.write(f" {node.op} ")
                self._write_list(node.values, w)
            case Block():
                self._write_block(node, w)
            case Break():
                w.write("break")
            case Continue():
                w.write("continue")
            case ExprStmt():
                self.write(node.expr, w)
            case IncDec():
                self.write(node.expr, w)
                w.write("++" if node.increment else "--")
            case If():
                w.write("if ")
                if node.init is not None:
                    self.write(node.init, w)
                    w.write("; ")
                self.write(node.cond, w)
                w.space()
                self.write(node.then, w)
                if node.else_ is not None:
                    w.write(" else ")
                    self.write(node.else_, w)
            case For():
                w.write("for ")
                if node.init is not None or node.post is not None:
                    if node.init is not None:
                        self.write(node.init, w)
                    w.write("; ")
                    if node.cond is not None:
                        self.write(node.cond, w)
                    w.write("; ")
                    if node.post is not None:
                        self.write(node.post, w)
                    w.space()
                elif node.cond is not None:
                    self.write(node.cond, w)
                    w.space()
                self.write(node.body, w)
            case ForRange():
                w.write("for ")
                if node.key is not None or node.value is not None:
                    self.write(node.key if node.key is not None else IGNORE, w)
                    if node.value is not None:
                        w.write(", ")
                        self.write(node.value, w)
                    w.write(" := " if node.define else " = ")
                w.write("range ")
                self.write(node.expr, w)
                w.space()
                self.write(node.body, w)
            case Return():
                w.write("return")
                if node.values:
                    w.space()
                    self._write_list(node.values, w)

    def _write_block(self, block: Block, w: IndentWriter) -> None:
        if not block.stmts:
            w.write("{}")
            return

        if is_compact(block):
            w.write("{ ")
            self.write(block.stmts[0], w)
            w.write(" }")
            return

        w.write_char("{")
        w.newline()
        with w.indent():
            blank_after = False
            for stmt in block.stmts:
                if blank_after:
                    w.newline()
                self.write(stmt, w)
                w.newline()
                blank_after = _blank_line_after(stmt)
        w.write_char("}")

    # =========================================================================
    # Declarations
    # =========================================================================

    def _write_decl(self, node: GoNode | Imports, w: IndentWriter) -> None:
        match node:
            case Comment():
                w.write(line_comment(node.text))
            case PackageClause():
                w.write(f"package {node.name}")
            case TypeDecls():
                self._write_group("type", node.specs, self._type_spec_row, w)
            case VarDecls():
                self._write_group("var", node.specs, self._value_spec_rows(node.specs, w), w)
            case ConstDecls():
                self._write_group("const", node.specs, self._value_spec_rows(node.specs, w), w)
            case FuncDecl():
                w.write(doc_prefix(node.doc))
                w.write("func ")
                if node.receiver is not None:
                    w.write_char("(")
                    self.write(node.receiver, w)
                    w.write(") ")
                w.write(node.name)
                self._write_type_params(node.type_params, w)
                self._write_signature(node.params, node.results, w)
                w.space()
                self.write(node.body, w)
            case Imports():
                self._write_imports(node, w)

    def _write_group(self, keyword: str, specs, make_row, w: IndentWriter) -> None:
        """Single form for one spec, parenthesized table for several."""
        match len(specs):
            case 0:
                return
            case 1:
                w.write(doc_prefix(specs[0].doc))
                w.write(keyword)
                w.space()
                self.write(specs[0], w)
            case _:
                w.write(keyword)
                w.write(" (")
                w.newline()
                with w.indent():
                    write_table(w, [make_row(spec, w) for spec in specs])
                w.write_char(")")

    def _write_type_spec(self, spec: TypeSpec, w: IndentWriter) -> None:
        w.write(spec.name)
        self._write_type_params(spec.params, w)
        w.write(" = " if spec.alias else " ")
        self.write(spec.type, w)

    def _type_spec_row(self, spec: TypeSpec, w: IndentWriter) -> Row:
        head = spec.name
        if spec.params:
            head += write_string(lambda sub: self._write_type_params(spec.params, sub), w.indent_unit)
        body = self._text(spec.type, w)
        if spec.alias:
            body = "= " + body
        return row(head, body, prefix=doc_prefix(spec.doc))

    def _write_value_spec(self, spec: ValueSpec, w: IndentWriter) -> None:
        w.write(spec.name)
        if spec.type is not None:
            w.space()
            self.write(spec.type, w)
        if spec.value is not None:
            w.write(" = ")
            self.write(spec.value, w)

    def _value_spec_rows(self, specs: Sequence[ValueSpec], w: IndentWriter):
        # A type column is reserved when any spec in the group is typed
        typed = any(spec.type is not None for spec in specs)

        def make_row(spec: ValueSpec, w: IndentWriter) -> Row:
            cells = [spec.name]
            if typed:
                cells.append(self._text(spec.type, w) if spec.type is not None else "")
            if spec.value is not None:
                cells.append("= " + self._text(spec.value, w))
            return row(*cells, prefix=doc_prefix(spec.doc))

        return make_row

    def _write_imports(self, imports: Imports, w: IndentWriter) -> None:
        entries = imports.entries()

        if not entries:
            return

        if is_compact(imports):
            w.write(doc_prefix(entries[0].comment))
            w.write("import ")
            w.write(entries[0].spec)
            return

        w.write("import (")
        w.newline()
        with w.indent():
            write_table(w, imports.rows())
        w.write_char(")")

    def _text(self, node: GoNode, w: IndentWriter) -> str:
        """Render a child to a string (for table cells) with the writer's indent unit."""
        return self.render(node, w.indent_unit)


def _tags(tags: Sequence[Tag]) -> str:
    if not tags:
        return ""
    return "`" + " ".join(f"{tag.name}:{quote(tag.value)}" for tag in tags) + "`"


def _blank_line_after(stmt: GoNode) -> bool:
    """Statements with a body get a blank line before the next statement."""
    match stmt:
        case If() | For() | ForRange():
            return True
        case Block():
            return bool(stmt.stmts)
        case TypeDecls() | VarDecls() | ConstDecls():
            return len(stmt.specs) > 1
    return False


_DEFAULT_RENDERER = GoRenderer()


def render(node: GoNode | Imports, indent_unit: str | None = None) -> str:
    """Render a Go node to source text with the shared renderer."""
    return _DEFAULT_RENDERER.render(node, indent_unit)


__all__ = ["GoRenderer", "render"]
