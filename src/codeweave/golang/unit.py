"""One generated Go source file.

A Unit owns the package clause, the import table and the top-level
declarations of a file. Declarations and imports accumulate while a
generator runs; nothing is written until render(), write() or
write_file() is called.

Example:
    >>> from codeweave.golang import nodes as go
    >>> unit = Unit("models")
    >>> unit.add(go.TypeDecls((go.TypeSpec("Stamp", unit.named_type("Time", "time")),)))
    >>> print(unit.render())
    // THIS FILE WAS AUTOMATICALLY GENERATED; DO NOT EDIT
    <BLANKLINE>
    package models
    <BLANKLINE>
    import "time"
    <BLANKLINE>
    type Stamp time.Time
    <BLANKLINE>

"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from codeweave.config import get_render_config
from codeweave.golang.imports import Imports
from codeweave.golang.nodes import (
    Comment,
    ConstDecls,
    Decl,
    NamedType,
    PackageClause,
    StructType,
    Symbol,
    Type,
    TypeDecls,
    VarDecls,
)
from codeweave.golang.reflect import go_struct, go_type
from codeweave.golang.renderer import GoRenderer
from codeweave.utils.logger import get_logger
from codeweave.writer import IndentWriter, write_file, write_string

logger = get_logger(__name__)


class Unit:
    """Go source file under construction.

    Attributes:
        package: Package clause
        doc: Optional package doc comment
        imports: Import table; filled as references are created
        decls: Top-level declarations in output order

    Not thread-safe: generators build one unit from one thread.
    """

    __slots__ = ("package", "doc", "imports", "decls", "_renderer")

    def __init__(self, package: str, doc: str = "") -> None:
        self.package = PackageClause(package)
        self.doc = doc
        self.imports = Imports()
        self.decls: list[Decl] = []
        self._renderer = GoRenderer()

    def add(self, *decls: Decl | None) -> None:
        """Append declarations; None entries are ignored."""
        self.decls.extend(decl for decl in decls if decl is not None)

    def ensure_import(self, path: str, alias: str = "", comment: str = "") -> str:
        """Register ``path`` and return its alias."""
        return self.imports.ensure(path, alias, comment).alias

    def named_type(self, name: str, path: str = "", *args: Type) -> NamedType:
        """Reference to a type, importing ``path`` when given."""
        return NamedType(name, self.imports.alias_for(path), args)

    def symbol(self, name: str, path: str = "", *args: Type) -> Symbol:
        """Reference to a value, importing ``path`` when given."""
        return Symbol(name, self.imports.alias_for(path), args)

    def type_of(self, annotation: object) -> Type:
        """Go type for a Python annotation; see codeweave.golang.reflect."""
        return go_type(annotation, self.named_type)

    def struct_of(self, cls: type) -> StructType:
        """Struct type for a dataclass; see codeweave.golang.reflect."""
        return go_struct(cls, self.named_type)

    def write(self, w: IndentWriter) -> None:
        """Write the file, one blank line between the items."""
        for idx, item in enumerate(self._items()):
            if idx > 0:
                w.newline()
            self._renderer.write(item, w)
            w.newline()

    def render(self, indent_unit: str | None = None) -> str:
        return write_string(self.write, indent_unit)

    def write_file(self, path: str | Path, indent_unit: str | None = None) -> Path:
        """Render the unit into ``path``, creating parent directories."""
        target = write_file(path, self.write, indent_unit)
        logger.debug(
            "Rendered package %s (%d imports, %d decls) to %s",
            self.package.name,
            len(self.imports),
            len(self.decls),
            target,
        )
        return target

    def _items(self) -> Iterator[Decl | Imports]:
        """Marker comment, doc, package clause, imports, then the declarations."""
        marker = get_render_config().generated_marker
        if marker:
            yield Comment(marker)
        if self.doc:
            yield Comment(self.doc)
        yield self.package
        if self.imports:
            yield self.imports
        for decl in self.decls:
            if isinstance(decl, (TypeDecls, VarDecls, ConstDecls)) and not decl.specs:
                continue
            yield decl

    def __repr__(self) -> str:
        return (
            f"Unit(package={self.package.name!r}, "
            f"imports={len(self.imports)}, decls={len(self.decls)})"
        )


__all__ = ["Unit"]
