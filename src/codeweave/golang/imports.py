"""Import/alias table for one Go unit.

Entries accumulate while the unit is assembled: every time a node refers
to an external package path, the table hands out the alias to qualify it
with. Ordering happens only at render time: system packages (paths without
a dot) first, then the rest, each group sorted by path.

Example:
    >>> imports = Imports()
    >>> imports.alias_for("net/http")
    'http'
    >>> imports.alias_for("gopkg.in/yaml.v3")
    'pkg2'
    >>> imports.alias_for("net/http")
    'http'
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from codeweave.errors import AliasCollisionError, InvalidIdentifierError, UnsupportedConstructError
from codeweave.golang.lexical import doc_prefix, is_package_alias, quote
from codeweave.table import SEPARATOR, Row, row
from codeweave.utils.logger import get_logger

logger = get_logger(__name__)

BLANK_ALIAS = "_"


@dataclass(frozen=True, slots=True)
class Import:
    """One imported package.

    Attributes:
        path: Import path
        alias: Name used to qualify references into the package
        explicit: Whether the alias must be spelled out in the import
            (requested by the caller, or generated because the last path
            segment was unusable)
        comment: Optional comment written above the entry

    """

    path: str
    alias: str
    explicit: bool = False
    comment: str = ""

    @property
    def system(self) -> bool:
        """Standard library packages have no dot in their path."""
        return "." not in self.path

    @property
    def spec(self) -> str:
        """Import spec as written in a single import: alias "path"."""
        if self.explicit:
            return f"{self.alias} {quote(self.path)}"
        return quote(self.path)


class Imports:
    """Append-only import table with unique aliases.

    Not thread-safe: the table is mutated in place during tree construction.
    """

    __slots__ = ("_by_path", "_by_alias")

    def __init__(self) -> None:
        self._by_path: dict[str, Import] = {}
        self._by_alias: dict[str, Import] = {}

    def ensure(self, path: str, alias: str = "", comment: str = "") -> Import:
        """Return the entry for ``path``, registering it on first use.

        Args:
            path: Import path
            alias: Explicit alias; derived from the path when empty
            comment: Comment written above the entry

        Raises:
            AliasCollisionError: ``alias`` is bound to another path, or
                ``path`` is already imported under a different alias
            InvalidIdentifierError: ``alias`` is not a usable package alias
        """
        if not path:
            raise UnsupportedConstructError(path, "is not an import path")

        existing = self._by_path.get(path)
        if existing is not None:
            if alias and alias != existing.alias:
                raise AliasCollisionError(alias, path, f"already imported as {existing.alias!r}")
            return existing

        if alias:
            if not is_package_alias(alias):
                raise InvalidIdentifierError(alias, "import alias")
            bound = self._by_alias.get(alias)
            if bound is not None and alias != BLANK_ALIAS:
                raise AliasCollisionError(alias, path, f"alias is bound to {bound.path!r}")
            entry = Import(path=path, alias=alias, explicit=True, comment=comment)
        else:
            derived, explicit = self._derive_alias(path)
            entry = Import(path=path, alias=derived, explicit=explicit, comment=comment)

        self._by_path[path] = entry
        self._by_alias.setdefault(entry.alias, entry)
        return entry

    def alias_for(self, path: str) -> str:
        """Alias to qualify references into ``path`` with ("" for the local package)."""
        if not path:
            return ""
        return self.ensure(path).alias

    def entries(self) -> list[Import]:
        """Entries in render order: system group first, each group sorted by path."""
        return sorted(self._by_path.values(), key=lambda entry: (not entry.system, entry.path))

    def rows(self) -> list[Row]:
        """Table rows for the block form, with a separator row between the groups."""
        entries = self.entries()
        has_alias = any(entry.explicit for entry in entries)
        rows: list[Row] = []

        for idx, entry in enumerate(entries):
            if idx > 0 and entries[idx - 1].system and not entry.system:
                rows.append(SEPARATOR)

            prefix = doc_prefix(entry.comment)
            if has_alias:
                alias = entry.alias if entry.explicit else ""
                rows.append(row(alias, quote(entry.path), prefix=prefix))
            else:
                rows.append(row(quote(entry.path), prefix=prefix))

        return rows

    def _derive_alias(self, path: str) -> tuple[str, bool]:
        name = path.rstrip("/").rsplit("/", 1)[-1]
        if is_package_alias(name) and name not in self._by_alias:
            return name, False

        counter = len(self._by_path) + 1
        while f"pkg{counter}" in self._by_alias:
            counter += 1
        alias = f"pkg{counter}"
        logger.debug("Import %r gets generated alias %r", path, alias)
        return alias, True

    def __len__(self) -> int:
        return len(self._by_path)

    def __iter__(self) -> Iterator[Import]:
        return iter(self.entries())

    def __contains__(self, path: object) -> bool:
        return path in self._by_path


__all__ = ["BLANK_ALIAS", "Import", "Imports"]
