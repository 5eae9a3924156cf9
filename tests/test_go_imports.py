"""Tests for the import/alias table."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from codeweave import AliasCollisionError, InvalidIdentifierError, UnsupportedConstructError
from codeweave.golang import BLANK_ALIAS, Imports, render


class TestAliases:
    """Derived aliases come from the last path segment, with pkgN as fallback."""

    def test_last_segment(self) -> None:
        imports = Imports()
        assert imports.alias_for("net/http") == "http"
        assert imports.alias_for("fmt") == "fmt"

    def test_unusable_segment_falls_back(self) -> None:
        imports = Imports()
        imports.alias_for("net/http")
        assert imports.alias_for("gopkg.in/yaml.v3") == "pkg2"

    def test_keyword_segment_falls_back(self) -> None:
        imports = Imports()
        entry = imports.ensure("example.com/type")
        assert entry.alias == "pkg1"
        assert entry.explicit

    def test_segment_collision_falls_back(self) -> None:
        imports = Imports()
        assert imports.alias_for("log") == "log"
        assert imports.alias_for("example.com/log") == "pkg2"

    def test_fallback_skips_bound_names(self) -> None:
        imports = Imports()
        assert imports.alias_for("example.com/pkg2") == "pkg2"
        assert imports.alias_for("gopkg.in/yaml.v3") == "pkg3"

    def test_same_path_is_deduplicated(self) -> None:
        imports = Imports()
        first = imports.alias_for("net/http")
        assert imports.alias_for("net/http") == first
        assert len(imports) == 1

    def test_local_package(self) -> None:
        imports = Imports()
        assert imports.alias_for("") == ""
        assert len(imports) == 0

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            Imports().ensure("")


class TestExplicitAliases:
    def test_explicit_alias(self) -> None:
        imports = Imports()
        entry = imports.ensure("github.com/jackc/pgx/v5", "pgx")
        assert entry.alias == "pgx"
        assert entry.explicit

    def test_alias_bound_to_other_path(self) -> None:
        imports = Imports()
        imports.ensure("example.com/a", "foo")
        with pytest.raises(AliasCollisionError):
            imports.ensure("example.com/b", "foo")

    def test_alias_taken_by_derived_name(self) -> None:
        imports = Imports()
        imports.ensure("log")
        with pytest.raises(AliasCollisionError):
            imports.ensure("example.com/logger", "log")

    def test_path_reimported_under_other_alias(self) -> None:
        imports = Imports()
        imports.ensure("net/http")
        with pytest.raises(AliasCollisionError):
            imports.ensure("net/http", "web")

    def test_same_alias_again_is_fine(self) -> None:
        imports = Imports()
        imports.ensure("net/http", "web")
        assert imports.ensure("net/http", "web").alias == "web"

    @pytest.mark.parametrize("alias", ["Http", "type", "a-b", "1x"])
    def test_invalid_alias(self, alias: str) -> None:
        with pytest.raises(InvalidIdentifierError):
            Imports().ensure("net/http", alias)

    def test_blank_alias_may_repeat(self) -> None:
        imports = Imports()
        imports.ensure("github.com/lib/pq", BLANK_ALIAS)
        imports.ensure("embed", BLANK_ALIAS)
        assert [entry.alias for entry in imports] == ["_", "_"]


class TestOrderingAndRendering:
    def test_system_group_first(self) -> None:
        imports = Imports()
        for path in ("github.com/x/y", "os", "example.com/a", "fmt"):
            imports.ensure(path)
        assert [entry.path for entry in imports] == ["fmt", "os", "example.com/a", "github.com/x/y"]

    def test_empty_renders_nothing(self) -> None:
        assert render(Imports()) == ""

    def test_single_import(self) -> None:
        imports = Imports()
        imports.ensure("fmt")
        assert render(imports) == 'import "fmt"'

    def test_single_import_with_alias_and_comment(self) -> None:
        imports = Imports()
        imports.ensure("example.com/type", comment="generated models")
        assert render(imports) == '// generated models\nimport pkg1 "example.com/type"'

    def test_groups_separated_by_blank_line(self) -> None:
        imports = Imports()
        for path in ("net/http", "github.com/x/y", "fmt"):
            imports.ensure(path)
        assert render(imports) == 'import (\n\t"fmt"\n\t"net/http"\n\n\t"github.com/x/y"\n)'

    def test_alias_column(self) -> None:
        imports = Imports()
        imports.ensure("fmt")
        imports.ensure("gopkg.in/yaml.v3")
        assert render(imports) == 'import (\n\t     "fmt"\n\n\tpkg2 "gopkg.in/yaml.v3"\n)'

    def test_contains(self) -> None:
        imports = Imports()
        imports.ensure("fmt")
        assert "fmt" in imports
        assert "os" not in imports


_PATHS = st.sampled_from(
    [
        "fmt",
        "log",
        "net/http",
        "example.com/log",
        "example.com/http",
        "example.com/type",
        "gopkg.in/yaml.v3",
        "example.com/pkg2",
        "example.com/pkg3",
    ]
)


class TestImportProperties:
    @given(paths=st.lists(_PATHS, max_size=20))
    def test_aliases_unique_and_stable(self, paths: list[str]) -> None:
        imports = Imports()
        first = {}
        for path in paths:
            alias = imports.alias_for(path)
            assert first.setdefault(path, alias) == alias

        aliases = [entry.alias for entry in imports]
        assert len(imports) == len(set(paths))
        assert len(aliases) == len(set(aliases))
