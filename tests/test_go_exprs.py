"""Tests for Go expression nodes and builders."""

from enum import IntEnum

import pytest

from codeweave import UnsupportedConstructError
from codeweave.golang import (
    INT,
    NIL,
    STRING,
    FieldValue,
    FloatLit,
    FuncLit,
    MapEntry,
    MapLit,
    MapType,
    NamedType,
    Param,
    RuneLit,
    SliceExpr,
    SliceLit,
    SliceType,
    StringLit,
    StructLit,
    Tag,
    addr_of,
    binary,
    block,
    call,
    compl,
    deref,
    identity,
    index,
    lit,
    member,
    negate,
    not_,
    param,
    paren,
    ret,
    sym,
    render,
)


class TestLiterals:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "nil"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (-7, "-7"),
            (1.5, "1.5"),
            ("plain", '"plain"'),
            ('say "hi"\n', '"say \\"hi\\"\\n"'),
            ("tab\there", '"tab\\there"'),
            ("café", '"café"'),
            ("\x00", '"\\x00"'),
            ("\u200b", '"\\u200b"'),
        ],
    )
    def test_lit(self, value: object, expected: str) -> None:
        assert render(lit(value)) == expected

    def test_lit_rejects_unknown_types(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            lit(object())

    def test_float_must_be_finite(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            FloatLit(float("inf"))

    @pytest.mark.parametrize(
        ("ch", "expected"),
        [("a", "'a'"), ("'", "'\\''"), ('"', "'\"'"), ("\n", "'\\n'")],
    )
    def test_rune(self, ch: str, expected: str) -> None:
        assert render(RuneLit(ch)) == expected

    def test_rune_needs_one_character(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            RuneLit("ab")

    @pytest.mark.parametrize("value", ["\ud800", "a\udfffb"])
    def test_string_rejects_surrogates(self, value: str) -> None:
        with pytest.raises(UnsupportedConstructError):
            StringLit(value)
        with pytest.raises(UnsupportedConstructError):
            lit(value)

    def test_rune_rejects_surrogate(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            RuneLit("\udfff")

    def test_tag_rejects_surrogate(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            Tag("json", "\ud83d")

    def test_astral_characters_still_quoted(self) -> None:
        assert render(lit("\U0001f600")) == '"\U0001f600"'
        assert render(RuneLit("\U0010ffff")) == "'\\U0010ffff'"

    def test_int_enum_renders_as_number(self) -> None:
        class Status(IntEnum):
            OK = 200

        assert render(lit(Status.OK)) == "200"


class TestOperators:
    def test_member_chain(self) -> None:
        assert render(member(sym("r"), "URL", "Path")) == "r.URL.Path"

    def test_qualified_generic_symbol(self) -> None:
        assert render(sym("Map", "maps", (STRING,))) == "maps.Map[string]"

    def test_index_and_slice(self) -> None:
        assert render(index(sym("xs"), lit(0))) == "xs[0]"
        assert render(SliceExpr(sym("s"), low=lit(1))) == "s[1:]"
        assert render(SliceExpr(sym("s"), high=lit(2))) == "s[:2]"

    def test_unary(self) -> None:
        assert render(not_(sym("ok"))) == "!ok"
        assert render(negate(lit(1))) == "-1"
        assert render(deref(sym("p"))) == "*p"
        assert render(identity(sym("x"))) == "+x"
        assert render(compl(sym("m"))) == "^m"
        assert render(addr_of(StructLit(NamedType("T")))) == "&T{}"

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            (negate(lit(-5)), "-(-5)"),
            (negate(negate(sym("x"))), "-(-x)"),
            (identity(identity(sym("x"))), "+(+x)"),
            (addr_of(addr_of(sym("x"))), "&(&x)"),
            (addr_of(compl(sym("m"))), "&(^m)"),
        ],
    )
    def test_unary_operand_kept_apart(self, node, expected: str) -> None:
        assert render(node) == expected

    def test_unary_operand_not_wrapped_needlessly(self) -> None:
        assert render(negate(lit(5))) == "-5"
        assert render(deref(deref(sym("pp")))) == "**pp"
        assert render(not_(not_(sym("ok")))) == "!!ok"
        assert render(negate(identity(sym("x")))) == "-+x"

    def test_binary(self) -> None:
        expr = binary("&&", binary("<", sym("a"), lit(1)), not_(sym("b")))
        assert render(expr) == "a < 1 && !b"

    def test_paren(self) -> None:
        expr = binary("*", paren(binary("+", sym("a"), sym("b"))), sym("c"))
        assert render(expr) == "(a + b) * c"

    def test_unknown_binary_operator(self) -> None:
        with pytest.raises(ValueError):
            binary("<>", sym("a"), sym("b"))


class TestCalls:
    def test_compact_arguments_inline(self) -> None:
        assert render(call(sym("f"), sym("a"), lit(1))) == "f(a, 1)"

    def test_no_arguments(self) -> None:
        assert render(call(member(sym("fmt"), "Println"))) == "fmt.Println()"

    def test_non_compact_argument_breaks_lines(self) -> None:
        arg = StructLit(NamedType("T"), (FieldValue("A", lit(1)),))
        assert render(call(sym("f"), arg, NIL)) == "f(\n\tT{\n\t\tA: 1,\n\t},\n\tnil,\n)"


class TestCompositeLiterals:
    def test_empty_struct_literal_is_inline(self) -> None:
        assert render(StructLit(NamedType("User"))) == "User{}"

    def test_struct_literal_one_field_per_line(self) -> None:
        node = StructLit(NamedType("User"), (FieldValue("ID", lit(1)), FieldValue("Name", lit("x"))))
        assert render(node) == 'User{\n\tID: 1,\n\tName: "x",\n}'

    def test_map_literal(self) -> None:
        node = MapLit(MapType(STRING, INT), (MapEntry(lit("a"), lit(1)),))
        assert render(node) == 'map[string]int{\n\t"a": 1,\n}'

    def test_slice_literal_inline(self) -> None:
        assert render(SliceLit(SliceType(INT), (lit(1), lit(2)))) == "[]int{1, 2}"

    def test_slice_literal_with_block_element(self) -> None:
        item = StructLit(fields=(FieldValue("A", lit(1)),))
        node = SliceLit(SliceType(NamedType("T")), (item,))
        assert render(node) == "[]T{\n\t{\n\t\tA: 1,\n\t},\n}"

    def test_func_literal(self) -> None:
        node = FuncLit((param("x", INT),), (Param(INT),), block(ret(sym("x"))))
        assert render(node) == "func(x int) int { return x }"
