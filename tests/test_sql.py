"""Tests for SQL nodes and the SQL renderer."""

import pytest

from codeweave import InvalidIdentifierError, RenderError, UnsupportedConstructError
from codeweave.sql import (
    CTE,
    NULL,
    STAR,
    And,
    Column,
    FromClause,
    Func,
    Join,
    JoinKind,
    Literal,
    Name,
    ObjectName,
    OrderItem,
    Param,
    QuerySet,
    QueryStmt,
    Select,
    SelectColumn,
    SetOp,
    Star,
    and_,
    compare,
    eq,
    is_not_null,
    is_null,
    not_,
    or_,
    render,
    select,
)


def _from(name: str, alias: str = "") -> FromClause:
    return FromClause(ObjectName(name), alias)


A = eq(Column("a"), Literal(1))
B = eq(Column("b"), Literal(2))
C = eq(Column("c"), Literal(3))


class TestExpressions:
    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            (Name("user"), '"user"'),
            (Name('a"b'), '"a""b"'),
            (ObjectName("users", "app"), '"app"."users"'),
            (Column("id", "u"), '"u"."id"'),
            (STAR, "*"),
            (Star("u"), '"u".*'),
            (NULL, "NULL"),
            (Literal(True), "TRUE"),
            (Literal(42), "42"),
            (Literal(1.5), "1.5"),
            (Literal("O'Brien"), "'O''Brien'"),
            (Param(3), "?"),
            (Func("count", (STAR,)), "COUNT(*)"),
            (Func("coalesce", (Column("a"), Literal(0))), 'COALESCE("a", 0)'),
            (Func("now"), "NOW()"),
        ],
    )
    def test_render(self, node, expected: str) -> None:
        assert render(node, "ansi") == expected

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            Column("")

    def test_function_name_must_be_identifier(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            Func("count(*)")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), b"x", object()])
    def test_literal_rejects_unusable_values(self, value: object) -> None:
        with pytest.raises(UnsupportedConstructError):
            Literal(value)  # type: ignore[arg-type]

    def test_param_numbered_from_one(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            Param(0)

    def test_not_a_node(self) -> None:
        with pytest.raises(RenderError):
            render("SELECT 1", "ansi")  # type: ignore[arg-type]


class TestConditions:
    """Operands are parenthesized only when they bind weaker than their parent."""

    def test_and_of_or(self) -> None:
        assert render(and_(or_(A, B), C), "ansi") == '("a" = 1 OR "b" = 2) AND "c" = 3'

    def test_or_of_and_needs_no_parens(self) -> None:
        assert render(or_(and_(A, B), C), "ansi") == '"a" = 1 AND "b" = 2 OR "c" = 3'

    def test_not(self) -> None:
        assert render(not_(and_(A, B)), "ansi") == 'NOT ("a" = 1 AND "b" = 2)'
        assert render(not_(A), "ansi") == 'NOT "a" = 1'

    def test_null_checks(self) -> None:
        assert render(is_null(Column("x")), "ansi") == '"x" IS NULL'
        assert render(is_not_null(Column("x")), "ansi") == '"x" IS NOT NULL'

    def test_like(self) -> None:
        cond = compare("LIKE", Column("name"), Literal("a%"))
        assert render(cond, "ansi") == "\"name\" LIKE 'a%'"

    def test_unknown_operator(self) -> None:
        with pytest.raises(ValueError):
            compare("~", Column("a"), Literal(1))

    def test_combinators_flatten(self) -> None:
        combined = and_(and_(A, B), None, C)
        assert isinstance(combined, And)
        assert combined.operands == (A, B, C)

    def test_combinators_collapse(self) -> None:
        assert and_() is None
        assert or_(None, A) is A


class TestSelect:
    def test_columns_align_under_keyword(self) -> None:
        query = select(Column("id"), Column("name"), from_=_from_schema())
        assert render(query, "ansi") == (
            'SELECT "id",\n       "name"\nFROM   "app"."users" AS "u"\n'
        )

    def test_where_splits_conjunction(self) -> None:
        query = select(
            STAR,
            from_=_from("users"),
            where=and_(eq(Column("active"), Literal(True)), compare(">=", Column("age"), Param(1))),
            order_by=(OrderItem(Column("name")),),
        )
        assert render(query, "ansi") == (
            "SELECT   *\n"
            'FROM     "users"\n'
            'WHERE    "active" = TRUE\n'
            'AND      "age" >= ?\n'
            'ORDER BY "name"\n'
        )

    def test_where_parenthesizes_disjunction_rows(self) -> None:
        query = select(STAR, from_=_from("t"), where=and_(or_(A, B), C))
        assert render(query, "ansi") == (
            'SELECT *\nFROM   "t"\nWHERE  ("a" = 1 OR "b" = 2)\nAND    "c" = 3\n'
        )

    def test_single_condition_where(self) -> None:
        query = select(STAR, from_=_from("t"), where=or_(A, B))
        assert render(query, "ansi") == 'SELECT *\nFROM   "t"\nWHERE  "a" = 1 OR "b" = 2\n'

    def test_group_by_and_having(self) -> None:
        count = Func("count", (STAR,))
        query = select(
            Column("dept"),
            SelectColumn(count, "n"),
            from_=_from("emp"),
            group_by=(Column("dept"),),
            having=compare(">", count, Literal(5)),
        )
        assert render(query, "ansi") == (
            'SELECT   "dept",\n'
            '         COUNT(*) AS "n"\n'
            'FROM     "emp"\n'
            'GROUP BY "dept"\n'
            "HAVING   COUNT(*) > 5\n"
        )

    def test_distinct(self) -> None:
        assert render(select(Column("a"), distinct=True), "ansi") == 'SELECT DISTINCT "a"\n'

    def test_limit_and_offset(self) -> None:
        query = select(
            STAR,
            from_=_from("t"),
            order_by=(OrderItem(Column("id"), desc=True),),
            limit=10,
            offset=20,
        )
        assert render(query, "ansi") == (
            'SELECT   *\nFROM     "t"\nORDER BY "id" DESC\nLIMIT    10\nOFFSET   20\n'
        )

    def test_indent_unit_does_not_change_flat_select(self) -> None:
        query = select(STAR, from_=_from("t"))
        assert render(query, "ansi", "    ") == render(query, "ansi")

    def test_validation(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            Select(())
        with pytest.raises(UnsupportedConstructError):
            select(STAR, joins=(Join(JoinKind.CROSS, ObjectName("b")),))
        with pytest.raises(UnsupportedConstructError):
            select(STAR, limit=-1)


def _from_schema() -> FromClause:
    return FromClause(ObjectName("users", "app"), "u")


class TestJoins:
    def test_left_join(self) -> None:
        on = eq(Column("user_id", "o"), Column("id", "u"))
        query = select(
            Column("id", "u"),
            Column("total", "o"),
            from_=_from("users", "u"),
            joins=(Join(JoinKind.LEFT, ObjectName("orders"), "o", on),),
        )
        width = len("LEFT OUTER JOIN")
        assert render(query, "ansi") == (
            f'{"SELECT".ljust(width)} "u"."id",\n'
            f'{"".ljust(width)} "o"."total"\n'
            f'{"FROM".ljust(width)} "users" AS "u"\n'
            'LEFT OUTER JOIN "orders" AS "o" ON "o"."user_id" = "u"."id"\n'
        )

    @pytest.mark.parametrize(
        ("kind", "keyword"),
        [
            (JoinKind.INNER, "INNER JOIN"),
            (JoinKind.RIGHT, "RIGHT OUTER JOIN"),
            (JoinKind.FULL, "FULL OUTER JOIN"),
        ],
    )
    def test_join_keywords(self, kind: JoinKind, keyword: str) -> None:
        join = Join(kind, ObjectName("b"), on=eq(Column("id", "a"), Column("id", "b")))
        query = select(STAR, from_=_from("a"), joins=(join,))
        assert f'{keyword} "b" ON "a"."id" = "b"."id"\n' in render(query, "ansi")

    def test_cross_join(self) -> None:
        query = select(STAR, from_=_from("a"), joins=(Join(JoinKind.CROSS, ObjectName("b")),))
        assert render(query, "ansi") == 'SELECT     *\nFROM       "a"\nCROSS JOIN "b"\n'

    def test_cross_join_takes_no_condition(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            Join(JoinKind.CROSS, ObjectName("b"), on=A)

    def test_other_joins_need_condition(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            Join(JoinKind.INNER, ObjectName("b"))


class TestSubqueries:
    def test_from_subquery(self) -> None:
        inner = select(Column("id"), from_=_from("t"))
        query = select(STAR, from_=FromClause(inner, "s"))
        assert render(query, "ansi") == (
            'SELECT *\nFROM   (\n\tSELECT "id"\n\tFROM   "t"\n) AS "s"\n'
        )

    def test_subquery_uses_indent_unit(self) -> None:
        inner = select(Column("id"))
        query = select(STAR, from_=FromClause(inner, "s"))
        assert render(query, "ansi", "  ") == 'SELECT *\nFROM   (\n  SELECT "id"\n) AS "s"\n'

    def test_join_subquery(self) -> None:
        inner = select(Column("id"))
        join = Join(JoinKind.INNER, inner, "s", eq(Column("id", "s"), Column("id", "t")))
        query = select(STAR, from_=_from("t"), joins=(join,))
        assert render(query, "ansi") == (
            "SELECT     *\n"
            'FROM       "t"\n'
            'INNER JOIN (\n\tSELECT "id"\n) AS "s" ON "s"."id" = "t"."id"\n'
        )


class TestQuerySets:
    def test_union_all(self) -> None:
        query = QuerySet(
            SetOp.UNION,
            select(Column("a"), from_=_from("t")),
            select(Column("a"), from_=_from("u")),
            all=True,
        )
        assert render(query, "ansi") == (
            'SELECT "a"\nFROM   "t"\nUNION ALL\nSELECT "a"\nFROM   "u"\n'
        )

    def test_left_nested_set_needs_no_parens(self) -> None:
        inner = QuerySet(SetOp.UNION, select(Column("a")), select(Column("b")))
        query = QuerySet(SetOp.EXCEPT, inner, select(Column("c")))
        assert render(query, "ansi") == (
            'SELECT "a"\nUNION\nSELECT "b"\nEXCEPT\nSELECT "c"\n'
        )

    def test_right_nested_set_is_grouped(self) -> None:
        inner = QuerySet(SetOp.EXCEPT, select(Column("b")), select(Column("c")))
        query = QuerySet(SetOp.UNION, select(Column("a")), inner)
        assert render(query, "ansi") == (
            'SELECT "a"\nUNION\n(\n\tSELECT "b"\n\tEXCEPT\n\tSELECT "c"\n)\n'
        )


class TestCommonTableExpressions:
    def test_single_cte(self) -> None:
        cte = CTE("recent", select(Column("id"), from_=_from("events")), columns=("id",))
        stmt = QueryStmt(select(STAR, from_=_from("recent")), with_=(cte,))
        assert render(stmt, "ansi") == (
            'WITH "recent" ("id") AS (\n'
            '\tSELECT "id"\n'
            '\tFROM   "events"\n'
            ")\n"
            "SELECT *\n"
            'FROM   "recent"\n'
        )

    def test_several_ctes(self) -> None:
        stmt = QueryStmt(
            select(STAR, from_=_from("a")),
            with_=(CTE("a", select(Literal(1))), CTE("b", select(Literal(2)))),
        )
        assert render(stmt, "ansi") == (
            'WITH "a" AS (\n\tSELECT 1\n),\n"b" AS (\n\tSELECT 2\n)\nSELECT *\nFROM   "a"\n'
        )

    def test_recursive(self) -> None:
        stmt = QueryStmt(select(STAR), with_=(CTE("r", select(Literal(1)), recursive=True),))
        assert render(stmt, "ansi").startswith('WITH RECURSIVE "r" AS (\n')

    def test_without_ctes(self) -> None:
        assert render(QueryStmt(select(STAR)), "ansi") == "SELECT *\n"

    def test_cte_column_names_checked(self) -> None:
        with pytest.raises(UnsupportedConstructError):
            CTE("r", select(STAR), columns=("",))
