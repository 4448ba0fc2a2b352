"""Tests for predicates and WHERE clause rendering."""

import pytest

from format_sql_query.errors import UnsupportedIdentifierCharacterError
from format_sql_query.names import Column, QuotedData
from format_sql_query.predicates import PredicateStatement, Predicates


class TestPredicates:
    """Test cases for Predicates."""

    def test_as_where(self) -> None:
        predicates = (
            Predicates.from_one("foo = 'bar'")
            .and_("baz")
            .and_all(["hello", "world"])
            .and_all(Predicates.from_all(["abc", "123"]))
        )

        assert (
            str(predicates.as_where())
            == "WHERE foo = 'bar'\nAND baz\nAND hello\nAND world\nAND abc\nAND 123"
        )

    def test_in_place_mutation(self) -> None:
        predicates = Predicates()
        predicates.and_push("a = 1")
        predicates.and_extend(f"{c} = 2" for c in "bc")

        assert len(predicates) == 3
        assert list(predicates) == ["a = 1", "b = 2", "c = 2"]
        assert str(predicates.as_where()) == "WHERE a = 1\nAND b = 2\nAND c = 2"

    def test_fluent_api_returns_same_collection(self) -> None:
        predicates = Predicates()

        assert predicates.and_("a") is predicates
        assert predicates.and_all(["b"]) is predicates

    def test_single_predicate(self) -> None:
        assert str(Predicates.from_one("a = 1").as_where()) == "WHERE a = 1"

    def test_empty(self) -> None:
        predicates = Predicates()

        assert len(predicates) == 0
        assert str(predicates.as_where()) == "WHERE "

    def test_rendering_is_repeatable(self) -> None:
        predicates = Predicates.from_all(["a", "b"])
        where = predicates.as_where()

        assert str(where) == str(where) == str(predicates.as_where())
        assert len(predicates) == 2

    def test_duplicates_are_kept(self) -> None:
        predicates = Predicates.from_all(["a", "a"])

        assert str(predicates.as_where()) == "WHERE a\nAND a"

    def test_extend_with_itself(self) -> None:
        predicates = Predicates.from_all(["a", "b"])
        predicates.and_extend(predicates)

        assert list(predicates) == ["a", "b", "a", "b"]

    def test_mixed_fragment_types(self) -> None:
        column = Column("user id")
        name = QuotedData("o'neil")
        predicates = Predicates.from_one(f"{column} = {name}")
        predicates.and_push(Column("active"))

        assert (
            str(predicates.as_where())
            == "WHERE \"user id\" = 'o''neil'\nAND active"
        )

    def test_fragments_are_rendered_lazily(self) -> None:
        """Invalid fragments fail when the clause is rendered."""
        predicates = Predicates.from_one(Column("it's"))
        where = predicates.as_where()

        with pytest.raises(UnsupportedIdentifierCharacterError):
            _ = str(where)

    def test_nested_clause(self) -> None:
        inner = Predicates.from_all(["a = 1", "b = 2"]).as_where()
        predicates = Predicates.from_one(f"EXISTS (SELECT 1 FROM t {inner})")

        assert (
            str(predicates.as_where())
            == "WHERE EXISTS (SELECT 1 FROM t WHERE a = 1\nAND b = 2)"
        )

    def test_statement_snapshot(self) -> None:
        """The statement does not see predicates appended later."""
        predicates = Predicates.from_one("a")
        where = predicates.as_where()
        predicates.and_push("b")

        assert where == PredicateStatement("WHERE", ("a",))
        assert str(where) == "WHERE a"

    def test_str_is_a_single_predicate(self) -> None:
        """A string passed as predicates is one predicate, not its characters."""
        assert str(Predicates.from_all("x = 1").as_where()) == "WHERE x = 1"
        assert str(Predicates("x = 1").as_where()) == "WHERE x = 1"

        predicates = Predicates.from_one("a = 1")
        predicates.and_extend("b = 2")
        predicates.and_all("c = 3")

        assert list(predicates) == ["a = 1", "b = 2", "c = 3"]
