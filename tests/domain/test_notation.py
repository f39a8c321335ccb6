"""Tests for parsing interval notation."""

import pytest

from dyndomain.domain.algebra import Domain, Empty, Interval, Union, union
from dyndomain.domain.bounds import Excluded, Included, Unbounded
from dyndomain.domain.notation import NotationError, parse_notation


class TestParseInterval:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("[5;10)", Interval(Included(5), Excluded(10))),
            ("(5;10]", Interval(Excluded(5), Included(10))),
            ("(-∞;∞)", Interval(Unbounded(), Unbounded())),
            ("(-∞;-3]", Interval(Unbounded(), Included(-3))),
            ("[-7;∞)", Interval(Included(-7), Unbounded())),
            ("(-inf;inf)", Interval(Unbounded(), Unbounded())),
            ("  [ 1 ; 2 ]  ", Interval(Included(1), Included(2))),
        ],
    )
    def test_single_pieces(self, text: str, expected: Interval) -> None:
        assert parse_notation(text) == expected

    def test_empty_set(self) -> None:
        assert parse_notation("∅") == Empty()

    def test_custom_separator(self) -> None:
        assert parse_notation("[1,2)", separator=",") == Interval(Included(1), Excluded(2))

    def test_regex_metacharacter_separator(self) -> None:
        assert parse_notation("[1|2)", separator="|") == Interval(Included(1), Excluded(2))


class TestParseUnion:
    def test_union_pieces_in_order(self) -> None:
        domain = parse_notation("[1;3]⋃(7;∞)")
        assert isinstance(domain, Union)
        assert domain.items == (
            Interval(Included(1), Included(3)),
            Interval(Excluded(7), Unbounded()),
        )

    def test_union_with_empty_piece(self) -> None:
        assert parse_notation("∅⋃[0;0]") == union(Empty(), Interval(Included(0), Included(0)))


class TestRoundTrip:
    @pytest.mark.parametrize(
        "domain",
        [
            Domain.new(),
            Domain.new().gt(Excluded(5)).lt(Included(9)),
            Interval(Included(-4), Included(-4)),
            Empty(),
            union(Interval(Included(1), Excluded(3)), Domain.new().lt(Excluded(-10))),
        ],
    )
    def test_parse_inverts_notation(self, domain: Domain) -> None:
        for separator in (";", ","):
            assert parse_notation(domain.notation(separator), separator) == domain


class TestErrors:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "[5;10",
            "5;10)",
            "[a;10)",
            "[5,10)",
            "[5;∞]",
            "[-∞;5)",
            "[1;2]⋃",
            "[1;2]⋃garbage",
        ],
    )
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(NotationError):
            parse_notation(text)

    @pytest.mark.parametrize("separator", ["⋃", "∅", "", " "])
    def test_unparseable_separator_rejected(self, separator: str) -> None:
        with pytest.raises(ValueError, match="[Ss]eparator"):
            parse_notation("[1;2]", separator)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_notation("nope")

    def test_error_reports_position_of_bad_piece(self) -> None:
        with pytest.raises(NotationError) as excinfo:
            parse_notation("[1;2]⋃oops")
        assert excinfo.value.position == len("[1;2]⋃")
        assert excinfo.value.text == "[1;2]⋃oops"
