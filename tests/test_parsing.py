import pytest
from hypothesis import given, strategies as st

from pushswap.parsing import (
    ParseError,
    atoi,
    has_duplicates,
    is_integer_token,
    parse_args,
    parse_integer,
    split,
)
from pushswap.stacks import Number


@pytest.mark.parametrize("text", ["0", "42", "+7", "-13", "0001"])
def test_is_integer_token_accepts(text):
    assert is_integer_token(text) is True


@pytest.mark.parametrize("text", ["", "+", "-", "1a", "--1", "+-3", " 1", "1.0"])
def test_is_integer_token_rejects(text):
    assert is_integer_token(text) is False


def test_parse_integer_values():
    assert parse_integer("-2147483648") == -2147483648
    assert parse_integer("+2147483647") == 2147483647
    assert parse_integer("007") == 7


def test_parse_integer_rejects_garbage():
    with pytest.raises(ParseError):
        parse_integer("12x")


@given(st.integers())
def test_parse_integer_round_trip(n):
    assert parse_integer(str(n)) == n


def test_split_drops_empty_pieces():
    assert split("  1 2   3 ", " ") == ["1", "2", "3"]
    assert split("   ", " ") == []


@given(st.lists(st.text(alphabet="abc", min_size=1)))
def test_split_round_trip(words):
    assert split(" ".join(words), " ") == words


def test_atoi_basic():
    assert atoi("  \t-42") == -42
    assert atoi("+17abc") == 17
    assert atoi("abc") == 0


def test_atoi_double_sign_gives_zero():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648


@given(st.integers(min_value=-2147483648, max_value=2147483647))
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_has_duplicates():
    assert has_duplicates([Number(1), Number(2), Number(1)]) is True
    assert has_duplicates([Number(1), Number(2), Number(3)]) is False
    assert has_duplicates([]) is False


def test_has_duplicates_ignores_index():
    assert has_duplicates([Number(3, 0), Number(3, 1)]) is True


def test_parse_args_mixed_arguments():
    result = parse_args(["3 1", "2", "  -5  "])
    assert [n.value for n in result] == [3, 1, 2, -5]
    assert all(n.index == 0 for n in result)


def test_parse_args_limits_accepted():
    result = parse_args(["2147483647", "-2147483648"])
    assert [n.value for n in result] == [2147483647, -2147483648]


@pytest.mark.parametrize(
    "args",
    [
        ["2147483648"],
        ["-2147483649"],
        ["1", "two"],
        ["1 +"],
        [],
        ["   "],
        [""],
    ],
)
def test_parse_args_errors(args):
    with pytest.raises(ParseError):
        parse_args(args)


def test_parse_args_keeps_duplicates():
    result = parse_args(["1 1"])
    assert has_duplicates(result) is True


@given(st.lists(st.integers(min_value=-2147483648, max_value=2147483647), min_size=1))
def test_parse_args_round_trip(values):
    result = parse_args([" ".join(str(v) for v in values)])
    assert [n.value for n in result] == values