import pytest

from cursus.pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    check_argument,
    check_input,
    collect_tokens,
    compare_num,
    format_stack,
    is_empty,
    is_space,
    is_zero,
    parse_long,
    parse_numbers,
    split_words,
)


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_true(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "0", "-"])
def test_is_space_false(c):
    assert is_space(c) is False


def test_is_empty():
    assert is_empty("") is True
    assert is_empty("  \t ") is True
    assert is_empty(" 1 ") is False


def test_split_words_drops_empty():
    assert split_words("  12 3  4 ", " ") == ["12", "3", "4"]
    assert split_words("   ", " ") == []


def test_split_words_bad_separator():
    with pytest.raises(ValueError):
        split_words("a b", "ab")


def test_collect_tokens_joins_arguments():
    assert collect_tokens(["1 2", "3", "  4  5"]) == ["1", "2", "3", "4", "5"]


def test_collect_tokens_rejects_blank_argument():
    with pytest.raises(InputError):
        collect_tokens(["1", "  "])
    with pytest.raises(InputError):
        collect_tokens([""])


@pytest.mark.parametrize("token", ["42", "-42", "+42", "+", "007"])
def test_check_argument_accepts(token):
    assert check_argument(token) is True


@pytest.mark.parametrize("token", ["4a2", "--1", "1-", "1\t", "x"])
def test_check_argument_rejects(token):
    assert check_argument(token) is False


def test_is_zero():
    assert is_zero("0") is True
    assert is_zero("-000") is True
    assert is_zero("+0") is True
    assert is_zero("10") is False
    assert is_zero("01") is False


def test_compare_num_ignores_plus():
    assert compare_num("+5", "5") == 0
    assert compare_num("5", "+5") == 0
    assert compare_num("+5", "+5") == 0


def test_compare_num_ordering():
    assert compare_num("12", "13") < 0
    assert compare_num("13", "12") > 0
    assert compare_num("1", "12") < 0
    assert compare_num("-1", "1") != 0


def test_check_input_returns_tokens():
    assert check_input(["3", "-1", "+2"]) == ["3", "-1", "+2"]


@pytest.mark.parametrize(
    "tokens",
    [["1", "+1"], ["4", "2", "4"], ["0", "-0"], ["+00", "0"], ["1", "x"], ["1", "2-"]],
)
def test_check_input_errors(tokens):
    with pytest.raises(InputError):
        check_input(tokens)


def test_check_input_textual_duplicates_only():
    assert check_input(["1", "01"]) == ["1", "01"]


def test_parse_long():
    assert parse_long(" -42") == -42
    assert parse_long("+7abc") == 7
    assert parse_long("") == 0


def test_parse_numbers_limits():
    assert parse_numbers(["2147483647", "-2147483648"]) == [INT_MAX, INT_MIN]


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_numbers_out_of_range(token):
    with pytest.raises(InputError):
        parse_numbers([token])


def test_format_stack():
    assert format_stack([1, 2]) == "1 -> 2 -> NULL"
    assert format_stack([]) == "NULL"