import pytest

from minishell.numconv import atoi, atoi_base, atol, itoa

HEX = "0123456789abcdef"
DECIMAL = "0123456789"


def test_atoi_plain_number():
    assert atoi("42") == 42


def test_atoi_skips_space_and_stops_at_non_digit():
    assert atoi("  \t\n-17abc") == -17
    assert atoi("+7") == 7


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0


def test_atoi_only_one_sign():
    assert atoi("--5") == atoi("x")


@pytest.mark.parametrize("n", [0, 1, -1, 123456, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


def test_atol_holds_long_max():
    assert atol("9223372036854775807") == 9223372036854775807


@pytest.mark.parametrize("text", ["12", "  -99", "+3x", "2147483647"])
def test_atol_agrees_with_atoi_in_int_range(text):
    assert atol(text) == atoi(text)


def test_atol_accepts_larger_than_int():
    assert atol("4294967296") > atoi("4294967296")


def test_atoi_base_hex():
    assert atoi_base("ff", HEX) == 255


def test_atoi_base_sign():
    assert atoi_base("-7f", HEX) == -atoi_base("7f", HEX)


@pytest.mark.parametrize("n", [0, 5, -5, 987654])
def test_atoi_base_decimal_round_trip(n):
    assert atoi_base(itoa(n), DECIMAL) == n


def test_atoi_base_stops_at_digit_out_of_range():
    assert atoi_base("1012", "01") == atoi_base("101", "01")


def test_atoi_base_uses_only_base_length():
    assert atoi_base("21", "abc") == atoi_base("21", "012")


def test_atoi_base_upper_case_digits():
    assert atoi_base("FF", HEX) == atoi_base("ff", HEX)


def test_atoi_base_empty_text_is_zero():
    assert atoi_base("", "01") == atoi_base("z", "01")


@pytest.mark.parametrize("base", ["", "0", "0+", "01-", "0135", "ba"])
def test_atoi_base_invalid_base(base):
    with pytest.raises(ValueError):
        atoi_base("1", base)