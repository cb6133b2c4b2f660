import pytest

from advent import y2022_day25

_DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}


def _decode(snafu):
    value = 0
    for symbol in snafu:
        value = value * 5 + _DIGITS[symbol]
    return value


@pytest.mark.parametrize(
    "a, b",
    [("1=-0-2", "12111"), ("20", "-"), ("1-", "1"), ("1", "0"), ("1=11-2", "1-0---0")],
)
def test_sum_decodes_to_sum_of_operands(a, b):
    assert _decode(y2022_day25.add_snafu(a, b)) == _decode(a) + _decode(b)


def test_addition_is_commutative():
    assert y2022_day25.add_snafu("1=-0-2", "12111") == y2022_day25.add_snafu("12111", "1=-0-2")


def test_adding_zero_keeps_digits():
    assert y2022_day25.add_snafu("0", "1-0") == "1-0"


def test_final_carry_is_appended_last():
    assert y2022_day25.add_snafu("2", "1") == "=1"


def test_part1_accumulates_lines():
    assert y2022_day25.part1("1\n1\n") == "2"


def test_part1_single_line_is_unchanged():
    assert y2022_day25.part1("1=-0-2\n") == "1=-0-2"


def test_invalid_digit_raises():
    with pytest.raises(ValueError):
        y2022_day25.add_snafu("13", "1")