"""Full of hot air: adding balanced base-five SNAFU numbers."""

_DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
_SYMBOLS = {value: symbol for symbol, value in _DIGITS.items()}


def _value(symbol):
    try:
        return _DIGITS[symbol]
    except KeyError:
        raise ValueError(f"invalid SNAFU digit: {symbol!r}") from None


def add_snafu(a, b):
    """Add two SNAFU numbers digit by digit.

    A carry left over after the most significant digit is appended as the
    final character of the result.
    """
    width = max(len(a), len(b))
    a = a.rjust(width, "0")
    b = b.rjust(width, "0")

    digits = []
    carry = 0
    for x, y in zip(reversed(a), reversed(b)):
        total = _value(x) + _value(y) + carry
        if total > 2:
            digits.append(_SYMBOLS[total - 5])
            carry = 1
        elif total < -2:
            digits.append(_SYMBOLS[total + 5])
            carry = -1
        else:
            digits.append(_SYMBOLS[total])
            carry = 0

    result = "".join(reversed(digits))
    if carry:
        result += _SYMBOLS[carry]
    return result


def part1(text):
    """Sum of every SNAFU number in the input, written in SNAFU."""
    total = "0"
    for line in text.splitlines():
        if line.strip():
            total = add_snafu(total, line.strip())
    return total