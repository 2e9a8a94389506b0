"""Number formatting for chat messages."""

from decimal import Decimal
from typing import Tuple


def _shortest_digits(value: float) -> Tuple[int, str, int]:
    """Return (sign, digits, exponent) of the shortest round-trip decimal.

    ``digits`` has no trailing zeros; value == sign * 0.digits * 10**exponent.
    """
    sign, digits, exp = Decimal(repr(value)).as_tuple()
    text = "".join(str(d) for d in digits).rstrip("0")
    if not text:
        return sign, "0", 1
    # Decimal coefficients carry no leading zeros
    return sign, text, len(digits) + exp


def _fixed(sign: int, digits: str, point: int) -> str:
    if point <= 0:
        body = "0." + "0" * -point + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + "." + digits[point:]
    return ("-" if sign else "") + body


def format_points(value: float) -> str:
    """Shortest decimal form, never in exponent notation.

    3.0 -> "3", 2.5 -> "2.5", 1e21 -> "1000000000000000000000".
    """
    sign, digits, point = _shortest_digits(value)
    return _fixed(sign, digits, point)


def format_general(value: float) -> str:
    """Shortest decimal form, switching to exponent notation for large or tiny values.

    Exponent form is used when the decimal exponent is below -4 or at least 6,
    e.g. 1000000.0 -> "1e+06", 0.00001 -> "1e-05".
    """
    sign, digits, point = _shortest_digits(value)
    exp = point - 1
    if digits != "0" and (exp < -4 or exp >= 6):
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        return f"{'-' if sign else ''}{mantissa}e{exp:+03d}"
    return _fixed(sign, digits, point)
