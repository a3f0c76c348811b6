"""String formatting, joining and lenient number parsing."""

from __future__ import annotations

from vgengine.basic import MAX_POW10_EXPONENT, is_digit, pow10

_SIGNS = "+-"


def format_fixed(n: float, decimals: int) -> str:
    """Format ``n`` with exactly ``decimals`` digits after the point."""
    return f"{n:.{decimals}f}"


def concat(*args: str) -> str:
    """Join two or more strings."""
    if len(args) < 2:
        raise ValueError("concat needs at least two strings")
    return "".join(args)


def parse_int(text: str) -> int:
    """Parse an optionally signed decimal integer.

    Returns 0 for an empty string, for text holding anything other than
    digits and signs, and for more than 17 digits. A sign anywhere but the
    front raises :class:`ValueError`.
    """
    if not text:
        return 0
    if any(not is_digit(ch) and ch not in _SIGNS for ch in text):
        return 0
    negative = text[0] == "-"
    body = text if is_digit(text[0]) else text[1:]
    if len(body) > MAX_POW10_EXPONENT:
        return 0
    if not all(is_digit(ch) for ch in body):
        raise ValueError(f"misplaced sign in {text!r}")
    value = int(body) if body else 0
    return -value if negative else value


def parse_float(text: str) -> float:
    """Parse an optionally signed decimal number with at most one point.

    Returns 0.0 for text holding anything other than digits, signs and a
    point, for more than one point, and for more than 17 digits on either
    side of the point.
    """
    if any(not is_digit(ch) and ch not in _SIGNS and ch != "." for ch in text):
        return 0.0
    num_dots = text.count(".")
    if num_dots == 0:
        return float(parse_int(text))
    if num_dots > 1:
        return 0.0

    dot = text.index(".")
    negative = text[0] == "-"
    skip_first = 0 if is_digit(text[0]) else 1

    if text[-1] == ".":
        return float(parse_int(text[:-1]))

    int_str = text[skip_first:dot]
    int_str_too_big = len(int_str) - skip_first > MAX_POW10_EXPONENT
    dec_str = text[dot + 1 :]

    int_part = parse_int(int_str)
    dec_part = 0 if int_str_too_big else parse_int(dec_str)

    if len(dec_str) > MAX_POW10_EXPONENT or int_str_too_big:
        return 0.0

    result = int_part + dec_part / pow10(len(dec_str))
    return -result if negative else result