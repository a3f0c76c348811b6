"""Small numeric helpers shared across the engine."""

from __future__ import annotations

import math

EPSILON = 0.0001
PI = 3.14159265359
TAU = 6.28318530718
RAD = 57.2957795131
DEG = 0.01745329252

KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB

MAX_POW10_EXPONENT = 17


def clamp(n, low, high):
    """Clamp ``n`` into the closed range ``[low, high]``."""
    if n < low:
        return low
    if n > high:
        return high
    return n


def clamp01(n):
    """Clamp ``n`` into ``[0, 1]``."""
    return clamp(n, 0, 1)


def sign(n):
    """Return -1, 0 or 1 according to the sign of ``n``."""
    return (0 < n) - (n < 0)


def is_pow2(n: int) -> bool:
    """True when ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def _require_pow2(value: int) -> None:
    if not is_pow2(value):
        raise ValueError(f"{value} is not a power of two")


def align_up(n: int, multiple_of: int) -> int:
    """Round ``n`` up to the next multiple of a power of two."""
    _require_pow2(multiple_of)
    return (n + multiple_of - 1) & ~(multiple_of - 1)


def align_down(n: int, multiple_of: int) -> int:
    """Round ``n`` down to a multiple of a power of two."""
    _require_pow2(multiple_of)
    return n & ~(multiple_of - 1)


def fast_mod(n: int, by: int) -> int:
    """``n`` modulo a power of two, computed with a mask."""
    _require_pow2(by)
    return n & (by - 1)


def pow10(n: int) -> int:
    """Ten to the power ``n``; non-positive exponents give 1.

    Exponents above 17 would overflow a 64-bit result and are rejected.
    """
    if n > MAX_POW10_EXPONENT:
        raise ValueError(f"pow10 exponent {n} exceeds {MAX_POW10_EXPONENT}")
    return 10**n if n > 0 else 1


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` (t=0) to ``b`` (t=1)."""
    return b * t + a * (1 - t)


def floori(n: float) -> int:
    """Truncate towards zero."""
    return int(n)


def ceili(n: float) -> int:
    """Truncate ``n + 1`` towards zero."""
    return int(n + 1)


def roundi(n: float) -> int:
    """Truncate ``n + 0.5`` towards zero."""
    return int(n + 0.5)


def decimal(n: float) -> float:
    """Fractional part of ``n``, keeping the sign of ``n``."""
    return n - int(n)


def float_compare(a: float, b: float) -> bool:
    """True when ``a`` and ``b`` differ by less than :data:`EPSILON`."""
    return abs(a - b) < EPSILON


def naive_fmod(n: float, mod: float) -> float:
    """Remainder of the truncated operands, with the sign of ``n``."""
    dividend, divisor = floori(n), floori(mod)
    if divisor == 0:
        raise ZeroDivisionError("modulus truncates to zero")
    return float(math.fmod(dividend, divisor))


def _code_point(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits ``0``-``9`` (as a character or a byte)."""
    if isinstance(c, str) and len(c) != 1:
        return False
    return ord("0") <= _code_point(c) <= ord("9")


def digit_value(c: int | str) -> int:
    """Numeric value of an ASCII digit."""
    if not is_digit(c):
        raise ValueError(f"{c!r} is not a decimal digit")
    return _code_point(c) - ord("0")


def num_digits(n: int | float) -> int:
    """Number of digits in the integral part of ``n``.

    Zero counts as one digit. A non-zero float whose integral part is zero
    has no digits.
    """
    if isinstance(n, float):
        if float_compare(n, 0.0):
            return 1
        whole = floori(abs(n))
        return len(str(whole)) if whole > 0 else 0
    return len(str(abs(n)))


def num_decimal_digits(f: float) -> int:
    """Significant digits after the point when printed with 20 decimals."""
    _, dot, fraction = f"{f:.20f}".partition(".")
    if not dot:
        return 0
    return len(fraction.rstrip("0"))


def round_decimals(n: float, decimals: int) -> float:
    """Round ``n`` to ``decimals`` places (capped at 17) by adding one half and truncating."""
    scale = pow10(min(decimals, MAX_POW10_EXPONENT))
    return float(int(n * scale + 0.5)) / scale