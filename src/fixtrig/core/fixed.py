from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Union

SCALE = 10**18

# pi * 1e18, truncated. Every cyclic reduction is taken modulo TWO_PI, so these
# exact integers (not the real pi) define where quadrant boundaries fall.
PI = 3141592653589793238
TWO_PI = 2 * PI
PI_OVER_TWO = PI // 2

FixedLike = Union[int, Fraction, Decimal, float, str]


def mul_div_trunc(a: int, b: int, d: int) -> int:
    """a*b/d rounded toward zero, like signed integer division on the word machine."""
    if d == 0:
        raise ZeroDivisionError("mul_div_trunc with zero divisor")
    n = a * b
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


def to_fixed(x: FixedLike) -> int:
    """
    Exact conversion of a real number to scale-1e18 fixed point, floored.

    Strings go through Fraction, so "0.5" and "1/3" are both accepted exactly.
    Floats are converted from their exact binary value.
    """
    if isinstance(x, bool):
        raise TypeError("to_fixed does not accept bool")
    if isinstance(x, int):
        return x * SCALE
    if isinstance(x, (Fraction, Decimal, float)):
        q = Fraction(x)
    elif isinstance(x, str):
        q = Fraction(x.strip())
    else:
        raise TypeError(f"cannot convert {type(x).__name__} to fixed point")
    v = q * SCALE
    return v.numerator // v.denominator


def from_fixed(v: int) -> Fraction:
    return Fraction(v, SCALE)


def format_fixed(v: int) -> str:
    """Render a fixed-point int as a decimal with all 18 fractional digits."""
    sign = "-" if v < 0 else ""
    whole, frac = divmod(abs(v), SCALE)
    return f"{sign}{whole}.{frac:018d}"
