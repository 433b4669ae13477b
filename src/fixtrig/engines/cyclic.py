from __future__ import annotations

from typing import Any, Dict

from ..core.fixed import PI_OVER_TWO, SCALE, TWO_PI, mul_div_trunc
from ..core.types import CyclicPhase
from ..core.word import require_int, to_word, wrapping_add, wrapping_mul
from .sin_table import AMPLITUDE, SINE_TABLE, TABLE_SIZE

# One full turn is 2**30 cycle units. Bits 29/28 pick the quadrant, bits 27..20
# the table index and bits 19..4 the interpolation fraction.
ANGLES_IN_CYCLE = 1 << 30
QUADRANT_HIGH_MASK = 1 << 29
QUADRANT_LOW_MASK = 1 << 28

INDEX_WIDTH = 8
INTERP_WIDTH = 16
INDEX_OFFSET = 28 - INDEX_WIDTH
INTERP_OFFSET = INDEX_OFFSET - INTERP_WIDTH

_INDEX_MASK = (1 << INDEX_WIDTH) - 1
_INTERP_MASK = (1 << INTERP_WIDTH) - 1


def to_cycle(angle: int) -> int:
    """floor(2**30 * (angle mod TWO_PI) / TWO_PI) for an unsigned word angle."""
    return wrapping_mul(ANGLES_IN_CYCLE, angle % TWO_PI) // TWO_PI


def decompose(angle: int) -> CyclicPhase:
    """
    Reduce a fixed-point angle to the cycle and fold it onto the quarter-wave table.

    Quadrants 1 and 3 (0-based) read the table mirrored, so the index is
    reflected here and the interpolation direction flips in sine_units().
    """
    a = to_word(require_int("angle", angle))
    cycle = to_cycle(a)

    interp = (cycle >> INTERP_OFFSET) & _INTERP_MASK
    index = (cycle >> INDEX_OFFSET) & _INDEX_MASK
    is_odd = (cycle & QUADRANT_LOW_MASK) == 0
    is_neg = (cycle & QUADRANT_HIGH_MASK) != 0

    if not is_odd:
        index = TABLE_SIZE - 1 - index

    return CyclicPhase(
        angle=a,
        cycle=cycle,
        quadrant=cycle >> 28,
        is_odd_quadrant=is_odd,
        is_negative_quadrant=is_neg,
        index=index,
        interp=interp,
    )


def sine_units(phase: CyclicPhase) -> int:
    """Signed sine in table amplitude units, |result| <= 2**31 - 1."""
    x1 = SINE_TABLE[phase.index]
    x2 = SINE_TABLE[phase.index + 1]
    delta = ((x2 - x1) * phase.interp) >> INTERP_WIDTH

    s = x1 + delta if phase.is_odd_quadrant else x2 - delta
    return -s if phase.is_negative_quadrant else s


def sin(angle: int) -> int:
    """
    Sine of a fixed-point angle (radians * 1e18), returned as fixed point (* 1e18).

    Any int is accepted and taken modulo 2**256 first, the way an unsigned
    256-bit word would hold it. The result lies in [-1e18, 1e18].
    """
    return mul_div_trunc(sine_units(decompose(angle)), SCALE, AMPLITUDE)


def cos(angle: int) -> int:
    """Cosine as sin(angle + pi/2); the shift wraps at 2**256 before reduction."""
    a = to_word(require_int("angle", angle))
    return sin(wrapping_add(a, PI_OVER_TWO))


def explain(angle: int) -> Dict[str, Any]:
    phase = decompose(angle)
    x1 = SINE_TABLE[phase.index]
    x2 = SINE_TABLE[phase.index + 1]
    units = sine_units(phase)
    return {
        "angle": phase.angle,
        "cycle": phase.cycle,
        "quadrant": phase.quadrant,
        "is_odd_quadrant": phase.is_odd_quadrant,
        "is_negative_quadrant": phase.is_negative_quadrant,
        "index": phase.index,
        "interp": phase.interp,
        "x1": x1,
        "x2": x2,
        "delta": ((x2 - x1) * phase.interp) >> INTERP_WIDTH,
        "units": units,
        "result": mul_div_trunc(units, SCALE, AMPLITUDE),
    }
