from __future__ import annotations

# Unsigned machine word of the reference evaluator. Python ints never overflow,
# so wraparound is spelled out wherever the reference relies on it.
WORD_BITS = 256
WORD_MASK = (1 << WORD_BITS) - 1
UINT256_MAX = WORD_MASK


def require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful angle
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def to_word(x: int) -> int:
    """Reduce x to an unsigned word (x mod 2**256); negatives become their two's complement."""
    return x & WORD_MASK


def wrapping_add(a: int, b: int) -> int:
    return (a + b) & WORD_MASK


def wrapping_mul(a: int, b: int) -> int:
    return (a * b) & WORD_MASK
