# tests/test_cyclic.py

import math
import random

import pytest

import fixtrig
from fixtrig import PI, PI_OVER_TWO, SCALE, TWO_PI, cos, sin
from fixtrig.core.word import UINT256_MAX, wrapping_add
from fixtrig.engines.cyclic import ANGLES_IN_CYCLE, decompose, explain, to_cycle
from fixtrig.engines.sin_table import AMPLITUDE, SINE_TABLE


def angle_for_cycle(c: int) -> int:
    """Smallest fixed-point angle whose cyclic position is exactly c."""
    return -(-c * TWO_PI // ANGLES_IN_CYCLE)


def scaled(units: int) -> int:
    q = abs(units) * SCALE // AMPLITUDE
    return q if units >= 0 else -q


def test_known_values_are_exact():
    assert sin(0) == 0
    assert sin(PI_OVER_TWO) == SCALE
    assert sin(PI) == 0
    assert sin(3 * PI_OVER_TWO) == -SCALE
    assert sin(TWO_PI) == 0
    assert cos(0) == SCALE
    assert cos(PI) == -SCALE
    assert cos(PI_OVER_TWO) == 0


def test_known_values_approximate():
    tol = 10**13  # 1e-5 in real units
    for x in (0.1, 0.5, 1.0, 2.0, 3.0, 4.5, 6.0):
        a = int(x * SCALE)
        assert abs(sin(a) - math.sin(x) * SCALE) < tol
        assert abs(cos(a) - math.cos(x) * SCALE) < tol


def test_angle_for_cycle_helper():
    for c in (0, 1, 2**20, 2**28, 2**29 + 12345, ANGLES_IN_CYCLE - 1):
        assert to_cycle(angle_for_cycle(c)) == c


def test_decompose_fields():
    ph = decompose(angle_for_cycle((2 << 28) | (17 << 20) | (0xBEEF << 4) | 0xF))
    assert ph.quadrant == 2
    assert ph.is_odd_quadrant
    assert ph.is_negative_quadrant
    assert ph.index == 17
    assert ph.interp == 0xBEEF

    ph = decompose(angle_for_cycle((1 << 28) | (17 << 20)))
    assert ph.quadrant == 1
    assert not ph.is_odd_quadrant
    assert not ph.is_negative_quadrant
    assert ph.index == 255 - 17
    assert ph.interp == 0


def test_sample_points_hit_table_in_every_quadrant():
    """At interp == 0 the result is exactly a table entry, mirrored and signed per quadrant."""
    for k in range(256):
        assert sin(angle_for_cycle(k << 20)) == scaled(SINE_TABLE[k])
        assert sin(angle_for_cycle((1 << 28) | (k << 20))) == scaled(SINE_TABLE[256 - k])
        assert sin(angle_for_cycle((2 << 28) | (k << 20))) == scaled(-SINE_TABLE[k])
        assert sin(angle_for_cycle((3 << 28) | (k << 20))) == scaled(-SINE_TABLE[256 - k])


def test_linear_interpolation_between_samples():
    random.seed(7)
    for _ in range(500):
        k = random.randrange(256)
        f = random.randrange(1 << 16)
        x1, x2 = SINE_TABLE[k], SINE_TABLE[k + 1]
        delta = ((x2 - x1) * f) >> 16

        rising = angle_for_cycle((k << 20) | (f << 4))
        assert sin(rising) == scaled(x1 + delta)

        # quadrant 1 reads the table from the top: index 255 - k
        falling = angle_for_cycle((1 << 28) | ((255 - k) << 20) | (f << 4))
        assert sin(falling) == scaled(x2 - delta)


def test_negative_results_truncate_toward_zero():
    # smallest nonzero units in a negative quadrant: -1 unit * 1e18 / (2**31 - 1)
    assert scaled(-1) == -465661287
    ph_angle = angle_for_cycle((3 << 28) | (255 << 20))
    assert sin(ph_angle) == scaled(-SINE_TABLE[1])


def test_periodicity():
    random.seed(42)
    for _ in range(1000):
        a = random.getrandbits(250)
        assert sin(a) == sin(a + TWO_PI)
        assert sin(a) == sin(a + 1000 * TWO_PI)


def test_shift_identity_is_exact():
    random.seed(42)
    angles = [random.getrandbits(256) for _ in range(1000)]
    angles += [0, UINT256_MAX, UINT256_MAX - PI_OVER_TWO, UINT256_MAX - PI_OVER_TWO + 1]
    for a in angles:
        assert cos(a) == sin(wrapping_add(a, PI_OVER_TWO))


def test_bounded_range():
    random.seed(1)
    for _ in range(2000):
        a = random.getrandbits(256)
        assert -SCALE <= sin(a) <= SCALE
        assert -SCALE <= cos(a) <= SCALE


def test_odd_symmetry():
    random.seed(3)
    tol = 10**12
    for _ in range(1000):
        a = random.randrange(1, TWO_PI)
        assert abs(sin(TWO_PI - a) + sin(a)) < tol


def test_quadrant_mirror_consistency():
    random.seed(5)
    tol = 10**12
    for _ in range(1000):
        a = random.randrange(0, PI + 1)
        assert abs(sin(PI - a) - sin(a)) < tol


def test_extreme_inputs_do_not_fail():
    for a in (UINT256_MAX, UINT256_MAX - 1, 2**255, 2**128, TWO_PI - 1):
        assert -SCALE <= sin(a) <= SCALE
        assert -SCALE <= cos(a) <= SCALE
    # the cosine shift wraps past 2**256 before reduction
    assert cos(UINT256_MAX) == sin(PI_OVER_TWO - 1)


def test_int_inputs_wrap_like_a_word():
    assert sin(-1) == sin(UINT256_MAX)
    assert sin(2**256 + 12345) == sin(12345)
    assert cos(-1) == cos(UINT256_MAX)


@pytest.mark.parametrize("bad", [1.5, "0", None, True])
def test_non_int_angles_rejected(bad):
    with pytest.raises(TypeError):
        sin(bad)
    with pytest.raises(TypeError):
        cos(bad)


def test_explain_matches_sin():
    random.seed(11)
    for _ in range(200):
        a = random.getrandbits(256)
        info = explain(a)
        assert info["result"] == sin(a)
        assert info["cycle"] == to_cycle(a)
        assert info["x2"] >= info["x1"]
        assert 0 <= info["delta"] <= info["x2"] - info["x1"]


def test_public_api_surface():
    assert fixtrig.sin is sin
    assert fixtrig.cos is cos
    assert fixtrig.to_fixed("1") == SCALE
    assert isinstance(fixtrig.decompose(0), fixtrig.CyclicPhase)
