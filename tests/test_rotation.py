"""
Tests for Givens rotation construction (rotg, rotg_decode) and application (rot).
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from blas1 import rotg, rotg_decode, RotationParams


CASES = [
    (3.0, 4.0),
    (4.0, 3.0),
    (-3.0, 4.0),
    (3.0, -4.0),
    (-4.0, -3.0),
    (1.0, 1.0),
    (0.0, 2.0),
    (2.0, 0.0),
    (-2.0, 0.0),
    (1e-200, 3e-200),
    (5e307, 7e307),
]

# Subnormal operands: r rounds, but (c, s) must still lie on the unit circle
TINY_CASES = [
    (5e-324, 5e-324),
    (-5e-324, 1e-323),
    (3e-310, 4e-310),
    (1e-320, -0.0),
]


class TestRotg:
    """Construction of (r, z, c, s)."""

    def test_three_four(self):
        r, z, c, s = rotg(3.0, 4.0)
        assert r == pytest.approx(5.0)
        assert c == pytest.approx(0.6)
        assert s == pytest.approx(0.8)
        assert z == pytest.approx(1.0 / 0.6), "|b| >= |a| stores z = 1/c"

    def test_four_three(self):
        r, z, c, s = rotg(4.0, 3.0)
        assert r == pytest.approx(5.0)
        assert z == pytest.approx(0.6), "|a| > |b| stores z = s"

    def test_zero_zero(self):
        assert rotg(0.0, 0.0) == (0.0, 0.0, 1.0, 0.0)

    def test_a_zero_stores_one(self):
        r, z, c, s = rotg(0.0, -2.0)
        assert (r, z, c, s) == (-2.0, 1.0, 0.0, 1.0)

    def test_sign_follows_larger_operand(self):
        assert rotg(-4.0, 3.0).r < 0
        assert rotg(3.0, -4.0).r < 0
        assert rotg(-3.0, 3.0).r > 0, "ties take the sign of b"

    def test_returns_named_tuple(self):
        params = rotg(1.0, 2.0)
        assert isinstance(params, RotationParams)
        assert params[0] == params.r
        assert len(params) == 4

    @pytest.mark.parametrize('a,b', CASES)
    def test_zeroes_second_component(self, a, b):
        r, z, c, s = rotg(a, b)
        scale = max(abs(a), abs(b))
        assert c * a + s * b == pytest.approx(r, rel=1e-14)
        assert abs(c * b - s * a) <= 1e-14 * scale
        assert abs(r) == pytest.approx(math.hypot(a, b), rel=1e-14)
        assert c * c + s * s == pytest.approx(1.0, rel=1e-14)

    @pytest.mark.parametrize('a,b', TINY_CASES)
    def test_subnormal_operands(self, a, b):
        r, _, c, s = rotg(a, b)
        assert c * c + s * s == pytest.approx(1.0, rel=1e-14)
        assert abs(r) == pytest.approx(math.hypot(a, b), rel=0.5)

    def test_no_overflow(self):
        r, _, c, s = rotg(1e308, 1e308)
        assert math.isfinite(r)
        assert c == pytest.approx(math.sqrt(0.5))

    def test_nan_propagates(self):
        assert all(math.isnan(v) for v in rotg(math.nan, 1.0))
        assert all(math.isnan(v) for v in rotg(0.0, math.nan))

    @pytest.mark.parametrize('a,b', CASES[:9])
    def test_matches_scipy(self, a, b):
        blas = pytest.importorskip('scipy.linalg.blas')
        c_ref, s_ref = blas.drotg(a, b)
        _, _, c, s = rotg(a, b)
        assert c == pytest.approx(c_ref, rel=1e-12, abs=1e-15)
        assert s == pytest.approx(s_ref, rel=1e-12, abs=1e-15)


class TestRotgDecode:
    """Recover (c, s) from z alone."""

    @pytest.mark.parametrize('a,b', CASES + TINY_CASES)
    def test_round_trip(self, a, b):
        _, z, c, s = rotg(a, b)
        c_dec, s_dec = rotg_decode(z)
        assert c_dec == pytest.approx(c, rel=1e-12, abs=1e-15)
        assert s_dec == pytest.approx(s, rel=1e-12, abs=1e-15)

    def test_degenerate(self):
        _, z, _, _ = rotg(0.0, 0.0)
        assert rotg_decode(z) == (1.0, 0.0)

    def test_one(self):
        assert rotg_decode(1.0) == (0.0, 1.0)


class TestRot:
    """(x, y) <- (c*x + s*y, c*y - s*x)."""

    def test_identity(self, backend, rng):
        x = rng.standard_normal(20)
        y = rng.standard_normal(20)
        x0, y0 = x.copy(), y.copy()
        backend.rot(x, y, 1.0, 0.0)

        assert_array_equal(x, x0)
        assert_array_equal(y, y0)

    def test_applies_rotg(self, backend):
        r, _, c, s = backend.rotg(3.0, 4.0)
        x = np.array([3.0])
        y = np.array([4.0])
        backend.rot(x, y, c, s)

        assert x[0] == pytest.approx(r)
        assert y[0] == pytest.approx(0.0, abs=1e-15)

    def test_formula(self, backend):
        x = np.array([1.0, 2.0])
        y = np.array([3.0, 5.0])
        backend.rot(x, y, 0.5, 2.0)

        assert_allclose(x, [0.5 * 1 + 2 * 3, 0.5 * 2 + 2 * 5])
        assert_allclose(y, [0.5 * 3 - 2 * 1, 0.5 * 5 - 2 * 2])

    def test_preserves_norm(self, backend, rng):
        x = rng.standard_normal(50)
        y = rng.standard_normal(50)
        before = np.hypot(x, y)
        _, _, c, s = backend.rotg(0.3, -1.7)
        backend.rot(x, y, c, s)

        assert_allclose(np.hypot(x, y), before, rtol=1e-13)

    def test_returns_none(self, backend):
        assert backend.rot(np.ones(2), np.ones(2), 1.0, 0.0) is None

    def test_empty(self, backend):
        x = np.array([], dtype=np.float64)
        y = np.array([], dtype=np.float64)
        backend.rot(x, y, 0.6, 0.8)
        assert len(x) == 0
