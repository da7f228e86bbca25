"""
Tests for the plane crossing formula and the `Plane` type.
"""

import math

import numpy as np
import pytest

from meshslicer.geometry import (
    PRECISION,
    Plane,
    check_precision,
    interpolate,
    is_crossing,
    solve_crossing,
)


class TestSolveCrossing:
    def test_midpoint(self):
        lam = solve_crossing((0, 0, 0), (2, 0, 0), (1, 0, 0), (1, 0, 0))
        assert lam == pytest.approx(0.5)

    def test_point_is_on_plane(self):
        p, q = (1.0, -2.0, 3.0), (-4.0, 5.0, 0.5)
        origin, normal = (0.3, 0.1, -0.2), (0.2, 1.0, -0.7)
        lam = solve_crossing(p, q, origin, normal)
        x = np.asarray(interpolate(p, q, lam))
        assert np.dot(x - np.asarray(origin), normal) == pytest.approx(0.0, abs=1e-12)

    def test_normal_scale_does_not_matter(self):
        a = solve_crossing((0, 0, 0), (0, 0, 4), (0, 0, 1), (0, 0, 1))
        b = solve_crossing((0, 0, 0), (0, 0, 4), (0, 0, 1), (0, 0, -25))
        assert a == pytest.approx(b)

    def test_parallel_segment_is_infinite(self):
        lam = solve_crossing((0, 0, 0), (1, 0, 0), (0, 0, 1), (0, 0, 1))
        assert math.isinf(lam)
        assert not is_crossing(lam)

    def test_segment_in_plane_is_nan(self):
        lam = solve_crossing((0, 0, 0), (1, 0, 0), (5, 5, 0), (0, 0, 1))
        assert math.isnan(lam)
        assert not is_crossing(lam)

    def test_outside_segment(self):
        lam = solve_crossing((0, 0, 0), (1, 0, 0), (3, 0, 0), (1, 0, 0))
        assert lam < 0
        assert not is_crossing(lam)


class TestIsCrossing:
    def test_interior(self):
        assert is_crossing(0.5)

    def test_near_endpoints_rejected(self):
        assert not is_crossing(0.000005)
        assert not is_crossing(1 - 0.000005)
        assert not is_crossing(0.0)
        assert not is_crossing(1.0)

    def test_bounds_are_inclusive(self):
        # Literal test: only values strictly outside [eps, 1 - eps] are rejected
        assert is_crossing(PRECISION)
        assert is_crossing(1 - PRECISION)

    def test_custom_precision(self):
        assert not is_crossing(0.05, precision=0.1)
        assert is_crossing(0.05, precision=0.01)

    @pytest.mark.parametrize("bad", [0.0, -1e-5, 0.5, 1.0, float("nan")])
    def test_precision_out_of_range(self, bad):
        with pytest.raises(ValueError, match="precision"):
            check_precision(bad)

    def test_precision_in_range(self):
        assert check_precision("1e-3") == 1e-3
        assert check_precision(PRECISION) == PRECISION


class TestPlane:
    def test_degenerate(self):
        assert Plane((1, 2, 3), (0, 0, 0)).is_degenerate
        assert not Plane((0, 0, 0), (0, 0, 1e-30)).is_degenerate

    def test_values_are_float_tuples(self):
        plane = Plane([1, 2, 3], np.array([0, 0, 1]))
        assert plane.origin == (1.0, 2.0, 3.0)
        assert isinstance(plane.normal, tuple)

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError):
            Plane((0, 0), (0, 0, 1))

    def test_signed_distance(self):
        plane = Plane((0, 0, 1), (0, 0, 1))
        d = plane.signed_distance(np.array([[0, 0, 0], [3, 4, 1], [0, 0, 5]]))
        np.testing.assert_allclose(d, [-1.0, 0.0, 4.0])

    def test_from_points(self):
        plane = Plane.from_points((0, 0, 2), (1, 0, 2), (0, 1, 2))
        np.testing.assert_allclose(plane.normal, (0, 0, 1))
        assert plane.signed_distance((5, -3, 2)) == pytest.approx(0.0)

    def test_from_collinear_points_raises(self):
        with pytest.raises(ValueError):
            Plane.from_points((0, 0, 0), (1, 1, 1), (2, 2, 2))
