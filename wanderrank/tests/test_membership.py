import math

import pytest

from wanderrank.scoring.membership import clamp01, trapezoid, trapezoidal, triangle, triangular


def test_triangular_peak_and_edges():
    assert triangular(0.5, 0.3, 0.5, 0.7) == 1.0
    assert triangular(0.3, 0.3, 0.5, 0.7) == 0.0
    assert triangular(0.7, 0.3, 0.5, 0.7) == 0.0


def test_triangular_linear_sides():
    assert triangular(0.4, 0.3, 0.5, 0.7) == pytest.approx(0.5)
    assert triangular(0.65, 0.3, 0.5, 0.7) == pytest.approx(0.25)


def test_triangular_outside_support_is_zero():
    assert triangular(-1, 0, 1, 2) == 0.0
    assert triangular(5, 0, 1, 2) == 0.0


def test_triangular_degenerate_edges_do_not_divide_by_zero():
    # a == b: only the falling side is reachable
    assert triangular(0.1, 0, 0, 0.2) == pytest.approx(0.5)
    assert triangular(0, 0, 0, 0.2) == 0.0
    # b == c
    assert triangular(0.1, 0, 0.2, 0.2) == pytest.approx(0.5)
    assert triangular(0.2, 0, 0.2, 0.2) == 0.0


def test_trapezoidal_plateau_and_edges():
    assert trapezoidal(5, 0, 2, 8, 10) == 1.0
    assert trapezoidal(1, 0, 2, 8, 10) == pytest.approx(0.5)
    assert trapezoidal(9.5, 0, 2, 8, 10) == pytest.approx(0.25)
    assert trapezoidal(0, 0, 2, 8, 10) == 0.0
    assert trapezoidal(10, 0, 2, 8, 10) == 0.0
    assert trapezoidal(11, 0, 2, 8, 10) == 0.0


def test_trapezoidal_flat_edges_are_shoulders():
    assert trapezoidal(0, 0, 0, 1500, 3000) == 1.0
    assert trapezoidal(12000, 6000, 9000, 12000, 12000) == 1.0
    assert trapezoidal(1.0, 0.6, 0.85, 1, 1) == 1.0
    assert trapezoidal(12001, 6000, 9000, 12000, 12000) == 0.0


def test_degenerate_shapes_never_return_nan():
    for x in (0, 0.2, 0.45, 1):
        assert not math.isnan(trapezoidal(x, 0, 0.2, 0.2, 0.45))
        assert not math.isnan(triangular(x, 0.2, 0.2, 0.2))


def test_non_numeric_input_is_treated_as_zero():
    assert trapezoidal(None, 0, 0, 1, 2) == 1.0
    assert triangular("abc", 0, 1, 2) == 0.0
    assert triangular(float("nan"), -1, 0, 1) == 1.0


def test_infinite_and_oversized_inputs_lie_outside_support():
    assert trapezoidal(float("inf"), 0, 0, 0.8, 1.6) == 0.0
    assert trapezoidal(float("-inf"), 0, 0, 0.8, 1.6) == 0.0
    assert triangular(10**400, 0, 1, 2) == 0.0
    assert trapezoidal(-(10**400), 0, 0, 1, 2) == 0.0


def test_factories_match_functions():
    tri = triangle(1, 2.5, 4.5)
    trap = trapezoid(0, 0, 0.8, 1.6)
    for x in (0, 0.5, 1.2, 2.5, 4, 9):
        assert tri(x) == triangular(x, 1, 2.5, 4.5)
        assert trap(x) == trapezoidal(x, 0, 0, 0.8, 1.6)


def test_clamp01():
    assert clamp01(-0.5) == 0.0
    assert clamp01(0.3) == 0.3
    assert clamp01(1.7) == 1.0
