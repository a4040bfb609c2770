"""
Fuzzy membership functions shared by every scoring strategy.

A membership function maps a crisp input to a degree of truth in ``[0, 1]``
for a qualitative label such as "low budget" or "near".  Both shapes guard
their degenerate edges explicitly, so a flat rising edge (``a == b``) or a
flat falling edge (``b == c`` / ``c == d``) never divides by zero.
"""
from __future__ import annotations

import math
from typing import Any, Callable

MembershipFn = Callable[[float], float]


def _as_float(x: Any) -> float:
    """Coerce *x* to a float, or ``0.0`` when that is not possible.

    Infinities are kept: they lie outside every support and get degree 0.
    """
    if isinstance(x, bool):
        return float(x)
    try:
        value = float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(value) else value


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def triangular(x: float, a: float, b: float, c: float) -> float:
    """Triangle rising from ``a`` to a peak of 1 at ``b`` and falling to ``c``.

    The degree is exactly 0 at and beyond either support edge.
    """
    x = _as_float(x)
    if x <= a or x >= c:
        return 0.0
    if x == b:
        return 1.0
    if x < b:
        return (x - a) / (b - a)
    return (c - x) / (c - b)


def trapezoidal(x: float, a: float, b: float, c: float, d: float) -> float:
    """Trapezoid rising over ``[a, b]``, holding 1 on ``[b, c]``, falling over ``[c, d]``.

    A flat edge is a shoulder: with ``a == b`` the degree is 1 from ``a``
    onwards, with ``c == d`` it stays 1 up to and including ``d``.
    """
    x = _as_float(x)
    if x < a or x > d:
        return 0.0
    if b <= x <= c:
        return 1.0
    if x < b:
        # a < b here, otherwise x would sit on the plateau
        return (x - a) / (b - a)
    return (d - x) / (d - c)


def triangle(a: float, b: float, c: float) -> MembershipFn:
    """Return a one-argument triangular membership function."""
    return lambda x: triangular(x, a, b, c)


def trapezoid(a: float, b: float, c: float, d: float) -> MembershipFn:
    """Return a one-argument trapezoidal membership function."""
    return lambda x: trapezoidal(x, a, b, c, d)
