"""
Lagrange Interpolation
Recover the constant term of the lowest-degree polynomial through a set of points.

For points (x_i, y_i) the value at zero is

    f(0) = sum_i y_i * prod_{j != i} (0 - x_j) / (x_i - x_j)

Each basis term is rational in general, so the whole sum is carried as an
exact Fraction and only rounded once at the end. Genuine samples of an
integer-coefficient polynomial sum to an integer and the rounding is a no-op.
"""

import math
from fractions import Fraction

from polyrecover.errors import DuplicateCoordinate, InsufficientPoints
from polyrecover.points import Point

_HALF = Fraction(1, 2)


def _coordinates(points) -> list[tuple[int, int]]:
    """Accept Point objects or plain (x, y) pairs of any sequence type."""
    pairs = []
    for point in points:
        if isinstance(point, Point):
            x, y = point.x, point.y
        else:
            x, y = point
        pairs.append((x, y))
    return pairs


def _check_distinct(pairs: list[tuple[int, int]]) -> None:
    seen = set()
    for x, _ in pairs:
        if x in seen:
            raise DuplicateCoordinate(x)
        seen.add(x)


def round_half_up(value: Fraction) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + _HALF)


def interpolate_exact(points) -> Fraction:
    """
    Evaluate the interpolating polynomial at x=0 without rounding.

    Args:
        points: Points with distinct x values, every one of them is used.

    Returns:
        The exact rational value f(0).

    Raises:
        InsufficientPoints: If no points are given.
        DuplicateCoordinate: If two points share an x value.
    """
    pairs = _coordinates(points)
    if not pairs:
        raise InsufficientPoints(0, 1)
    _check_distinct(pairs)

    total = Fraction(0)
    for i, (xi, yi) in enumerate(pairs):
        # Basis polynomial L_i evaluated at zero
        numerator = 1
        denominator = 1
        for j, (xj, _) in enumerate(pairs):
            if i == j:
                continue
            numerator *= -xj
            denominator *= xi - xj

        total += Fraction(yi * numerator, denominator)

    return total


def interpolate_at_zero(points) -> int:
    """
    Constant term of the polynomial through the given points.

    The caller picks the subset: exactly k points determine a polynomial
    of degree k-1. The exact sum is rounded half up.
    """
    return round_half_up(interpolate_exact(points))


def evaluate(coefficients: list[int], x: int) -> int:
    """Evaluate a polynomial at x. coefficients[0] is the constant term."""
    result = 0
    for coeff in reversed(coefficients):
        result = result * x + coeff
    return result
