"""
Tests for exact Lagrange interpolation at x=0.
"""

import itertools
import random
import sys
from fractions import Fraction
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from polyrecover.lagrange import interpolate_at_zero, interpolate_exact, evaluate, round_half_up
from polyrecover.points import Point
from polyrecover.errors import DuplicateCoordinate, InsufficientPoints


def test_quadratic_constant_term():
    """f(x) = x^2 + 3 through (1,4) (2,7) (3,12)."""
    print("Testing quadratic constant term...", end=" ")
    assert interpolate_at_zero([(1, 4), (2, 7), (3, 12)]) == 3
    assert interpolate_at_zero([(2, 7), (3, 12), (6, 39)]) == 3
    assert interpolate_at_zero([Point(1, 4), Point(3, 12), Point(6, 39)]) == 3
    print("PASS")


def test_single_point_is_constant():
    print("Testing single point...", end=" ")
    assert interpolate_at_zero([(5, 42)]) == 42
    assert interpolate_exact([(5, 42)]) == Fraction(42)
    print("PASS")


def test_random_polynomials_exact():
    """Test any d+1 distinct samples recover the exact constant term."""
    print("Testing random polynomials (exact)...", end=" ")
    rng = random.Random(2024)
    for degree in range(0, 9):
        coefficients = [rng.randrange(-10 ** 20, 10 ** 20) for _ in range(degree + 1)]
        xs = rng.sample(range(1, 60), degree + 1)
        points = [(x, evaluate(coefficients, x)) for x in xs]

        exact = interpolate_exact(points)
        assert exact.denominator == 1, f"Expected an integer sum for degree {degree}"
        assert exact == coefficients[0]
        assert interpolate_at_zero(points) == coefficients[0]
    print("PASS")


def test_every_subset_agrees():
    """Test every k-subset of exact samples recovers the same constant."""
    print("Testing all subsets agree...", end=" ")
    coefficients = [2 ** 80 + 17, 3 ** 40, 5, 2 ** 61 - 1]
    points = [(x, evaluate(coefficients, x)) for x in range(1, 8)]

    combinations_tested = 0
    for combo in itertools.combinations(points, 4):
        assert interpolate_at_zero(combo) == coefficients[0]
        combinations_tested += 1

    # 7 choose 4 = 35 combinations
    assert combinations_tested == 35
    print(f"PASS ({combinations_tested} combinations)")


def test_large_values_beyond_float_precision():
    """Test values far past 2^53 stay exact."""
    print("Testing precision beyond floats...", end=" ")
    secret = 10 ** 30 + 1
    coefficients = [secret, 10 ** 25, 7 * 10 ** 22]
    points = [(x, evaluate(coefficients, x)) for x in (3, 11, 29)]
    assert interpolate_at_zero(points) == secret
    print("PASS")


def test_rational_intermediates():
    """Test non-integer basis weights are carried exactly."""
    print("Testing rational intermediates...", end=" ")
    # f(x) = (x^2 + x) / 2 + 5 is integer-valued with rational coefficients
    points = [(x, (x * x + x) // 2 + 5) for x in (1, 2, 3)]
    assert interpolate_exact(points) == Fraction(5)
    assert interpolate_at_zero(points) == 5

    # A line through (1, 1) and (3, 2) crosses zero at 1/2
    assert interpolate_exact([(1, 1), (3, 2)]) == Fraction(1, 2)
    print("PASS")


def test_rounding_half_up():
    """Test ties round toward positive infinity."""
    print("Testing rounding policy...", end=" ")
    assert round_half_up(Fraction(1, 2)) == 1
    assert round_half_up(Fraction(-1, 2)) == 0
    assert round_half_up(Fraction(5, 2)) == 3
    assert round_half_up(Fraction(-5, 2)) == -2
    assert round_half_up(Fraction(7, 3)) == 2
    assert round_half_up(Fraction(-7, 3)) == -2

    assert interpolate_at_zero([(1, 1), (3, 2)]) == 1     # +1/2
    assert interpolate_at_zero([(1, -1), (3, -2)]) == 0   # -1/2
    print("PASS")


def test_list_pairs_accepted():
    """Test [x, y] lists, as json.load produces them, work like tuples."""
    print("Testing list pairs...", end=" ")
    assert interpolate_at_zero([[1, 4], [2, 7], [3, 12]]) == 3
    assert interpolate_exact([[1, 1], (3, 2)]) == Fraction(1, 2)

    try:
        interpolate_at_zero([[1, 4], [1, 5]])
        raise AssertionError("should have raised DuplicateCoordinate")
    except DuplicateCoordinate:
        pass
    print("PASS")


def test_duplicate_x_rejected():
    print("Testing duplicate x rejection...", end=" ")
    try:
        interpolate_at_zero([(1, 4), (2, 7), (1, 5)])
        raise AssertionError("should have raised DuplicateCoordinate")
    except DuplicateCoordinate as e:
        assert e.x == 1

    try:
        interpolate_exact([Point(3, 1), Point(3, 1)])
        raise AssertionError("should have raised DuplicateCoordinate")
    except DuplicateCoordinate:
        pass
    print("PASS")


def test_empty_points_rejected():
    print("Testing empty input...", end=" ")
    try:
        interpolate_at_zero([])
        raise AssertionError("should have raised InsufficientPoints")
    except InsufficientPoints as e:
        assert e.available == 0
    print("PASS")


def test_evaluate():
    print("Testing polynomial evaluation...", end=" ")
    assert evaluate([3, 0, 1], 6) == 39
    assert evaluate([3, 0, 1], 0) == 3
    assert evaluate([], 5) == 0
    assert evaluate([1, 1, 1, 1], 2) == 15
    print("PASS")


def main():
    print("=" * 50)
    print("  Lagrange Interpolation Tests")
    print("=" * 50)
    print()

    tests = [
        test_quadratic_constant_term,
        test_single_point_is_constant,
        test_random_polynomials_exact,
        test_every_subset_agrees,
        test_large_values_beyond_float_precision,
        test_rational_intermediates,
        test_rounding_half_up,
        test_list_pairs_accepted,
        test_duplicate_x_rejected,
        test_empty_points_rejected,
        test_evaluate,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"FAIL: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print()
    print(f"Results: {passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
