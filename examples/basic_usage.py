"""
polyrecover — Basic Usage Example

Recovers the constant term of a hidden polynomial from base-encoded points,
then shows what happens when the points are not all on one polynomial.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from polyrecover import recover_secret, build_document, MalformedDigit
from polyrecover.lagrange import evaluate
from polyrecover.report import format_report


def main():
    print("=" * 50)
    print("  polyrecover — Polynomial Secret Recovery")
    print("=" * 50)

    # f(x) = 1234 + 56x + 7x^2, sampled at five points in mixed bases
    coefficients = [1234, 56, 7]
    points = [(x, evaluate(coefficients, x)) for x in (1, 2, 4, 7, 9)]
    document = build_document(points, threshold=3, base=lambda x: 2 + x * 3)

    print("\nDocument:")
    for key, entry in document.items():
        print(f"  {key}: {entry}")

    result = recover_secret(document)
    print()
    for line in format_report(result):
        print(line)
    print(f"\nAll selections agree: {result.consistent}")

    # Corrupt one value: the primary is unchanged, the verifications move
    document["9"] = {"base": "10", "value": "1"}
    result = recover_secret(document)
    print("\nAfter corrupting point 9:")
    print(f"  Primary:       {result.primary}")
    print(f"  Verifications: {result.verifications}")
    print(f"  Consistent:    {result.consistent}")

    # An invalid digit is reported with the point it came from
    document["2"] = {"base": "2", "value": "123"}
    try:
        recover_secret(document)
    except MalformedDigit as e:
        print(f"\nRejected: {e}")


if __name__ == "__main__":
    main()
