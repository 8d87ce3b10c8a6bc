"""
Secret Recovery
Decode a document, pick subsets of k points, and interpolate each one.

Selection policy, over points sorted by x:
  1. first  — the first k points. This is the primary secret.
  2. last   — the last k points. Only when more than k points exist.
  3. middle — k points centered in the set, starting at (count - k) // 2.
              Only when at least k + 2 points exist.

Verification selections never change the primary secret. When the points
are noiseless samples of one degree k-1 polynomial all selections agree;
when they don't, every value is reported and the caller decides.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from polyrecover.errors import InsufficientPoints
from polyrecover.lagrange import interpolate_at_zero
from polyrecover.points import Point, PointSet, parse_document

PRIMARY = "first"
LAST = "last"
MIDDLE = "middle"


@dataclass(frozen=True)
class Selection:
    """One subset of k points and the secret it reconstructs."""
    label: str
    points: tuple[Point, ...]
    secret: int

    @property
    def xs(self) -> list[int]:
        return [p.x for p in self.points]


@dataclass(frozen=True)
class RecoveryResult:
    """Everything a recovery produced. The first selection is the primary."""
    threshold: int
    declared_total: int
    points: PointSet
    selections: tuple[Selection, ...]

    @property
    def primary(self) -> int:
        return self.selections[0].secret

    @property
    def verifications(self) -> list[int]:
        return [s.secret for s in self.selections[1:]]

    @property
    def consistent(self) -> bool:
        """True if every verification agrees with the primary."""
        return all(secret == self.primary for secret in self.verifications)

    @property
    def degree(self) -> int:
        return self.threshold - 1


def select(points: PointSet, k: int) -> list[tuple[str, tuple[Point, ...]]]:
    """
    Apply the selection policy without interpolating.

    Returns:
        (label, points) pairs, primary first.

    Raises:
        ValueError: If k is less than 1.
        InsufficientPoints: If fewer than k points are available.
    """
    if k < 1:
        raise ValueError(f"Threshold must be at least 1, got {k}")

    count = len(points)
    if count < k:
        raise InsufficientPoints(count, k)

    selections = [(PRIMARY, points.first(k))]
    if count > k:
        selections.append((LAST, points.last(k)))
    if count >= k + 2:
        start = (count - k) // 2
        selections.append((MIDDLE, points.window(start, k)))
    return selections


def recover_from_points(points: PointSet, k: int, declared_total: int | None = None) -> RecoveryResult:
    """
    Run every selection over an already-built point set.

    Args:
        points: The sorted point set.
        k: Threshold, the number of points per selection.
        declared_total: N as declared by the document. Defaults to len(points).
    """
    if not isinstance(points, PointSet):
        points = PointSet(points)

    selections = tuple(
        Selection(label=label, points=chosen, secret=interpolate_at_zero(chosen))
        for label, chosen in select(points, k)
    )
    return RecoveryResult(
        threshold=k,
        declared_total=len(points) if declared_total is None else declared_total,
        points=points,
        selections=selections,
    )


def recover_secret(document: Mapping) -> RecoveryResult:
    """
    Recover the secret (constant term) from an input document.

    Args:
        document: Deserialized document with "keys" and one entry per point.

    Returns:
        RecoveryResult with the primary secret and any verification secrets.

    Raises:
        MalformedDocument: If the document structure is invalid.
        MalformedDigit: If a value has a digit invalid for its base.
        DuplicateCoordinate: If two points share an x value.
        InsufficientPoints: If fewer than k points are present.
    """
    parsed = parse_document(document)
    return recover_from_points(parsed.points, parsed.threshold, parsed.declared_total)
