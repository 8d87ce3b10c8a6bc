"""
Points and Documents
The data model: sample points, the ordered point set, and the input document.

A document looks like:

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

Every key except "keys" is a point identifier and doubles as its x value.
The entry's value, decoded in the entry's base, is the y value.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from polyrecover import radix
from polyrecover.errors import DuplicateCoordinate, MalformedDigit, MalformedDocument

KEYS_FIELD = "keys"


@dataclass(frozen=True)
class Point:
    """A single sample point on the hidden polynomial."""
    x: int
    y: int
    # Where y came from, kept for reporting only
    base: int | None = field(default=None, compare=False)
    encoded: str | None = field(default=None, compare=False)

    def to_entry(self, base: int | None = None) -> dict:
        """Serialize to a document entry, re-encoding y in the given base."""
        base = base or self.base or 10
        return {"base": str(base), "value": radix.encode(self.y, base)}

    @classmethod
    def from_entry(cls, identifier: str, entry: Mapping) -> "Point":
        """
        Build a point from one document entry.

        Raises:
            MalformedDocument: If the identifier, base or value is missing or invalid.
            MalformedDigit: If the value holds a digit invalid for the base.
        """
        x = _parse_identifier(identifier)
        if not isinstance(entry, Mapping):
            raise MalformedDocument("entry", "expected an object", identifier)

        if "base" not in entry:
            raise MalformedDocument("base", "missing", identifier)
        base = _parse_int(entry["base"], "base", identifier)
        if not radix.MIN_BASE <= base <= radix.MAX_BASE:
            raise MalformedDocument(
                "base", f"must be between {radix.MIN_BASE} and {radix.MAX_BASE}, got {base}", identifier
            )

        if "value" not in entry:
            raise MalformedDocument("value", "missing", identifier)
        encoded = entry["value"]
        if not isinstance(encoded, str) or not encoded:
            raise MalformedDocument("value", "expected a non-empty digit string", identifier)

        try:
            y = radix.decode(encoded, base)
        except MalformedDigit as e:
            raise e.for_point(identifier) from e

        return cls(x=x, y=y, base=base, encoded=encoded)


class PointSet:
    """
    Points ordered by ascending x. Read-only once built.

    Positional selections (first k, last k, a window) depend on this
    order, so it is fixed here rather than left to document key order.

    Raises:
        DuplicateCoordinate: If two points share an x value.
    """

    def __init__(self, points):
        ordered = sorted(points, key=lambda p: p.x)
        for prev, point in zip(ordered, ordered[1:]):
            if prev.x == point.x:
                raise DuplicateCoordinate(point.x)
        self._points = tuple(ordered)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __eq__(self, other):
        if not isinstance(other, PointSet):
            return NotImplemented
        return self._points == other._points

    def __repr__(self):
        return f"PointSet({list(self._points)!r})"

    @property
    def xs(self) -> list[int]:
        return [p.x for p in self._points]

    def first(self, k: int) -> tuple[Point, ...]:
        return self._points[:k]

    def last(self, k: int) -> tuple[Point, ...]:
        return self._points[len(self._points) - k:]

    def window(self, start: int, k: int) -> tuple[Point, ...]:
        return self._points[start:start + k]


@dataclass(frozen=True)
class Document:
    """A parsed input document."""
    declared_total: int  # n
    threshold: int       # k
    points: PointSet


def _parse_int(raw, field_name: str, identifier: str | None = None) -> int:
    """Accept a JSON integer or a decimal string."""
    if isinstance(raw, bool):
        raise MalformedDocument(field_name, f"expected an integer, got {raw!r}", identifier)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        digits = text[1:] if text.startswith("-") else text
        if digits and all("0" <= c <= "9" for c in digits):
            return int(text)
    raise MalformedDocument(field_name, f"expected an integer, got {raw!r}", identifier)


def _parse_identifier(identifier: str) -> int:
    if not isinstance(identifier, str) or not identifier or not all("0" <= c <= "9" for c in identifier):
        raise MalformedDocument(
            "identifier", "expected a non-negative integer", str(identifier)
        )
    return int(identifier)


def parse_document(document: Mapping) -> Document:
    """
    Parse and validate an input document.

    Args:
        document: The already-deserialized document (e.g. from json.load).

    Returns:
        A Document with the declared total, the threshold and a sorted PointSet.

    Raises:
        MalformedDocument: If keys/n/k are missing or invalid, or k is outside 1..n.
        MalformedDigit: If any value holds an invalid digit for its base.
        DuplicateCoordinate: If two identifiers parse to the same x.
    """
    if not isinstance(document, Mapping):
        raise MalformedDocument("document", "expected an object")
    if KEYS_FIELD not in document:
        raise MalformedDocument(KEYS_FIELD, "missing")

    keys = document[KEYS_FIELD]
    if not isinstance(keys, Mapping):
        raise MalformedDocument(KEYS_FIELD, "expected an object")
    for name in ("n", "k"):
        if name not in keys:
            raise MalformedDocument(f"keys.{name}", "missing")

    n = _parse_int(keys["n"], "keys.n")
    k = _parse_int(keys["k"], "keys.k")
    if n < 1:
        raise MalformedDocument("keys.n", f"must be positive, got {n}")
    if not 1 <= k <= n:
        raise MalformedDocument("keys.k", f"must be between 1 and n={n}, got {k}")

    points = [
        Point.from_entry(identifier, entry)
        for identifier, entry in document.items()
        if identifier != KEYS_FIELD
    ]
    return Document(declared_total=n, threshold=k, points=PointSet(points))


def build_document(points, threshold: int, base: int = 10, declared_total: int | None = None) -> dict:
    """
    Build an input document from points (the inverse of parse_document).

    Args:
        points: Point objects or (x, y) pairs.
        threshold: K, written to keys.k.
        base: Base for every value, or a callable x -> base.
        declared_total: N, written to keys.n. Defaults to the number of points.
    """
    points = [p if isinstance(p, Point) else Point(*p) for p in points]
    document = {
        KEYS_FIELD: {
            "n": len(points) if declared_total is None else declared_total,
            "k": threshold,
        }
    }
    for point in points:
        point_base = base(point.x) if callable(base) else base
        document[str(point.x)] = point.to_entry(point_base)
    return document
