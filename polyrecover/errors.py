"""
Recovery Errors
Every way a recovery can fail, as a distinct exception type.

All errors are fatal to the computation they occur in. There is no partial
result: a document either yields exact integers or raises one of these.
They subclass ValueError, so callers that already catch ValueError keep working.
"""


class RecoveryError(ValueError):
    """Base class for all recovery failures."""


class MalformedDigit(RecoveryError):
    """A character in an encoded value is not a valid digit for its base."""

    def __init__(self, character: str, position: int, base: int, identifier: str | None = None):
        self.character = character
        self.position = position
        self.base = base
        self.identifier = identifier

        message = f"Invalid digit {character!r} at position {position} for base {base}"
        if identifier is not None:
            message = f"Point {identifier}: {message}"
        super().__init__(message)

    def for_point(self, identifier: str) -> "MalformedDigit":
        """Return a copy of this error that names the offending point."""
        return MalformedDigit(self.character, self.position, self.base, identifier)


class DuplicateCoordinate(RecoveryError):
    """Two points share the same x value."""

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate x coordinate: {x}")


class InsufficientPoints(RecoveryError):
    """Fewer usable points than the threshold requires."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(f"Need at least {required} points, got {available}")


class MalformedDocument(RecoveryError):
    """The input document is missing a field or holds an invalid one."""

    def __init__(self, field: str, reason: str, identifier: str | None = None):
        self.field = field
        self.reason = reason
        self.identifier = identifier

        where = f"point {identifier!r} field {field!r}" if identifier is not None else f"field {field!r}"
        super().__init__(f"Malformed document, {where}: {reason}")
