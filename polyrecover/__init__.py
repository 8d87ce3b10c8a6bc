"""
polyrecover — Polynomial Secret Recovery
Recover the constant term of a hidden polynomial from base-encoded sample points.

Two steps, composed in order:
1. Radix decoding — each point's value is a digit string in base 2..36
2. Lagrange interpolation — exact rational arithmetic, evaluated at x=0

Arithmetic is over the integers and rationals. This is not cryptographic
secret sharing: there is no finite field and every input is trusted.

Usage:
    from polyrecover import recover_secret
    result = recover_secret(document)
    result.primary, result.verifications
"""

from polyrecover.errors import (
    RecoveryError,
    MalformedDigit,
    DuplicateCoordinate,
    InsufficientPoints,
    MalformedDocument,
)
from polyrecover.radix import decode, encode
from polyrecover.lagrange import interpolate_at_zero, interpolate_exact
from polyrecover.points import Point, PointSet, parse_document, build_document
from polyrecover.recovery import recover_secret, recover_from_points, RecoveryResult, Selection

__version__ = "0.1.0"
__all__ = [
    "RecoveryError",
    "MalformedDigit",
    "DuplicateCoordinate",
    "InsufficientPoints",
    "MalformedDocument",
    "decode",
    "encode",
    "interpolate_at_zero",
    "interpolate_exact",
    "Point",
    "PointSet",
    "parse_document",
    "build_document",
    "recover_secret",
    "recover_from_points",
    "RecoveryResult",
    "Selection",
]
