"""
Recovery Reports
Turn a RecoveryResult into text lines or a JSON-ready dict.

The core never prints. Everything a person or another program sees
about a recovery is rendered here from the structured result.
"""

from polyrecover.recovery import RecoveryResult


def format_report(result: RecoveryResult) -> list[str]:
    """Render the human-readable report, one string per line."""
    k = result.threshold
    lines = [
        f"Total roots provided: {result.declared_total}",
        f"Minimum roots required: {k}",
        f"Polynomial degree: {result.degree}",
        "",
    ]

    for point in result.points:
        if point.base is not None:
            lines.append(f'Point {point.x}: base={point.base}, encoded="{point.encoded}", decoded={point.y}')
        else:
            lines.append(f"Point {point.x}: decoded={point.y}")

    primary = result.selections[0]
    lines.append("")
    lines.append(f"Using {primary.label} {k} points for interpolation:")
    for point in primary.points:
        lines.append(f"  ({point.x}, {point.y})")

    lines.append("")
    lines.append(f"The secret (constant term) is: {result.primary}")

    if len(result.selections) > 1:
        lines.append("")
        lines.append("Verification with different point sets:")
        for selection in result.selections[1:]:
            lines.append(f"  Using {selection.label} {k} points: {selection.secret}")
        if not result.consistent:
            lines.append("  WARNING: verification secrets differ from the primary secret")

    return lines


def to_dict(result: RecoveryResult) -> dict:
    """
    Summarize a result for JSON output.

    Decoded values and secrets are written as decimal strings so they
    survive JSON readers that parse numbers as doubles.
    """
    return {
        "n": result.declared_total,
        "k": result.threshold,
        "degree": result.degree,
        "points": [
            {"x": p.x, "y": str(p.y), "base": p.base, "encoded": p.encoded}
            for p in result.points
        ],
        "secret": str(result.primary),
        "selections": [
            {"label": s.label, "xs": s.xs, "secret": str(s.secret)}
            for s in result.selections
        ],
        "consistent": result.consistent,
    }
