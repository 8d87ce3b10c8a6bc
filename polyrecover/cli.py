"""Command line interface: recover secrets from JSON documents."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from polyrecover.errors import DuplicateCoordinate, MalformedDocument, RecoveryError
from polyrecover.recovery import recover_secret
from polyrecover.report import format_report, to_dict
from polyrecover.samples import SAMPLES

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INCONSISTENT = 2


def _unique_keys(pairs: list[tuple[str, object]]) -> dict:
    """json object hook: a repeated key is an error, not last-one-wins."""
    obj = {}
    for key, value in pairs:
        if key in obj:
            if key and all("0" <= c <= "9" for c in key):
                raise DuplicateCoordinate(int(key))
            raise MalformedDocument(key, "repeated key")
        obj[key] = value
    return obj


def _load(path: str) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f, object_pairs_hook=_unique_keys)


def _sources(paths: list[str]):
    """Yield (title, document loader) pairs. No paths means the built-in samples."""
    if not paths:
        for number, (name, document) in enumerate(SAMPLES.items(), start=1):
            yield f"Test Case {number} ({name})", lambda document=document: document
        return
    for path in paths:
        yield f"Reading from file: {path}", lambda path=path: _load(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyrecover",
        description="Recover the constant term of a polynomial from base-encoded points",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="JSON documents (default: built-in samples)")
    parser.add_argument("--json", action="store_true", help="print a machine-readable report")
    parser.add_argument("--strict", action="store_true", help="exit with status 2 if verifications disagree")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    status = EXIT_OK
    reports = []

    for title, load in _sources(args.files):
        logger.debug("Processing %s", title)
        try:
            document = load()
            result = recover_secret(document)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            print(f"error: {title}: cannot read document: {e}", file=sys.stderr)
            status = EXIT_ERROR
            continue
        except RecoveryError as e:
            print(f"error: {title}: {type(e).__name__}: {e}", file=sys.stderr)
            status = EXIT_ERROR
            continue

        if len(result.points) != result.declared_total:
            logger.warning(
                "%s: document declares n=%d but holds %d points",
                title, result.declared_total, len(result.points),
            )
        if not result.consistent:
            logger.warning(
                "%s: verification secrets %s differ from primary %d",
                title, result.verifications, result.primary,
            )
            if args.strict and status == EXIT_OK:
                status = EXIT_INCONSISTENT

        if args.json:
            reports.append({"source": title, **to_dict(result)})
        else:
            print(f"=== {title} ===")
            for line in format_report(result):
                print(line)
            print()

    if args.json:
        print(json.dumps(reports, indent=2))

    return status


if __name__ == "__main__":
    sys.exit(main())
