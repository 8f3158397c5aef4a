"""Command line interface for parsing chord quality suffixes.

Usage
-----
    chord-quality "maj7#11" "m7b5"
    printf 'sus4\\nadd9\\n' | chord-quality --canonical
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

from chord_quality.builder import format_quality
from chord_quality.lexer import tokenize
from chord_quality.parser import QualityParseError, parse_quality

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def describe(suffix: str, *, tokens: bool = False, canonical: bool = False) -> dict[str, object]:
    """Parse one suffix into a JSON-compatible result record.

    Parameters
    ----------
    suffix : str
        The quality suffix to parse.
    tokens : bool
        Include the lexer tokens.
    canonical : bool
        Include the canonical re-rendering of the parsed members.

    Returns
    -------
    dict[str, object]
        ``{"suffix", "ok", "members"}`` on success, ``{"suffix", "ok",
        "error"}`` on failure.

    Examples
    --------
    >>> describe("sus4")["members"]
    [{'kind': 'sus', 'sus': 4}]
    >>> describe("sus3")["ok"]
    False
    """
    record: dict[str, object] = {"suffix": suffix}
    if tokens:
        try:
            record["tokens"] = [
                {"type": token.type.name.lower(), "value": token.value} for token in tokenize(suffix)
            ]
        except ValueError as e:
            record["tokens"] = None
            logger.info("Could not tokenize %r: %s", suffix, e)

    try:
        members = parse_quality(suffix)
    except QualityParseError as e:
        record["ok"] = False
        record["error"] = e.reason
        return record

    record["ok"] = True
    record["members"] = [member.to_dict() for member in members]
    if canonical:
        record["canonical"] = format_quality(members)
    return record


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-quality",
        description="Parse chord quality suffixes and print the members as JSON",
    )
    parser.add_argument(
        "suffixes",
        nargs="*",
        help="Quality suffixes to parse (read one per line from stdin if omitted)",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Include lexer tokens in the output",
    )
    parser.add_argument(
        "--canonical",
        action="store_true",
        help="Include the canonical spelling of each parsed suffix",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parse failures",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Returns
    -------
    int
        0 if every suffix parsed, 1 otherwise.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    suffixes = args.suffixes
    if not suffixes:
        suffixes = [line.rstrip("\n") for line in sys.stdin]

    records = [describe(s, tokens=args.tokens, canonical=args.canonical) for s in suffixes]
    print(json.dumps(records, indent=args.indent))

    failed = sum(1 for r in records if not r["ok"])
    if failed:
        logger.warning("%d of %d suffixes failed to parse", failed, len(records))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
