#!/usr/bin/env python3
"""Generate a catalogue of chord quality suffixes with their parsed members and write to JSON."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from chord_quality import format_quality, parse_quality
from chord_quality.catalogue import MAX_ALTERATIONS, generate_quality_suffixes

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class QualityEntry:
    """A single suffix entry in the catalogue."""

    suffix: str
    canonical: str
    members: list[dict[str, object]] = field(default_factory=list)


def build_entries(suffixes: Iterable[str]) -> list[QualityEntry]:
    """Parse each suffix into a catalogue entry."""
    entries = []
    for suffix in suffixes:
        members = parse_quality(suffix)
        entries.append(
            QualityEntry(
                suffix=suffix,
                canonical=format_quality(members),
                members=[m.to_dict() for m in members],
            )
        )
    return entries


def write_json(path: Path, entries: list[QualityEntry]) -> None:
    """Write catalogue entries to a JSON file."""
    payload = {
        "schema": "chord-quality-catalogue/v1",
        "count": len(entries),
        "qualities": [asdict(e) for e in entries],
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, sort_keys=False), encoding="utf-8")


def main() -> None:
    """Generate the quality catalogue and write it to JSON."""
    parser = argparse.ArgumentParser(description="Generate a chord quality suffix catalogue")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).parent.parent / "testdata" / "quality_catalogue.json",
        help="Path of the JSON file to write",
    )
    parser.add_argument(
        "--max-alterations",
        type=int,
        default=MAX_ALTERATIONS,
        help=f"Maximum alterations per suffix (default: {MAX_ALTERATIONS})",
    )
    args = parser.parse_args()

    suffixes = generate_quality_suffixes(max_alterations=args.max_alterations)
    entries = build_entries(suffixes)
    write_json(args.output, entries)
    print(f"Wrote {len(entries)} quality suffixes to {args.output.resolve()}")


if __name__ == "__main__":
    main()
