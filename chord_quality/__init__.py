"""Chord quality suffix parser.

This library parses the quality part of a chord symbol (everything after
the root, e.g. "maj7#11 add9") into an ordered tuple of quality members
that a formula builder can consume.

Examples
--------
>>> from chord_quality import parse_quality, format_quality

>>> members = parse_quality("m7b5")
>>> [m.kind for m in members]
['modifier', 'extension', 'alteration']
>>> format_quality(members)
'm7b5'

>>> # Malformed suffixes fail as a whole
>>> from chord_quality import try_parse_quality
>>> try_parse_quality("omit") is None
True
"""

from chord_quality.builder import (
    FormulaBuilder,
    SuffixFormatter,
    apply_member,
    apply_members,
    format_quality,
)
from chord_quality.models import (
    Accidental,
    AddMember,
    AltMember,
    ExtensionMember,
    Modifier,
    ModifierMember,
    OmitMember,
    QualityMember,
    SuspendedMember,
    SusKind,
)
from chord_quality.parser import QualityParseError, parse_quality, try_parse_quality

__all__ = [
    "Accidental",
    "AddMember",
    "AltMember",
    "ExtensionMember",
    "FormulaBuilder",
    "Modifier",
    "ModifierMember",
    "OmitMember",
    "QualityMember",
    "QualityParseError",
    "SuffixFormatter",
    "SusKind",
    "SuspendedMember",
    "apply_member",
    "apply_members",
    "format_quality",
    "parse_quality",
    "try_parse_quality",
]
