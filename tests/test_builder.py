"""Tests for the formula builder interface and suffix formatter."""

import pytest

from chord_quality import (
    Accidental,
    AddMember,
    AltMember,
    ExtensionMember,
    Modifier,
    ModifierMember,
    OmitMember,
    SuffixFormatter,
    SuspendedMember,
    SusKind,
    apply_member,
    apply_members,
    format_quality,
    parse_quality,
)


class RecordingBuilder:
    """Builder that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def build_extension(self, degree, accidental):
        self.calls.append(("extension", degree, accidental))

    def build_alteration(self, degree, accidental):
        self.calls.append(("alteration", degree, accidental))

    def build_modifier(self, modifier):
        self.calls.append(("modifier", modifier))

    def build_add(self, degree, accidental):
        self.calls.append(("add", degree, accidental))

    def build_omit(self, degree, accidental):
        self.calls.append(("omit", degree, accidental))

    def build_sus(self, sus):
        self.calls.append(("sus", sus))


class TestApplyMember:
    """Dispatch of members to builder methods."""

    @pytest.mark.parametrize(
        ("member", "call"),
        [
            (ExtensionMember(7), ("extension", 7, Accidental.NATURAL)),
            (AltMember(5, Accidental.FLAT), ("alteration", 5, Accidental.FLAT)),
            (ModifierMember(Modifier.MINOR), ("modifier", Modifier.MINOR)),
            (AddMember(9), ("add", 9, Accidental.NATURAL)),
            (OmitMember(3, Accidental.FLAT), ("omit", 3, Accidental.FLAT)),
            (SuspendedMember(SusKind.SUS4), ("sus", SusKind.SUS4)),
        ],
    )
    def test_dispatch(self, member, call) -> None:
        """Each member kind reaches exactly its builder method."""
        builder = RecordingBuilder()
        apply_member(member, builder)
        assert builder.calls == [call]

    def test_unknown_member(self) -> None:
        """Non-members are rejected."""
        with pytest.raises(TypeError, match="Not a quality member"):
            apply_member("maj7", RecordingBuilder())  # type: ignore[arg-type]

    def test_apply_members_preserves_order(self) -> None:
        """Members are applied in parse order."""
        builder = RecordingBuilder()
        apply_members(parse_quality("m7b5 add11"), builder)
        assert [c[0] for c in builder.calls] == ["modifier", "extension", "alteration", "add"]

    def test_parser_never_calls_builder(self) -> None:
        """Parsing alone produces plain data."""
        members = parse_quality("maj7")
        builder = RecordingBuilder()
        assert builder.calls == []
        apply_members(members, builder)
        assert len(builder.calls) == 2


class TestSuffixFormatter:
    """Canonical rendering."""

    @pytest.mark.parametrize(
        ("text", "canonical"),
        [
            ("", ""),
            ("maj7", "maj7"),
            ("M7", "maj7"),
            ("Maj7", "maj7"),
            ("min7", "m7"),
            ("m7b5", "m7b5"),
            ("-7", "dim7"),
            ("o7", "dim7"),
            ("+", "aug"),
            ("7 9 13", "7913"),
            ("dim bb7", "dimbb7"),
            ("add b 13", "addb13"),
            ("OMIT 5", "omit5"),
            ("Sus 4", "sus4"),
            ("maj7 #11 add9 omit5 sus4", "maj7#11add9omit5sus4"),
        ],
    )
    def test_canonical(self, text: str, canonical: str) -> None:
        """Suffixes render in canonical spelling."""
        assert format_quality(parse_quality(text)) == canonical

    def test_spaced(self) -> None:
        """Spaced rendering separates members."""
        assert format_quality(parse_quality("maj7#11add9"), spaced=True) == "maj 7 #11 add9"

    @pytest.mark.parametrize(
        "text",
        ["m7b5", "maj7#11 add9 omit5 sus4", "o7", "mmaj7", "9##11", "13#11b9", "7 m 9", "sus2sus4", "oomit3"],
    )
    def test_canonical_reparses(self, text: str) -> None:
        """Canonical text parses back to the same members."""
        members = parse_quality(text)
        assert parse_quality(format_quality(members)) == members
        assert parse_quality(format_quality(members, spaced=True)) == members

    def test_formatter_accumulates(self) -> None:
        """A formatter can receive several member sequences."""
        formatter = SuffixFormatter()
        apply_members(parse_quality("m7"), formatter)
        apply_members(parse_quality("add9"), formatter)
        assert formatter.parts == ["m", "7", "add9"]
        assert formatter.text == "m7add9"
