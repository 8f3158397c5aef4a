"""Formula builder interface for quality members.

Quality members are plain data. A consumer that turns them into something
else (intervals, a pitch-class set, normalized text) implements
``FormulaBuilder`` and feeds members to it with ``apply_members``.

``SuffixFormatter`` is the builder shipped with this package: it renders
members back into canonical suffix text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from chord_quality.models import (
    Accidental,
    AddMember,
    AltMember,
    ExtensionMember,
    Modifier,
    ModifierMember,
    OmitMember,
    SuspendedMember,
    SusKind,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_quality.models import QualityMember


class FormulaBuilder(Protocol):
    """Receiver for quality members, one method per member kind."""

    def build_extension(self, degree: int, accidental: Accidental) -> None: ...

    def build_alteration(self, degree: int, accidental: Accidental) -> None: ...

    def build_modifier(self, modifier: Modifier) -> None: ...

    def build_add(self, degree: int, accidental: Accidental) -> None: ...

    def build_omit(self, degree: int, accidental: Accidental) -> None: ...

    def build_sus(self, sus: SusKind) -> None: ...


def apply_member(member: QualityMember, builder: FormulaBuilder) -> None:
    """Dispatch one quality member to the matching builder method.

    Parameters
    ----------
    member : QualityMember
        The member to apply.
    builder : FormulaBuilder
        The receiving builder.

    Raises
    ------
    TypeError
        If ``member`` is not a quality member.
    """
    if isinstance(member, ExtensionMember):
        builder.build_extension(member.degree, member.accidental)
    elif isinstance(member, AltMember):
        builder.build_alteration(member.degree, member.accidental)
    elif isinstance(member, ModifierMember):
        builder.build_modifier(member.modifier)
    elif isinstance(member, AddMember):
        builder.build_add(member.degree, member.accidental)
    elif isinstance(member, OmitMember):
        builder.build_omit(member.degree, member.accidental)
    elif isinstance(member, SuspendedMember):
        builder.build_sus(member.sus)
    else:
        msg = f"Not a quality member: {member!r}"
        raise TypeError(msg)


def apply_members(members: Iterable[QualityMember], builder: FormulaBuilder) -> None:
    """Apply quality members to a builder in order."""
    for member in members:
        apply_member(member, builder)


# Canonical spelling of each modifier
MODIFIER_SYMBOLS: dict[Modifier, str] = {
    Modifier.MAJOR: "maj",
    Modifier.MINOR: "m",
    Modifier.DIMINISHED: "dim",
    Modifier.AUGMENTED: "aug",
}


class SuffixFormatter:
    """Builder that renders quality members as canonical suffix text.

    Parameters
    ----------
    spaced : bool
        Separate members with a space instead of concatenating them.

    Examples
    --------
    >>> from chord_quality.parser import parse_quality
    >>> formatter = SuffixFormatter()
    >>> apply_members(parse_quality("Maj 7 #11"), formatter)
    >>> formatter.text
    'maj7#11'
    """

    def __init__(self, *, spaced: bool = False) -> None:
        self.spaced = spaced
        self.parts: list[str] = []

    @property
    def text(self) -> str:
        separator = " " if self.spaced else ""
        return separator.join(self.parts)

    def build_extension(self, degree: int, accidental: Accidental) -> None:
        self.parts.append(f"{accidental.symbol}{degree}")

    def build_alteration(self, degree: int, accidental: Accidental) -> None:
        self.parts.append(f"{accidental.symbol}{degree}")

    def build_modifier(self, modifier: Modifier) -> None:
        self.parts.append(MODIFIER_SYMBOLS[modifier])

    def build_add(self, degree: int, accidental: Accidental) -> None:
        self.parts.append(f"add{accidental.symbol}{degree}")

    def build_omit(self, degree: int, accidental: Accidental) -> None:
        self.parts.append(f"omit{accidental.symbol}{degree}")

    def build_sus(self, sus: SusKind) -> None:
        self.parts.append(f"sus{int(sus)}")


def format_quality(members: Iterable[QualityMember], *, spaced: bool = False) -> str:
    """Render quality members as canonical suffix text.

    Parameters
    ----------
    members : Iterable[QualityMember]
        Members as returned by ``parse_quality``.
    spaced : bool
        Separate members with a space.

    Returns
    -------
    str
        Suffix text that parses back to the same members.

    Examples
    --------
    >>> from chord_quality.parser import parse_quality
    >>> format_quality(parse_quality("MIN 7 b 5"))
    'm7b5'
    >>> format_quality(parse_quality("-7 add 9"), spaced=True)
    'dim 7 add9'
    """
    formatter = SuffixFormatter(spaced=spaced)
    apply_members(members, formatter)
    return formatter.text
