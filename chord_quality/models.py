"""Quality member data models for chord-quality.

This module defines the immutable descriptors produced by the quality
parser, together with the value domains (accidentals, modifiers, sus
kinds, valid degrees) the parser checks against.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar


class Accidental(IntEnum):
    """Signed accidental magnitude applied to a scale degree."""

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def symbol(self) -> str:
        """Lead-sheet spelling of the accidental.

        Examples
        --------
        >>> Accidental.FLAT.symbol
        'b'
        >>> Accidental.DOUBLE_SHARP.symbol
        '##'
        """
        if self < 0:
            return "b" * -self
        return "#" * self


class Modifier(Enum):
    """Triad quality modifier."""

    MAJOR = "maj"
    MINOR = "min"
    DIMINISHED = "dim"
    AUGMENTED = "aug"


class SusKind(IntEnum):
    """Degree replacing the third in a suspended chord."""

    SUS2 = 2
    SUS4 = 4


# Degrees that may be stacked as extensions (5 covers power chords)
EXTENSION_DEGREES: frozenset[int] = frozenset({5, 6, 7, 9, 11, 13})

# Degrees that may be chromatically altered
ALTERATION_DEGREE_RANGE = range(1, 14)

# Below this degree an accidental always denotes an alteration of a triad tone
MIN_EXTENSION_WITH_ACCIDENTAL = 6

SUS_DEGREES: frozenset[int] = frozenset(kind.value for kind in SusKind)


def is_extension_degree(degree: int) -> bool:
    """Check whether a degree is a recognized extension.

    Examples
    --------
    >>> is_extension_degree(9)
    True
    >>> is_extension_degree(8)
    False
    """
    return degree in EXTENSION_DEGREES


def is_alteration_degree(degree: int) -> bool:
    """Check whether a degree may carry an alteration.

    Examples
    --------
    >>> is_alteration_degree(13)
    True
    >>> is_alteration_degree(14)
    False
    """
    return degree in ALTERATION_DEGREE_RANGE


def forces_alteration(degree: int, accidental: int) -> bool:
    """Check whether an accidental on this degree can only be an alteration.

    Examples
    --------
    >>> forces_alteration(5, -1)
    True
    >>> forces_alteration(13, -1)
    False
    >>> forces_alteration(5, 0)
    False
    """
    return accidental != 0 and degree < MIN_EXTENSION_WITH_ACCIDENTAL


@dataclass(frozen=True)
class ExtensionMember:
    """A degree stacked onto the base triad (e.g. "7", "#11").

    Parameters
    ----------
    degree : int
        The extension degree, one of ``EXTENSION_DEGREES``.
    accidental : Accidental
        Accidental on the degree, ``Accidental.NATURAL`` when none.

    Examples
    --------
    >>> ExtensionMember(7)
    ExtensionMember(degree=7, accidental=<Accidental.NATURAL: 0>)
    """

    kind: ClassVar[str] = "extension"

    degree: int
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "accidental", Accidental(self.accidental))
        if not is_extension_degree(self.degree):
            msg = f"Invalid extension degree: {self.degree}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {"kind": self.kind, "degree": self.degree, "accidental": int(self.accidental)}


@dataclass(frozen=True)
class AltMember:
    """A chromatic alteration of a chord tone (e.g. "b5", "#9").

    Parameters
    ----------
    degree : int
        The altered degree, 1 through 13.
    accidental : Accidental
        Accidental on the degree. Never ``Accidental.NATURAL``.
    """

    kind: ClassVar[str] = "alteration"

    degree: int
    accidental: Accidental

    def __post_init__(self) -> None:
        object.__setattr__(self, "accidental", Accidental(self.accidental))
        if self.accidental == Accidental.NATURAL:
            msg = f"Alteration of degree {self.degree} requires an accidental"
            raise ValueError(msg)
        if not is_alteration_degree(self.degree):
            msg = f"Invalid alteration degree: {self.degree}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {"kind": self.kind, "degree": self.degree, "accidental": int(self.accidental)}


@dataclass(frozen=True)
class ModifierMember:
    """A triad modifier (e.g. "maj", "m", "dim", "+")."""

    kind: ClassVar[str] = "modifier"

    modifier: Modifier

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {"kind": self.kind, "modifier": self.modifier.value}


@dataclass(frozen=True)
class AddMember:
    """An explicitly added degree (e.g. "add9", "add b13").

    Parameters
    ----------
    degree : int
        The added degree.
    accidental : Accidental
        Accidental on the degree, ``Accidental.NATURAL`` when none.
    """

    kind: ClassVar[str] = "add"

    degree: int
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "accidental", Accidental(self.accidental))

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {"kind": self.kind, "degree": self.degree, "accidental": int(self.accidental)}


@dataclass(frozen=True)
class OmitMember:
    """An explicitly omitted degree (e.g. "omit5").

    Parameters
    ----------
    degree : int
        The omitted degree.
    accidental : Accidental
        Accidental on the degree, ``Accidental.NATURAL`` when none.
    """

    kind: ClassVar[str] = "omit"

    degree: int
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "accidental", Accidental(self.accidental))

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {"kind": self.kind, "degree": self.degree, "accidental": int(self.accidental)}


@dataclass(frozen=True)
class SuspendedMember:
    """A suspension replacing the third (e.g. "sus4")."""

    kind: ClassVar[str] = "sus"

    sus: SusKind

    def __post_init__(self) -> None:
        if self.sus not in SUS_DEGREES:
            msg = f"Invalid sus degree: {self.sus}"
            raise ValueError(msg)
        object.__setattr__(self, "sus", SusKind(self.sus))

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {"kind": self.kind, "sus": int(self.sus)}


QualityMember = ExtensionMember | AltMember | ModifierMember | AddMember | OmitMember | SuspendedMember
