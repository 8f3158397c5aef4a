"""Quality suffix parser.

This module turns a chord quality suffix (e.g. "maj7#11 add9 omit5") into an
ordered tuple of quality members. Parsing is a single left-to-right pass
that pulls tokens from the lexer on demand and never backtracks.

Whether a bare number is an extension ("7" in "maj7") or an alteration
("5" in "b5") depends on what has been parsed so far, tracked in a
``ParseState`` that is local to each call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chord_quality.lexer import Token, TokenType, next_token, skip_whitespace
from chord_quality.models import (
    SUS_DEGREES,
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
    forces_alteration,
    is_alteration_degree,
    is_extension_degree,
)

logger = logging.getLogger(__name__)

TOKEN_MODIFIERS: dict[TokenType, Modifier] = {
    TokenType.MAJOR: Modifier.MAJOR,
    TokenType.MINOR: Modifier.MINOR,
    TokenType.DIMINISHED: Modifier.DIMINISHED,
    TokenType.AUGMENTED: Modifier.AUGMENTED,
}


class QualityParseError(ValueError):
    """Raised when a quality suffix is malformed or unrecognized.

    Parameters
    ----------
    text : str
        The suffix that failed to parse.
    reason : str
        Human-readable description of the failure.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid chord quality {text!r}: {reason}")


@dataclass
class ParseState:
    """Mutable state carried across the clauses of one parse.

    Parameters
    ----------
    text : str
        The suffix being parsed.
    position : int
        Cursor into ``text``. Only ever moves forward.
    extension_allowed : bool
        Whether a number may still be read as an extension. Cleared by the
        first alteration, add, omit or sus clause and never set again.
    last_extension : int
        Degree of the most recent extension, 0 before any.
    """

    text: str
    position: int = 0
    extension_allowed: bool = True
    last_extension: int = 0

    @property
    def at_end(self) -> bool:
        return skip_whitespace(self.text, self.position) >= len(self.text)

    def fail(self, reason: str) -> QualityParseError:
        return QualityParseError(self.text, reason)


def _take(state: ParseState, what: str) -> Token:
    """Pull the next token, raising if there is none."""
    if state.at_end:
        raise state.fail(f"expected {what}, got end of input")
    result = next_token(state.text, state.position)
    if result is None:
        position = skip_whitespace(state.text, state.position)
        raise state.fail(f"unrecognized character {state.text[position]!r} at position {position}")
    token, state.position = result
    return token


def _take_number(state: ParseState, what: str) -> int:
    token = _take(state, what)
    if token.type is not TokenType.NUMBER:
        raise state.fail(f"expected {what}, got {token.type.name.lower()}")
    return token.value


def _take_degree(state: ParseState, leading: Token) -> tuple[int, int]:
    """Read an optional accidental followed by a degree.

    Returns the degree and the accidental magnitude (0 when absent).
    """
    if leading.type is TokenType.NUMBER:
        return leading.value, 0
    if leading.type is TokenType.ACCIDENTAL:
        return _take_number(state, "a degree after accidental"), leading.value
    raise state.fail(f"expected a degree, got {leading.type.name.lower()}")


def _extension_or_alteration(state: ParseState, token: Token) -> QualityMember:
    degree, accidental = _take_degree(state, token)

    if (
        not state.extension_allowed
        or degree <= state.last_extension
        or forces_alteration(degree, accidental)
    ):
        state.extension_allowed = False
        if accidental == 0:
            raise state.fail(f"alteration of degree {degree} needs an accidental")
        if not is_alteration_degree(degree):
            raise state.fail(f"degree {degree} cannot be altered")
        return AltMember(degree, Accidental(accidental))

    if not is_extension_degree(degree):
        raise state.fail(f"{degree} is not a valid extension")
    state.last_extension = degree
    return ExtensionMember(degree, Accidental(accidental))


def _modifier(state: ParseState, token: Token) -> QualityMember:
    return ModifierMember(TOKEN_MODIFIERS[token.type])


def _add_or_omit(state: ParseState, token: Token) -> QualityMember:
    state.extension_allowed = False
    keyword = token.type.name.lower()
    degree, accidental = _take_degree(state, _take(state, f"a degree after {keyword}"))
    if token.type is TokenType.ADD:
        return AddMember(degree, Accidental(accidental))
    return OmitMember(degree, Accidental(accidental))


def _suspended(state: ParseState, token: Token) -> QualityMember:
    state.extension_allowed = False
    degree = _take_number(state, "2 or 4 after sus")
    if degree not in SUS_DEGREES:
        raise state.fail(f"sus{degree} is not a suspension")
    return SuspendedMember(SusKind(degree))


def _parse_clause(state: ParseState) -> QualityMember:
    token = _take(state, "a quality member")
    if token.type in (TokenType.NUMBER, TokenType.ACCIDENTAL):
        return _extension_or_alteration(state, token)
    if token.is_modifier:
        return _modifier(state, token)
    if token.type in (TokenType.ADD, TokenType.OMIT):
        return _add_or_omit(state, token)
    return _suspended(state, token)


def parse_quality(text: str) -> tuple[QualityMember, ...]:
    """Parse a chord quality suffix into quality members.

    Parameters
    ----------
    text : str
        The quality suffix, without root or bass (e.g. "m7b5", "maj7#11").
        Whitespace between clauses is ignored.

    Returns
    -------
    tuple[QualityMember, ...]
        Members in the order they appear. Empty for blank input.

    Raises
    ------
    QualityParseError
        If any part of the suffix is malformed. No partial result is kept.

    Examples
    --------
    >>> parse_quality("maj7")
    (ModifierMember(modifier=<Modifier.MAJOR: 'maj'>), ExtensionMember(degree=7, accidental=<Accidental.NATURAL: 0>))
    >>> [m.kind for m in parse_quality("m7b5")]
    ['modifier', 'extension', 'alteration']
    >>> parse_quality("   ")
    ()
    """
    state = ParseState(text)
    members: list[QualityMember] = []
    try:
        while not state.at_end:
            members.append(_parse_clause(state))
    except QualityParseError as exc:
        logger.debug("Rejected quality %r: %s", text, exc.reason)
        raise
    return tuple(members)


def try_parse_quality(text: str) -> tuple[QualityMember, ...] | None:
    """Parse a chord quality suffix, returning None on failure.

    Examples
    --------
    >>> try_parse_quality("sus3") is None
    True
    >>> len(try_parse_quality("sus4"))
    1
    """
    try:
        return parse_quality(text)
    except QualityParseError:
        return None
