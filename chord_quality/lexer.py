"""Lexer for chord quality suffixes.

This module reads one classified token at a time from a quality suffix.
The lexer is a pure function of the text and a position; the caller owns
the cursor and decides when to pull the next token.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

DIGITS = "0123456789"

# Accidental characters and their single magnitude
ACCIDENTAL_CHARS: dict[str, int] = {
    "b": -1,
    "#": 1,
}


class TokenType(Enum):
    """Lexical class of a quality suffix token."""

    SUS = auto()
    ADD = auto()
    OMIT = auto()
    ACCIDENTAL = auto()
    NUMBER = auto()
    AUGMENTED = auto()
    DIMINISHED = auto()
    MAJOR = auto()
    MINOR = auto()


MODIFIER_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.MAJOR, TokenType.MINOR, TokenType.DIMINISHED, TokenType.AUGMENTED}
)


@dataclass(frozen=True)
class Token:
    """A lexed token.

    Parameters
    ----------
    type : TokenType
        The token classification.
    value : int
        Signed magnitude for accidentals, the parsed integer for numbers,
        0 otherwise.

    Examples
    --------
    >>> Token(TokenType.ACCIDENTAL, -1).is_modifier
    False
    """

    type: TokenType
    value: int = 0

    @property
    def is_modifier(self) -> bool:
        """Whether the token is a major/minor/diminished/augmented modifier."""
        return self.type in MODIFIER_TYPES


# Keyword tails following a leading letter, checked in order
KEYWORD_TAILS: dict[str, tuple[tuple[str, TokenType], ...]] = {
    "o": (("mit", TokenType.OMIT),),
    "m": (("aj", TokenType.MAJOR), ("in", TokenType.MINOR)),
    "a": (("dd", TokenType.ADD), ("ug", TokenType.AUGMENTED)),
    "d": (("im", TokenType.DIMINISHED),),
    "s": (("us", TokenType.SUS),),
}

# Single characters that are complete tokens on their own
SYMBOL_TOKENS: dict[str, TokenType] = {
    "+": TokenType.AUGMENTED,
    "-": TokenType.DIMINISHED,
}


def skip_whitespace(text: str, position: int) -> int:
    """Return the first position at or after ``position`` that is not whitespace.

    Examples
    --------
    >>> skip_whitespace("  maj", 0)
    2
    >>> skip_whitespace("maj", 3)
    3
    """
    n = len(text)
    while position < n and text[position].isspace():
        position += 1
    return position


def _read_number(text: str, position: int) -> tuple[Token, int]:
    value = int(text[position])
    position += 1
    # Only 10-19 are read as two-digit numbers
    if value == 1 and position < len(text) and text[position] in DIGITS:
        value = 10 + int(text[position])
        position += 1
    return Token(TokenType.NUMBER, value), position


def _read_accidental(text: str, position: int) -> tuple[Token, int]:
    char = text[position]
    value = ACCIDENTAL_CHARS[char]
    position += 1
    if position < len(text) and text[position] == char:
        value *= 2
        position += 1
    return Token(TokenType.ACCIDENTAL, value), position


def _read_keyword(text: str, position: int) -> tuple[Token, int] | None:
    char = text[position]
    lead = char.lower()
    position += 1
    for tail, token_type in KEYWORD_TAILS[lead]:
        end = position + len(tail)
        if text[position:end].lower() == tail:
            return Token(token_type), end

    # Letters that are complete tokens without their tail
    if lead == "o":
        return Token(TokenType.DIMINISHED), position
    if lead == "m":
        token_type = TokenType.MAJOR if char == "M" else TokenType.MINOR
        return Token(token_type), position
    return None


def next_token(text: str, position: int) -> tuple[Token, int] | None:
    """Read the next token from a quality suffix.

    Whitespace before the token is skipped. The returned position points
    just past the consumed lexeme.

    Parameters
    ----------
    text : str
        The quality suffix.
    position : int
        Index to start reading at.

    Returns
    -------
    tuple[Token, int] | None
        The token and the position after it, or None if the text at
        ``position`` is not a valid token or the input is exhausted.

    Examples
    --------
    >>> token, end = next_token("maj7", 0)
    >>> token.type.name, end
    ('MAJOR', 3)
    >>> token, end = next_token("bb9", 0)
    >>> token.value, end
    (-2, 2)
    >>> next_token("xyz", 0) is None
    True
    """
    position = skip_whitespace(text, position)
    if position >= len(text):
        return None

    char = text[position]
    if char in DIGITS:
        return _read_number(text, position)
    if char in ACCIDENTAL_CHARS:
        return _read_accidental(text, position)
    if char in SYMBOL_TOKENS:
        return Token(SYMBOL_TOKENS[char]), position + 1
    if char.lower() in KEYWORD_TAILS:
        return _read_keyword(text, position)
    return None


def tokenize(text: str) -> list[Token]:
    """Lex a whole quality suffix into a token list.

    Parameters
    ----------
    text : str
        The quality suffix.

    Returns
    -------
    list[Token]
        All tokens in order.

    Raises
    ------
    ValueError
        If the text contains an invalid token.

    Examples
    --------
    >>> [t.type.name for t in tokenize("m7b5")]
    ['MINOR', 'NUMBER', 'ACCIDENTAL', 'NUMBER']
    """
    tokens: list[Token] = []
    position = skip_whitespace(text, 0)
    while position < len(text):
        result = next_token(text, position)
        if result is None:
            msg = f"Invalid token at position {position} in {text!r}"
            raise ValueError(msg)
        token, position = result
        tokens.append(token)
        position = skip_whitespace(text, position)
    return tokens
