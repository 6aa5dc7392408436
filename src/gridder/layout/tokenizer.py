"""Tokenizer for the 2D grid layout language."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class TokenKind(Enum):
    """Kinds of token in a layout string."""
    ROW_START = "{"
    ROW_END = "}"
    EXTEND_DOWN = "|"
    EXTEND_RIGHT = "+"
    FILLER = "-"
    IDENTIFIER = "identifier"


# Structural characters, with the historical synonyms ^ and <
STRUCTURAL_CHARS: dict[str, TokenKind] = {
    "{": TokenKind.ROW_START,
    "}": TokenKind.ROW_END,
    "|": TokenKind.EXTEND_DOWN,
    "^": TokenKind.EXTEND_DOWN,
    "+": TokenKind.EXTEND_RIGHT,
    "<": TokenKind.EXTEND_RIGHT,
    "-": TokenKind.FILLER,
}


@dataclass(frozen=True)
class Token:
    """A layout token and the offset where it starts in the source string."""

    kind: TokenKind
    text: str
    offset: int


def tokenize(text: str) -> Iterator[Token]:
    """Scan a layout string left to right, yielding tokens.

    Whitespace only separates tokens. Identifiers run until whitespace or a
    structural character.

    Args:
        text: The layout string

    Yields:
        Tokens in source order
    """
    idx = 0
    length = len(text)
    while idx < length:
        char = text[idx]
        if char.isspace():
            idx += 1
            continue

        kind = STRUCTURAL_CHARS.get(char)
        if kind is not None:
            yield Token(kind, char, idx)
            idx += 1
            continue

        start = idx
        while idx < length and not _is_terminator(text[idx]):
            idx += 1
        yield Token(TokenKind.IDENTIFIER, text[start:idx], start)


def _is_terminator(char: str) -> bool:
    return char.isspace() or char in STRUCTURAL_CHARS
