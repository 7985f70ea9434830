"""Exception hierarchy shared by the Pontifex modules."""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "PontifexError",
    "MalformedCardCode",
    "DeckError",
    "IncompleteDeck",
    "DuplicateCard",
    "InvalidDeck",
    "InvalidCharacter",
    "KeyingConflict",
]


class PontifexError(ValueError):
    """Base class for every error raised by the cipher core."""


class MalformedCardCode(PontifexError):
    """Raised when a two-character card token cannot be decoded."""

    def __init__(self, code: str) -> None:
        super().__init__(f"malformed card code {code!r}")
        self.code = code


class DeckError(PontifexError):
    """Raised when a deck is not a permutation of the 54 card identifiers."""


class IncompleteDeck(DeckError):
    """Raised when one or more cards are missing from a deck."""

    def __init__(self, missing: Sequence[int]) -> None:
        super().__init__(f"cards are missing from the deck: {list(missing)}")
        self.missing = tuple(missing)


class DuplicateCard(DeckError):
    """Raised when a card appears more than once in a deck."""

    def __init__(self, duplicates: Sequence[int]) -> None:
        super().__init__(f"duplicate cards were found in the deck: {list(duplicates)}")
        self.duplicates = tuple(duplicates)


class InvalidDeck(DeckError):
    """Raised when a deck holds identifiers outside 1..54."""


class InvalidCharacter(PontifexError):
    """Raised when text holds a character outside A-Z after cleaning."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"invalid character in input stream: {character!r} at position {position}")
        self.character = character
        self.position = position


class KeyingConflict(PontifexError):
    """Raised when more than one keying strategy is requested."""
