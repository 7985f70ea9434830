"""Card abstractions and helpers for Pontifex."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import encoding


class Suit(str, Enum):
    """Enumeration of the four suits in bridge order."""

    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"


class Rank(str, Enum):
    """Enumeration of ranks, ace low."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


@dataclass(frozen=True, slots=True)
class Card:
    """Value object wrapping a card identifier in 1..54."""

    id: int

    def __post_init__(self) -> None:
        if not 1 <= self.id <= encoding.DECK_CARD_COUNT:
            raise ValueError(f"card identifier {self.id} out of range")

    @classmethod
    def from_code(cls, code: str) -> "Card":
        return cls(encoding.code_to_card(code))

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card represents either joker."""

        return encoding.is_joker(self.id)

    @property
    def joker(self) -> encoding.Joker | None:
        return encoding.Joker(self.id) if self.is_joker else None

    @property
    def rank(self) -> Rank | None:
        if self.is_joker:
            return None
        return Rank(encoding.RANKS[encoding.decode_id(self.id).rank_idx])

    @property
    def suit(self) -> Suit | None:
        if self.is_joker:
            return None
        return Suit(encoding.SUITS[encoding.decode_id(self.id).suit_idx])

    @property
    def code(self) -> str:
        return encoding.card_to_code(self.id)

    @property
    def name(self) -> str:
        return encoding.card_name(self.id)
