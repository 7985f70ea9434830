"""Card identifier encoding utilities for Pontifex."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Iterable

from .errors import MalformedCardCode

RANKS: Final[list[str]] = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K"]
SUITS: Final[list[str]] = ["c", "d", "h", "s"]
RANK_TO_IDX: Final[dict[str, int]] = {rank: idx for idx, rank in enumerate(RANKS)}
SUIT_TO_IDX: Final[dict[str, int]] = {suit: idx for idx, suit in enumerate(SUITS)}
# "0" is the ten token used by the original usage text; accepted on input only.
RANK_ALIASES: Final[dict[str, str]] = {"0": "T"}
SUIT_NAMES: Final[list[str]] = ["Clubs", "Diamonds", "Hearts", "Spades"]
RANK_NAMES: Final[list[str]] = [
    "Ace",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Jack",
    "Queen",
    "King",
]
CARDS_PER_SUIT: Final[int] = 13
DECK_CARD_COUNT: Final[int] = 54
CODE_LENGTH: Final[int] = 2


class Joker(IntEnum):
    """The two distinguishable jokers, backed by their card identifiers."""

    SMALL = 53
    BIG = 54

    @property
    def code(self) -> str:
        return JOKER_CODES[self]


JOKER_CODES: Final[dict[Joker, str]] = {Joker.SMALL: "Ja", Joker.BIG: "Jb"}
CODE_TO_JOKER: Final[dict[str, Joker]] = {code: joker for joker, code in JOKER_CODES.items()}


@dataclass(frozen=True, slots=True)
class CardDecoding:
    """Typed container describing a decoded card identifier."""

    is_joker: bool
    rank_idx: int
    suit_idx: int


def is_joker(card_identifier: int) -> bool:
    """Return ``True`` for either joker."""

    return card_identifier >= Joker.SMALL


def joker_value(card_identifier: int) -> int:
    """Return the counting value of a card, where both jokers count as 53."""

    if is_joker(card_identifier):
        return int(Joker.SMALL)
    return int(card_identifier)


def _validate_card_identifier(card_identifier: int) -> None:
    if card_identifier < 1 or card_identifier > DECK_CARD_COUNT:
        raise ValueError(f"card identifier {card_identifier} out of range")


def card_id(rank_idx: int, suit_idx: int) -> int:
    """Encode a rank and suit index into a card identifier."""

    if not 0 <= suit_idx < len(SUITS):
        raise ValueError("suit_idx out of range")
    if not 0 <= rank_idx < len(RANKS):
        raise ValueError("rank_idx out of range")
    return suit_idx * CARDS_PER_SUIT + rank_idx + 1


def decode_id(card_identifier: int) -> CardDecoding:
    """Decode a card identifier into its properties."""

    _validate_card_identifier(card_identifier)
    if is_joker(card_identifier):
        return CardDecoding(True, -1, -1)
    base = card_identifier - 1
    return CardDecoding(False, base % CARDS_PER_SUIT, base // CARDS_PER_SUIT)


def card_to_code(card_identifier: int) -> str:
    """Return the two-character notation for ``card_identifier``."""

    _validate_card_identifier(card_identifier)
    if is_joker(card_identifier):
        return JOKER_CODES[Joker(card_identifier)]
    decoded = decode_id(card_identifier)
    return RANKS[decoded.rank_idx] + SUITS[decoded.suit_idx]


def code_to_card(code: str) -> int:
    """Return the card identifier for a two-character notation."""

    if len(code) != CODE_LENGTH:
        raise MalformedCardCode(code)
    joker = CODE_TO_JOKER.get(code)
    if joker is not None:
        return int(joker)
    rank, suit = code[0], code[1]
    rank = RANK_ALIASES.get(rank, rank)
    if rank not in RANK_TO_IDX or suit not in SUIT_TO_IDX:
        raise MalformedCardCode(code)
    return card_id(RANK_TO_IDX[rank], SUIT_TO_IDX[suit])


def split_codes(text: str) -> list[str]:
    """Split a deck string into two-character tokens, ignoring whitespace."""

    compact = "".join(text.split())
    if len(compact) % CODE_LENGTH:
        raise MalformedCardCode(compact[-1])
    return [compact[idx : idx + CODE_LENGTH] for idx in range(0, len(compact), CODE_LENGTH)]


def cards_from_code(text: str) -> list[int]:
    """Decode a concatenated deck string into card identifiers."""

    return [code_to_card(code) for code in split_codes(text)]


def deck_to_code(cards: Iterable[int]) -> str:
    """Serialise card identifiers into the concatenated two-character notation."""

    return "".join(card_to_code(int(card)) for card in cards)


def card_name(card_identifier: int) -> str:
    """Return a human readable name such as ``Ten of Clubs``."""

    if is_joker(card_identifier):
        return "Small Joker" if card_identifier == Joker.SMALL else "Big Joker"
    decoded = decode_id(card_identifier)
    return f"{RANK_NAMES[decoded.rank_idx]} of {SUIT_NAMES[decoded.suit_idx]}"
