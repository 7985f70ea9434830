"""Deck state for a Pontifex cipher session."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

import numpy as np

from . import encoding
from .errors import DuplicateCard, IncompleteDeck, InvalidDeck
from .logging_utils import get_logger

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray

    UInt8Array = NDArray[np.uint8]
else:
    UInt8Array = np.ndarray

__all__ = ["Deck", "validate_ids"]

_LOG = get_logger(__name__)


def validate_ids(values: Iterable[int]) -> UInt8Array:
    """Return ``values`` as a card array, raising when it is not a full permutation."""

    raw = np.fromiter((int(value) for value in values), dtype=np.int64)
    out_of_range = raw[(raw < 1) | (raw > encoding.DECK_CARD_COUNT)]
    if out_of_range.size:
        raise InvalidDeck(f"card identifiers out of range: {out_of_range.tolist()}")

    counts = np.bincount(raw, minlength=encoding.DECK_CARD_COUNT + 1)[1:]
    duplicates = (np.flatnonzero(counts > 1) + 1).tolist()
    if duplicates:
        raise DuplicateCard(duplicates)
    missing = (np.flatnonzero(counts == 0) + 1).tolist()
    if missing:
        raise IncompleteDeck(missing)
    return raw.astype(np.uint8)


@dataclass(slots=True, eq=False)
class Deck:
    """Ordered permutation of the 54 card identifiers, mutated in place by the keystream.

    Position 0 of ``cards`` is the top of the deck. A deck belongs to exactly one
    session; use :meth:`copy` to hand an identical starting state to another one.
    """

    cards: UInt8Array

    def __post_init__(self) -> None:
        self.cards = validate_ids(self.cards)

    @classmethod
    def identity(cls) -> "Deck":
        """Return the unkeyed deck: clubs, diamonds, hearts, spades, small joker, big joker."""

        return cls(np.arange(1, encoding.DECK_CARD_COUNT + 1, dtype=np.uint8))

    @classmethod
    def from_ids(cls, values: Iterable[int]) -> "Deck":
        return cls(np.fromiter((int(value) for value in values), dtype=np.int64))

    @classmethod
    def from_code(cls, text: str) -> "Deck":
        """Build a deck from the concatenated two-character notation."""

        return cls.from_ids(encoding.cards_from_code(text))

    @classmethod
    def shuffled(cls, rng: random.Random | None = None) -> "Deck":
        """Return a uniformly shuffled deck for display purposes.

        The default generator is seeded from the wall clock and is not suitable
        for keying a real message.
        """

        if rng is None:
            rng = random.Random(time.time_ns())
        ids = list(range(1, encoding.DECK_CARD_COUNT + 1))
        rng.shuffle(ids)
        _LOG.debug("shuffled display deck generated")
        return cls.from_ids(ids)

    def validate(self) -> None:
        """Re-check the permutation invariant after external mutation."""

        validate_ids(self.cards)

    def copy(self) -> "Deck":
        return Deck(self.cards.copy())

    @property
    def top(self) -> int:
        return int(self.cards[0])

    @property
    def bottom(self) -> int:
        return int(self.cards[-1])

    def position(self, card_identifier: int) -> int:
        """Return the 0-based position of ``card_identifier``."""

        return int(np.flatnonzero(self.cards == int(card_identifier))[0])

    def ids(self) -> list[int]:
        return [int(card) for card in self.cards]

    def to_code(self) -> str:
        return encoding.deck_to_code(self.ids())

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return bool(np.array_equal(self.cards, other.cards))

    def __repr__(self) -> str:
        return f"Deck({self.to_code()!r})"
