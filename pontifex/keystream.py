"""Keystream generation: the four deck-mutation steps and output-card extraction.

Every function here mutates ``deck.cards`` in place. Positions are 0-based
internally, so "position 1" of the published description is index 0.
"""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

from . import encoding
from .deck import Deck
from .encoding import Joker
from .logging_utils import get_logger

__all__ = [
    "ALPHABET_SIZE",
    "move_joker",
    "step_one",
    "step_two",
    "step_three",
    "step_four",
    "counting_cut",
    "advance",
    "output_value",
    "run_once",
    "keystream",
    "keystream_values",
]

ALPHABET_SIZE = 26

_LOG = get_logger(__name__)


def _move_card(cards: np.ndarray, src: int, dst: int) -> None:
    card = cards[src]
    if dst > src:
        cards[src:dst] = cards[src + 1 : dst + 1].copy()
    elif dst < src:
        cards[dst + 1 : src + 1] = cards[dst:src].copy()
    cards[dst] = card


def move_joker(deck: Deck, joker: Joker, steps: int) -> None:
    """Move ``joker`` ``steps`` places towards the bottom, wrapping past the top card.

    A joker that runs off the bottom re-enters below the top card, never above it.
    """

    src = deck.position(joker)
    dst = src + steps
    last = len(deck) - 1
    if dst > last:
        dst -= last
    _move_card(deck.cards, src, dst)


def step_one(deck: Deck) -> None:
    move_joker(deck, Joker.SMALL, 1)


def step_two(deck: Deck) -> None:
    move_joker(deck, Joker.BIG, 2)


def step_three(deck: Deck) -> None:
    """Triple cut: swap the cards above the first joker with those below the second."""

    first, second = sorted((deck.position(Joker.SMALL), deck.position(Joker.BIG)))
    cards = deck.cards
    if first == 0 and second == len(cards) - 1:
        return
    cards[:] = np.concatenate((cards[second + 1 :], cards[first : second + 1], cards[:first]))


def counting_cut(deck: Deck, count: int) -> None:
    """Move the top ``count`` cards to just above the bottom card, which stays put."""

    cards = deck.cards
    body = len(cards) - 1
    count %= body
    if count == 0:
        return
    cards[:body] = np.concatenate((cards[count:body], cards[:count]))


def step_four(deck: Deck) -> None:
    """Counting cut keyed by the bottom card; a joker at the bottom leaves the deck unchanged."""

    bottom = deck.bottom
    if encoding.is_joker(bottom):
        return
    counting_cut(deck, bottom)


def advance(deck: Deck) -> None:
    """Apply steps one to four in order."""

    step_one(deck)
    step_two(deck)
    step_three(deck)
    step_four(deck)


def output_value(deck: Deck) -> int | None:
    """Return the keystream value shown by the current deck, or ``None`` on a joker."""

    count = encoding.joker_value(deck.top)
    output_card = int(deck.cards[count])
    if encoding.is_joker(output_card):
        return None
    return 1 + (output_card - 1) % ALPHABET_SIZE


def run_once(deck: Deck) -> int | None:
    """Perform one full transition: the four steps followed by extraction."""

    advance(deck)
    value = output_value(deck)
    if _LOG.isEnabledFor(logging.DEBUG):
        _LOG.debug("deck %s -> %s", deck.to_code(), "discard" if value is None else value)
    return value


def keystream(deck: Deck) -> Iterator[int | None]:
    """Yield one optional value per transition, forever; ``None`` marks a discard."""

    while True:
        yield run_once(deck)


def keystream_values(deck: Deck) -> Iterator[int]:
    """Yield usable keystream values in 1..26, skipping discarded transitions."""

    for value in keystream(deck):
        if value is not None:
            yield value
