"""Strategies for building the initial deck of a cipher session."""

from __future__ import annotations

from enum import Enum

from .cipher import clean_input
from .deck import Deck
from .errors import KeyingConflict
from .keystream import advance, counting_cut
from .logging_utils import get_logger

__all__ = [
    "KeyingMode",
    "UNKEYED_WARNING",
    "deck_from_code",
    "deck_from_passphrase",
    "unkeyed_deck",
    "keying_mode",
    "build_deck",
]

UNKEYED_WARNING = "Warning, using unkeyed deck!"

_LOG = get_logger(__name__)


class KeyingMode(str, Enum):
    """The mutually exclusive ways of keying a deck."""

    DECK = "deck"
    PASSPHRASE = "passphrase"
    UNKEYED = "unkeyed"


def deck_from_code(text: str) -> Deck:
    """Key the deck explicitly from its two-character card notation."""

    deck = Deck.from_code(text)
    _LOG.info("deck keyed from explicit notation")
    return deck


def deck_from_passphrase(passphrase: str) -> Deck:
    """Key the deck from a passphrase.

    For every letter the four keystream steps run, followed by a counting cut
    keyed by the letter's alphabet position. The optional joker-placement step
    is not performed.
    """

    letters = clean_input(passphrase)
    deck = Deck.identity()
    for letter in letters:
        advance(deck)
        counting_cut(deck, ord(letter) - ord("A") + 1)
    deck.validate()
    _LOG.info("deck keyed from a %d letter passphrase", len(letters))
    return deck


def unkeyed_deck() -> Deck:
    """Return the identity deck; it offers no secrecy at all."""

    _LOG.warning("unkeyed deck provides no secrecy")
    return Deck.identity()


def keying_mode(*, deck_code: str | None = None, passphrase: str | None = None) -> KeyingMode:
    """Return the strategy selected by the given inputs."""

    if deck_code is not None and passphrase is not None:
        raise KeyingConflict("Only use a passphrase, or the deck, not both.")
    if deck_code is not None:
        return KeyingMode.DECK
    if passphrase is not None:
        return KeyingMode.PASSPHRASE
    return KeyingMode.UNKEYED


def build_deck(*, deck_code: str | None = None, passphrase: str | None = None) -> Deck:
    """Build the initial deck from at most one keying input."""

    keying_mode(deck_code=deck_code, passphrase=passphrase)
    if deck_code is not None:
        return deck_from_code(deck_code)
    if passphrase is not None:
        return deck_from_passphrase(passphrase)
    return unkeyed_deck()
