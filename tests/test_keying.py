"""Tests covering the deck keying strategies."""

from __future__ import annotations

import logging
import random
import string

import pytest

from pontifex import keying, keystream
from pontifex.deck import Deck
from pontifex.errors import DuplicateCard, IncompleteDeck, InvalidCharacter, KeyingConflict


def test_empty_passphrase_is_identity() -> None:
    assert keying.deck_from_passphrase("") == Deck.identity()


def test_passphrase_applies_steps_then_letter_cut() -> None:
    expected = Deck.identity()
    for count in (6, 15, 15):
        keystream.advance(expected)
        keystream.counting_cut(expected, count)

    assert keying.deck_from_passphrase("FOO") == expected


def test_passphrase_is_cleaned_before_keying() -> None:
    reference = keying.deck_from_passphrase("CRYPTONOMICON")

    assert keying.deck_from_passphrase("crypto nomicon") == reference
    assert keying.deck_from_passphrase("Crypto\tNomicon") == reference


def test_passphrase_rejects_non_letters() -> None:
    with pytest.raises(InvalidCharacter):
        keying.deck_from_passphrase("FO0")


@pytest.mark.parametrize("seed", range(20))
def test_passphrase_decks_are_permutations(seed: int) -> None:
    rng = random.Random(seed)
    passphrase = "".join(rng.choice(string.ascii_uppercase) for _ in range(rng.randint(1, 40)))

    deck = keying.deck_from_passphrase(passphrase)

    assert sorted(deck.ids()) == list(range(1, 55))


def test_deck_from_code(identity_code: str) -> None:
    assert keying.deck_from_code(identity_code) == Deck.identity()


def test_deck_from_code_validation(identity_code: str) -> None:
    with pytest.raises(IncompleteDeck):
        keying.deck_from_code(identity_code[2:])
    with pytest.raises(DuplicateCard):
        keying.deck_from_code(identity_code + "3c")


def test_unkeyed_deck_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="pontifex.keying"):
        deck = keying.unkeyed_deck()

    assert deck == Deck.identity()
    assert "no secrecy" in caplog.text


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({}, keying.KeyingMode.UNKEYED),
        ({"deck_code": "Ac"}, keying.KeyingMode.DECK),
        ({"passphrase": "FOO"}, keying.KeyingMode.PASSPHRASE),
    ],
)
def test_keying_mode_selection(kwargs: dict[str, str], expected: keying.KeyingMode) -> None:
    assert keying.keying_mode(**kwargs) is expected


def test_build_deck_rejects_two_strategies(identity_code: str) -> None:
    with pytest.raises(KeyingConflict):
        keying.build_deck(deck_code=identity_code, passphrase="FOO")


def test_build_deck_dispatches(identity_code: str) -> None:
    assert keying.build_deck() == Deck.identity()
    assert keying.build_deck(deck_code=identity_code) == Deck.identity()
    assert keying.build_deck(passphrase="FOO") == keying.deck_from_passphrase("FOO")


def test_build_deck_with_empty_passphrase_is_keyed(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="pontifex.keying"):
        deck = keying.build_deck(passphrase="")

    assert deck == Deck.identity()
    assert "no secrecy" not in caplog.text
