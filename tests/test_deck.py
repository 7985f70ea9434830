"""Tests covering deck construction and validation."""

from __future__ import annotations

import random

import numpy as np
import pytest

from pontifex.deck import Deck
from pontifex.errors import DuplicateCard, IncompleteDeck, InvalidDeck, MalformedCardCode


def test_identity_deck_is_ascending() -> None:
    deck = Deck.identity()

    assert deck.ids() == list(range(1, 55))
    assert deck.cards.dtype == np.uint8
    assert deck.top == 1
    assert deck.bottom == 54
    assert len(deck) == 54


def test_from_code_round_trips(identity_code: str) -> None:
    deck = Deck.from_code(identity_code)

    assert deck == Deck.identity()
    assert deck.to_code() == identity_code


def test_missing_card_raises_incomplete_deck(identity_code: str) -> None:
    without_ace = identity_code.replace("Ac", "")

    with pytest.raises(IncompleteDeck) as excinfo:
        Deck.from_code(without_ace)

    assert excinfo.value.missing == (1,)


def test_extra_card_raises_duplicate_card(identity_code: str) -> None:
    with pytest.raises(DuplicateCard) as excinfo:
        Deck.from_code(identity_code + "3c")

    assert excinfo.value.duplicates == (3,)


def test_replaced_card_reports_duplicate(identity_code: str) -> None:
    with pytest.raises(DuplicateCard):
        Deck.from_code(identity_code.replace("4c", "3c"))


def test_malformed_token_is_reported(identity_code: str) -> None:
    with pytest.raises(MalformedCardCode):
        Deck.from_code(identity_code.replace("Ac", "Xc"))


def test_ten_alias_is_accepted(identity_code: str) -> None:
    assert Deck.from_code(identity_code.replace("Tc", "0c")) == Deck.identity()


def test_out_of_range_identifiers_are_rejected() -> None:
    with pytest.raises(InvalidDeck):
        Deck.from_ids(list(range(1, 54)) + [55])


def test_copy_is_independent() -> None:
    deck = Deck.identity()
    clone = deck.copy()
    clone.cards[[0, 1]] = clone.cards[[1, 0]]

    assert deck.ids()[:2] == [1, 2]
    assert clone.ids()[:2] == [2, 1]
    assert deck != clone


def test_validate_detects_external_corruption() -> None:
    deck = Deck.identity()
    deck.cards[0] = 2

    with pytest.raises(DuplicateCard):
        deck.validate()


def test_position_is_zero_based() -> None:
    deck = Deck.identity()

    assert deck.position(1) == 0
    assert deck.position(54) == 53


def test_shuffled_deck_is_valid_and_seedable() -> None:
    first = Deck.shuffled(random.Random(7))
    second = Deck.shuffled(random.Random(7))

    assert first == second
    assert sorted(first.ids()) == list(range(1, 55))


def test_shuffled_deck_without_rng_is_valid() -> None:
    deck = Deck.shuffled()

    assert sorted(deck.ids()) == list(range(1, 55))
