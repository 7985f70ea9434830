"""Tests covering the two-character card notation."""

from __future__ import annotations

import pytest

from pontifex import encoding
from pontifex.errors import MalformedCardCode


@pytest.mark.parametrize(
    ("card_identifier", "code"),
    [
        (1, "Ac"),
        (9, "9c"),
        (10, "Tc"),
        (13, "Kc"),
        (14, "Ad"),
        (26, "Kd"),
        (38, "Qh"),
        (50, "Js"),
        (51, "Qs"),
        (52, "Ks"),
        (53, "Ja"),
        (54, "Jb"),
    ],
)
def test_card_to_code_known_values(card_identifier: int, code: str) -> None:
    assert encoding.card_to_code(card_identifier) == code
    assert encoding.code_to_card(code) == card_identifier


def test_codec_is_bijective() -> None:
    codes = [encoding.card_to_code(card) for card in range(1, 55)]

    assert len(set(codes)) == 54
    assert all(len(code) == 2 for code in codes)
    assert [encoding.code_to_card(code) for code in codes] == list(range(1, 55))


def test_zero_is_accepted_as_ten_but_never_emitted() -> None:
    assert encoding.code_to_card("0c") == encoding.code_to_card("Tc") == 10
    assert encoding.code_to_card("0s") == 49
    assert encoding.card_to_code(49) == "Ts"


@pytest.mark.parametrize("code", ["Xc", "Az", "1c", "JA", "jb", "AC", "A", "Ace", ""])
def test_code_to_card_rejects_unknown_tokens(code: str) -> None:
    with pytest.raises(MalformedCardCode) as excinfo:
        encoding.code_to_card(code)

    assert excinfo.value.code == code


def test_card_to_code_rejects_out_of_range_identifier() -> None:
    with pytest.raises(ValueError):
        encoding.card_to_code(55)
    with pytest.raises(ValueError):
        encoding.card_to_code(0)


def test_deck_to_code_serialises_full_deck() -> None:
    code = encoding.deck_to_code(range(1, 55))

    assert len(code) == 108
    assert code.startswith("Ac2c3c4c5c6c7c8c9cTcJcQcKcAd")
    assert code.endswith("QsKsJaJb")


def test_split_codes_ignores_whitespace() -> None:
    assert encoding.split_codes("Ac 2c\tJa\nJb") == ["Ac", "2c", "Ja", "Jb"]


def test_split_codes_rejects_dangling_character() -> None:
    with pytest.raises(MalformedCardCode):
        encoding.split_codes("Ac2")


@pytest.mark.parametrize(
    ("card_identifier", "expected"),
    [(1, 1), (52, 52), (53, 53), (54, 53)],
)
def test_joker_value_treats_both_jokers_as_53(card_identifier: int, expected: int) -> None:
    assert encoding.joker_value(card_identifier) == expected


def test_joker_enum_is_backed_by_identifiers() -> None:
    assert encoding.Joker.SMALL == 53
    assert encoding.Joker.BIG == 54
    assert encoding.Joker.SMALL.code == "Ja"
    assert encoding.Joker.BIG.code == "Jb"
    assert encoding.is_joker(53) and encoding.is_joker(54)
    assert not encoding.is_joker(52)


def test_card_name() -> None:
    assert encoding.card_name(10) == "Ten of Clubs"
    assert encoding.card_name(38) == "Queen of Hearts"
    assert encoding.card_name(53) == "Small Joker"
