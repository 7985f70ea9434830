"""Stream cipher transform driven by the deck keystream."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from .deck import Deck
from .errors import InvalidCharacter
from .keystream import ALPHABET_SIZE, keystream_values
from .logging_utils import get_logger

__all__ = [
    "CipherConfig",
    "CipherResult",
    "CipherSession",
    "DEFAULT_CONFIG",
    "clean_input",
    "pad_plaintext",
    "group_blocks",
    "encode",
    "decode",
]

_LOG = get_logger(__name__)

_SKIPPED = frozenset(" \t")


@dataclass(frozen=True, slots=True)
class CipherConfig:
    """Formatting knobs for the cipher transform."""

    group_size: int = 5
    pad_letter: str = "X"

    def __post_init__(self) -> None:
        if self.group_size <= 0:
            raise ValueError("group_size must be positive")
        if len(self.pad_letter) != 1 or not "A" <= self.pad_letter <= "Z":
            raise ValueError("pad_letter must be a single letter A-Z")


DEFAULT_CONFIG = CipherConfig()


def clean_input(text: str) -> str:
    """Drop spaces and tabs, uppercase the rest, and reject anything outside A-Z."""

    cleaned: list[str] = []
    for position, raw in enumerate(text):
        if raw in _SKIPPED:
            continue
        letter = raw.upper()
        if len(letter) != 1 or not "A" <= letter <= "Z":
            raise InvalidCharacter(raw, position)
        cleaned.append(letter)
    return "".join(cleaned)


def pad_plaintext(text: str, config: CipherConfig = DEFAULT_CONFIG) -> str:
    """Pad ``text`` with the pad letter up to a multiple of the group size."""

    remainder = len(text) % config.group_size
    if remainder == 0:
        return text
    return text + config.pad_letter * (config.group_size - remainder)


def group_blocks(text: str, config: CipherConfig = DEFAULT_CONFIG) -> str:
    """Insert a space between each group of letters for display."""

    size = config.group_size
    return " ".join(text[idx : idx + size] for idx in range(0, len(text), size))


def _letter_position(letter: str) -> int:
    return ord(letter) - ord("A") + 1


def _position_letter(position: int) -> str:
    return chr(ord("A") + position - 1)


def _transform(deck: Deck, text: str, combine: Callable[[int, int], int]) -> str:
    values: Iterator[int] = keystream_values(deck)
    return "".join(
        _position_letter(combine(_letter_position(letter), next(values))) for letter in text
    )


def _add(position: int, key: int) -> int:
    return (position + key - 1) % ALPHABET_SIZE + 1


def _subtract(position: int, key: int) -> int:
    return (position - key - 1 + ALPHABET_SIZE) % ALPHABET_SIZE + 1


def encode(deck: Deck, text: str, config: CipherConfig = DEFAULT_CONFIG) -> str:
    """Encrypt ``text`` against ``deck``, advancing the deck one keystream value per letter.

    The text is cleaned and padded before the deck is touched, so a validation
    error leaves the deck unchanged. Returns grouped ciphertext.
    """

    plaintext = pad_plaintext(clean_input(text), config)
    ciphertext = _transform(deck, plaintext, _add)
    _LOG.info("encoded %d letter(s)", len(plaintext))
    return group_blocks(ciphertext, config)


def decode(deck: Deck, text: str, config: CipherConfig = DEFAULT_CONFIG) -> str:
    """Decrypt ``text`` against ``deck``; padding letters are kept in the output."""

    ciphertext = clean_input(text)
    plaintext = _transform(deck, ciphertext, _subtract)
    _LOG.info("decoded %d letter(s)", len(ciphertext))
    return group_blocks(plaintext, config)


@dataclass(frozen=True, slots=True)
class CipherResult:
    """Output of one session operation together with the deck it left behind."""

    text: str
    deck_code: str


@dataclass(slots=True)
class CipherSession:
    """Owns a deck and carries its state across successive lines of input."""

    deck: Deck
    config: CipherConfig = field(default_factory=CipherConfig)

    def encrypt(self, line: str) -> CipherResult:
        text = encode(self.deck, line, self.config)
        return CipherResult(text, self.deck.to_code())

    def decrypt(self, line: str) -> CipherResult:
        text = decode(self.deck, line, self.config)
        return CipherResult(text, self.deck.to_code())
