"""Top-level package for the Pontifex (Solitaire) card cipher."""

from . import cards, cipher, deck, encoding, errors, keying, keystream

__all__ = [
    "cards",
    "cipher",
    "deck",
    "encoding",
    "errors",
    "keying",
    "keystream",
]
