"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Suit
from ..encoding import Joker
from .views import DeckView, NotationView

_SUIT_SYMBOLS = {
    Suit.CLUBS: ("♣", "green"),
    Suit.DIAMONDS: ("♦", "magenta"),
    Suit.HEARTS: ("♥", "red"),
    Suit.SPADES: ("♠", "cyan"),
}


def format_card(card_id: int) -> str:
    """Return a Rich-rendered label for ``card_id``."""

    card = Card(card_id)
    if card.joker is not None:
        label = "JA" if card.joker is Joker.SMALL else "JB"
        return f"[bold yellow]{label}[/bold yellow]"
    assert card.rank is not None and card.suit is not None
    symbol, color = _SUIT_SYMBOLS.get(card.suit, (card.suit.value, "white"))
    return f"[{color}]{card.rank.value}{symbol}[/{color}]"


def render_deck(cards: Iterable[int], *, title: str = "Deck") -> RenderableType:
    """Return a Rich panel laying out the deck from top to bottom."""

    view = DeckView(cards=[int(card) for card in cards], card_formatter=format_card)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")


def render_notation() -> RenderableType:
    """Return a Rich panel explaining the two-character card notation."""

    view = NotationView(card_formatter=format_card)
    return Panel(view.render(), title="Card Notation", padding=(0, 1), border_style="blue")
