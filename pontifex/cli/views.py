"""Composable view primitives for the Pontifex CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from .. import encoding
from ..cards import Card


@dataclass(slots=True)
class DeckView:
    """Renderable grid of a deck, one row per thirteen positions."""

    cards: Sequence[int]
    card_formatter: Callable[[int], str]
    columns: int = 13

    def render(self) -> RenderableType:
        table = Table(box=box.SIMPLE, expand=False, show_header=False)
        table.add_column("Pos", justify="right", style="dim")
        for _ in range(self.columns):
            table.add_column(justify="center")

        for start in range(0, len(self.cards), self.columns):
            row = [self.card_formatter(card) for card in self.cards[start : start + self.columns]]
            row += [""] * (self.columns - len(row))
            table.add_row(str(start + 1), *row)

        code = Text(encoding.deck_to_code(self.cards), style="dim")
        return Group(table, code)


@dataclass(slots=True)
class NotationView:
    """Table of rank and suit tokens with a few worked examples."""

    card_formatter: Callable[[int], str]

    def render(self) -> RenderableType:
        ranks = Table(title="Ranks", box=box.MINIMAL)
        ranks.add_column("Token", justify="center", style="bold")
        ranks.add_column("Rank", justify="left")
        for token, name in zip(encoding.RANKS, encoding.RANK_NAMES):
            note = " (also accepted: 0)" if token == "T" else ""
            ranks.add_row(token, f"{name}{note}")

        suits = Table(title="Suits", box=box.MINIMAL)
        suits.add_column("Token", justify="center", style="bold")
        suits.add_column("Suit", justify="left")
        for token, name in zip(encoding.SUITS, encoding.SUIT_NAMES):
            suits.add_row(token, name)

        examples = Table(title="Examples", box=box.MINIMAL)
        examples.add_column("Code", justify="center", style="bold")
        examples.add_column("Card", justify="left")
        for code in ("Ac", "5h", "Qs", "Jd", "Tc", "Kh", "Ja", "Jb"):
            card = Card.from_code(code)
            examples.add_row(card.code, f"{self.card_formatter(card.id)} {card.name}")

        return Group(ranks, suits, examples)
