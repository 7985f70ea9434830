"""Typer entry-point wiring for the Pontifex CLI."""

from __future__ import annotations

import random
import sys
from typing import Callable, Iterable, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .. import keying
from ..cipher import CipherConfig, CipherResult, CipherSession
from ..deck import Deck
from ..errors import PontifexError
from ..logging_utils import get_logger, setup_logging
from .render import render_deck, render_notation

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    help="Pontifex-Solitaire cipher: a keystream generated by shuffling a deck of cards.",
)
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

_LOG = get_logger(__name__)

STDIN_MARKER = "-"

DECK_OPTION_HELP = "Initial keyed deck in two-character notation, e.g. JaAc2c3c..."
PASSPHRASE_OPTION_HELP = "Passphrase (letters A-Z) used to key the initial deck."


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    return typer.Exit(code=1)


def _input_lines(text: List[str]) -> Iterable[str]:
    """Yield the lines to process: stdin when ``-`` is given, else the joined arguments."""

    if text == [STDIN_MARKER]:
        for line in sys.stdin:
            yield line.rstrip("\r\n")
        return
    yield "".join(text)


def _open_session(
    deck_code: Optional[str],
    passphrase: Optional[str],
    group_size: int,
) -> CipherSession:
    mode = keying.keying_mode(deck_code=deck_code, passphrase=passphrase)
    deck = keying.build_deck(deck_code=deck_code, passphrase=passphrase)
    if mode is keying.KeyingMode.UNKEYED:
        console.print(f"[yellow]{keying.UNKEYED_WARNING}[/yellow]")
    console.print(f"Initial deck: {deck.to_code()}")
    return CipherSession(deck=deck, config=CipherConfig(group_size=group_size))


def _run(
    operation: Callable[[CipherSession, str], CipherResult],
    label: str,
    text: List[str],
    deck_code: Optional[str],
    passphrase: Optional[str],
    group_size: int,
    quiet_deck: bool,
    table: bool,
) -> None:
    try:
        session = _open_session(deck_code, passphrase, group_size)
        for line in _input_lines(text):
            result = operation(session, line)
            console.print(f"{label}: {result.text}")
            if not quiet_deck:
                console.print(f"Deck: {result.deck_code}")
    except PontifexError as exc:
        _LOG.debug("aborting after %s", type(exc).__name__)
        raise _fail(str(exc)) from exc

    if table:
        console.print(render_deck(session.deck.cards, title="Final Deck"))


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        envvar="PONTIFEX_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Configure logging before any command runs."""

    setup_logging(log_level)


@app.command()
def encrypt(
    text: List[str] = typer.Argument(..., help="Plain text words, or '-' to read lines from stdin."),
    deck_code: Optional[str] = typer.Option(None, "--deck", help=DECK_OPTION_HELP),
    passphrase: Optional[str] = typer.Option(None, "--passphrase", help=PASSPHRASE_OPTION_HELP),
    group_size: int = typer.Option(5, min=1, help="Letters per output group and padding multiple."),
    quiet_deck: bool = typer.Option(False, "--quiet-deck", help="Do not print the deck after each line."),
    table: bool = typer.Option(False, "--table", help="Render the final deck as a table."),
) -> None:
    """Convert plain text to cipher text."""

    _run(CipherSession.encrypt, "Encrypted", text, deck_code, passphrase, group_size, quiet_deck, table)


@app.command()
def decrypt(
    text: List[str] = typer.Argument(..., help="Cipher text groups, or '-' to read lines from stdin."),
    deck_code: Optional[str] = typer.Option(None, "--deck", help=DECK_OPTION_HELP),
    passphrase: Optional[str] = typer.Option(None, "--passphrase", help=PASSPHRASE_OPTION_HELP),
    group_size: int = typer.Option(5, min=1, help="Letters per output group."),
    quiet_deck: bool = typer.Option(False, "--quiet-deck", help="Do not print the deck after each line."),
    table: bool = typer.Option(False, "--table", help="Render the final deck as a table."),
) -> None:
    """Convert cipher text back to plain text."""

    _run(CipherSession.decrypt, "Decrypted", text, deck_code, passphrase, group_size, quiet_deck, table)


@app.command()
def shuffle(
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible output (omit to use the clock)."),
    table: bool = typer.Option(False, "--table", help="Render the deck as a table."),
) -> None:
    """Output a shuffled deck based on the current time."""

    console.print("Generating a shuffled deck.")
    console.print("[yellow]Warning, this was not done with a cryptographically secure RNG![/yellow]")
    rng = random.Random(seed) if seed is not None else None
    deck = Deck.shuffled(rng)
    console.print(f"Deck: {deck.to_code()}")
    if table:
        console.print(render_deck(deck.cards, title="Shuffled Deck"))


@app.command()
def notation() -> None:
    """Explain the two-character card notation used by --deck."""

    console.print(render_notation())
    console.print("Jokers: Ja is the small joker, Jb is the big joker.")
    console.print(
        "Note: the optional step of the passphrase key method is NOT performed."
    )


def main() -> None:
    """Entry-point for ``python -m pontifex.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
