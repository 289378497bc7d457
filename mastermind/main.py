'''
Terminal Mastermind

Flow:
  banner + legend  -> how to type each colour
  loop             -> read a guess, print clues, until won or 12 turns are used
  end              -> winning turn, or the secret on a loss

Bad input never ends the game: the error is shown and the same turn is asked again.
'''

import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import Settings, load_settings
from .engine import ALPHABET, Sequence
from .errors import InvalidGuess
from .random_client import fetch_code
from .store import Game

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # logs go to stderr so they never mix with the board on stdout
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def print_welcome(console: Console) -> None:
    console.print(Panel("[bold]Welcome to MasterMind![/]", box=box.ROUNDED, expand=False))
    console.print("To guess, enter four characters, one per colour:")
    legend = Table(box=box.SIMPLE, show_header=True)
    legend.add_column("Key")
    legend.add_column("Colour")
    for colour in ALPHABET:
        legend.add_row(colour.token, colour.label)
    console.print(legend)


def play(console: Console, game: Game) -> Game:
    """Run the guess loop until the game is won or lost, or input runs out."""
    while game.status == "in_progress":
        console.print("\nPlease enter your guess")
        try:
            line = console.input()
        except (EOFError, KeyboardInterrupt):
            console.print("\nGoodbye!")
            logger.info("input closed on turn %d", game.turn)
            return game

        try:
            guess = Sequence.parse(line)
        except InvalidGuess as exc:
            logger.info("rejected guess %r: %s", line, exc)
            console.print(f"[red]Invalid guess:[/] {escape(str(exc))}")
            continue

        console.print(f"[dim]Your guess: {escape(str(guess))}[/]")
        entry = game.submit_guess(guess)
        if not game.won:
            console.print(entry.message)

    logger.debug("final state: %s", game.snapshot().model_dump_json())
    if game.won:
        console.print(f"[bold green]You won on turn {game.turn}[/]")
    else:
        console.print(f"[bold red]You lost![/] The code was {escape(str(game.code))}")
    return game


def main(settings: Optional[Settings] = None, console: Optional[Console] = None) -> int:
    settings = settings or load_settings()
    console = console or Console(highlight=False)
    configure_logging(settings.log_level)

    print_welcome(console)

    secret = fetch_code(settings.random_source, settings.random_timeout)
    game = Game(code=secret)
    logger.debug("new game, %d turns", game.max_turns)
    if settings.show_code:
        console.print(f"[yellow]Secret (debug): {escape(str(secret))}[/]")

    play(console, game)
    # The exit status is 0 whether the player won, lost or quit
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
