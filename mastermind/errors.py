"""
Errors the game raises instead of crashing.
Every one of them is recoverable: the terminal loop reports it and asks again.
"""

from typing import Optional


class InvalidGuess(ValueError):
    """A guess that cannot be turned into a four-symbol sequence."""


class UnknownSymbol(InvalidGuess):
    """A character that is not one of the eight colour tokens."""

    def __init__(self, symbol: str, position: Optional[int] = None, allowed: str = ""):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        msg = f"Unknown symbol {symbol!r}{where}."
        if allowed:
            msg += f" Use one of: {allowed}."
        super().__init__(msg)


class GameAlreadyOver(RuntimeError):
    """A guess was submitted after the game was won or lost."""


class NoGuessYet(LookupError):
    """Clues were requested before the first guess."""
