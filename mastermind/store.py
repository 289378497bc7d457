"""
Game state for one play session.
Holds the secret, the turn counter, every guess and the win flag, all in memory.
"""

import logging
from dataclasses import dataclass, field
from time import time
from typing import Dict, List, Tuple

from .engine import Sequence, score_guess, is_win
from .errors import GameAlreadyOver, NoGuessYet
from .schemas import GameState, GuessEntryOut
from .types import GameStatus

logger = logging.getLogger(__name__)

MAX_TURNS = 12


def feedback_message(white: int, black: int) -> str:
    """
    white is the raw colour overlap (blacks included), as score_guess returns it.
    """
    if white == 0 and black == 0:
        return "Your guess was completely wrong!"
    if black == 0:
        return f"You got {white} white clues"
    if black == white:
        return f"You got {black} black clues"
    return f"You got {white - black} white clues and {black} black clues"


@dataclass
class GuessEntry:
    turn: int
    guess: Sequence
    overlap: int  # raw colour overlap, blacks included
    black: int
    message: str
    timestamp: float = field(default_factory=time)


@dataclass
class Game:
    code: Sequence
    turn: int = 0
    # turn number -> guess on that turn; keys run 1..turn
    history: Dict[int, Sequence] = field(default_factory=dict)
    won: bool = False
    max_turns: int = MAX_TURNS
    entries: List[GuessEntry] = field(default_factory=list, repr=False)

    @property
    def status(self) -> GameStatus:
        if self.won:
            return "won"
        if self.turn >= self.max_turns:
            return "lost"
        return "in_progress"

    @property
    def turns_left(self) -> int:
        return max(0, self.max_turns - self.turn)

    def submit_guess(self, guess: Sequence) -> GuessEntry:
        if self.status != "in_progress":
            raise GameAlreadyOver(
                f"Game {self.status} after {self.turn} turn(s). No more guesses allowed."
            )

        self.turn += 1
        self.history[self.turn] = guess
        if is_win(self.code, guess):
            self.won = True

        white, black = self.clues()
        entry = GuessEntry(
            turn=self.turn,
            guess=guess,
            overlap=white,
            black=black,
            message=feedback_message(white, black),
        )
        self.entries.append(entry)
        logger.debug("turn %d: %s -> white=%d black=%d", self.turn, guess.tokens, white, black)

        if self.status != "in_progress":
            logger.debug("game %s on turn %d", self.status, self.turn)
        return entry

    def clues(self) -> Tuple[int, int]:
        """(white, black) for the latest guess; white still counts the blacks."""
        if self.turn == 0:
            raise NoGuessYet("No guess has been made yet.")
        return score_guess(self.code, self.history[self.turn])

    def snapshot(self) -> GameState:
        """Read-only view of the game; the secret is only included once it is over."""
        finished = self.status != "in_progress"
        return GameState(
            status=self.status,
            turn=self.turn,
            turns_left=self.turns_left,
            history=[_to_guess_out(e) for e in self.entries],
            code=list(self.code.tokens) if finished else None,
        )


def _to_guess_out(entry: GuessEntry) -> GuessEntryOut:
    return GuessEntryOut(
        turn=entry.turn,
        guess=list(entry.guess.tokens),
        white=entry.overlap - entry.black,
        black=entry.black,
        message=entry.message,
        timestamp=entry.timestamp,
    )
