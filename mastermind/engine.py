"""
Pure game logic (no terminal, no network).

- Colour: the eight pieces, each typed by the player as a single character.
- Sequence: an immutable ordered code of exactly four colours.
- score_guess: the two feedback numbers for a guess:
    white = how many colours the guess shares with the secret, any position,
            each secret peg used at most once (so this includes the blacks)
    black = how many positions are exactly right

The secret never repeats a colour (it is sampled without replacement);
guesses may repeat colours freely.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from random import Random
from secrets import SystemRandom
from typing import List, Optional, Tuple

from .errors import InvalidGuess, UnknownSymbol
from .types import Token

CODE_LENGTH = 4


class Colour(Enum):
    RED = "r"
    ORANGE = "o"
    YELLOW = "y"
    BLUE = "b"
    GREEN = "g"
    BROWN = "B"
    WHITE = "w"
    BLACK = "x"

    @property
    def token(self) -> Token:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_token(cls, token: Token, position: Optional[int] = None) -> "Colour":
        # Case matters: "b" is Blue and "B" is Brown
        try:
            return cls(token)
        except ValueError:
            raise UnknownSymbol(token, position, allowed=", ".join(TOKENS)) from None


# Alphabet order matters: random.org indices map onto it
ALPHABET: Tuple[Colour, ...] = tuple(Colour)
TOKENS: Tuple[Token, ...] = tuple(c.token for c in ALPHABET)


@dataclass(frozen=True)
class Sequence:
    colours: Tuple[Colour, ...]

    def __post_init__(self):
        colours = tuple(self.colours)
        if len(colours) != CODE_LENGTH:
            raise InvalidGuess(
                f"A code has exactly {CODE_LENGTH} symbols, but got {len(colours)}."
            )
        for colour in colours:
            if not isinstance(colour, Colour):
                raise InvalidGuess(f"{colour!r} is not a colour.")
        # frozen dataclass: normalise lists into a tuple
        object.__setattr__(self, "colours", colours)

    @classmethod
    def parse(cls, text: str) -> "Sequence":
        """
        Turn a line of player input into a Sequence.

        Surrounding whitespace is dropped, then the first four characters are
        read as colour tokens; anything after the fourth is ignored.
        Raises InvalidGuess if fewer than four characters remain and
        UnknownSymbol (with its 1-based position) for a bad character.
        """
        text = (text or "").strip()
        if len(text) < CODE_LENGTH:
            raise InvalidGuess(
                f"Please enter {CODE_LENGTH} symbols, but got {len(text)}."
            )
        colours = []
        for position, token in enumerate(text[:CODE_LENGTH], start=1):
            colours.append(Colour.from_token(token, position))
        return cls(tuple(colours))

    @classmethod
    def generate(cls, rng: Optional[Random] = None) -> "Sequence":
        # 4 distinct tokens drawn without replacement, then converted
        rng = rng or SystemRandom()
        drawn = rng.sample(TOKENS, CODE_LENGTH)
        return cls(tuple(Colour.from_token(t) for t in drawn))

    def symbols(self) -> List[Colour]:
        return list(self.colours)

    def equals(self, other: "Sequence") -> bool:
        return self == other

    @property
    def tokens(self) -> str:
        return "".join(c.token for c in self.colours)

    def __iter__(self):
        return iter(self.colours)

    def __len__(self) -> int:
        return len(self.colours)

    def __str__(self) -> str:
        return ", ".join(c.label for c in self.colours)


def score_guess(secret: Sequence, guess: Sequence) -> Tuple[int, int]:
    """
    Example:
      secret = Red, Blue, Yellow, Green
      guess  = Red, Green, Blue, Black
      black = 1  (Red in the first slot)
      white = 3  (Red, Blue and Green all appear in the secret)
      Returns a tuple: (white, black)

    Subtract black from white to get the white clues a player is shown.
    """

    # 1. Count exact position matches --> black
    black = 0
    for s, g in zip(secret, guess):
        if s == g:
            black += 1

    # 2. Overlap is the sum of the smaller count for each colour --> white
    secret_counts = Counter(secret)
    guess_counts = Counter(guess)
    white = 0
    for colour, count in secret_counts.items():
        white += min(count, guess_counts[colour])

    return (white, black)


def is_win(secret: Sequence, guess: Sequence) -> bool:
    """Win = all four colours match in order."""
    return secret == guess
