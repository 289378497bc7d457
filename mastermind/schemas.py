"""
Explicit validation & Pydantic models
- Describe what a finished turn and a whole game look like from the outside.
- Used for the end-of-game summary and for debug logging (model_dump_json).
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .engine import CODE_LENGTH, TOKENS


def _check_tokens(tokens: List[str]) -> List[str]:
    if len(tokens) != CODE_LENGTH:
        raise ValueError(f"A code has exactly {CODE_LENGTH} symbols.")
    for token in tokens:
        if token not in TOKENS:
            raise ValueError(f"Each symbol must be one of {', '.join(TOKENS)}.")
    return tokens


# 1. Describes the feedback for a single turn
class GuessEntryOut(BaseModel):
    turn: int = Field(..., ge=1, description="Turn number the guess was made on")
    guess: List[str] = Field(..., description="The player's guess as colour tokens")
    white: int = Field(..., ge=0, le=CODE_LENGTH, description="Right colour, wrong position (blacks not included)")
    black: int = Field(..., ge=0, le=CODE_LENGTH, description="Right colour, right position")
    message: str = Field(..., description="Feedback message shown to the player")
    timestamp: float = Field(..., description="When the guess was made")

    @field_validator("guess")
    @classmethod
    def validate_guess(cls, guess: List[str]) -> List[str]:
        return _check_tokens(guess)


# 2. Represents the overall state of the game
class GameState(BaseModel):
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")
    turn: int = Field(..., ge=0, description="Guesses made so far")
    turns_left: int = Field(..., ge=0, description="How many guesses remain")
    history: List[GuessEntryOut] = Field(..., description="All guesses made so far with feedback")
    code: Optional[List[str]] = Field(None, description="The secret (only revealed if game is over)")

    @field_validator("code")
    @classmethod
    def validate_code(cls, code: Optional[List[str]]) -> Optional[List[str]]:
        if code is None:
            return code
        return _check_tokens(code)
