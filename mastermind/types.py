"""
Labels for clarity.
"""

from typing import Literal

Token = str  # one of "r", "o", "y", "b", "g", "B", "w", "x"
GameStatus = Literal["in_progress", "won", "lost"]
RandomSource = Literal["local", "random.org"]
