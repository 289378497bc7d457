"""
- Keep the player's .env / environment out of the tests
- Provide a console fixture that writes into a buffer instead of the terminal
- Provide a feed_input fixture that scripts what the "player" types
"""
import io
import pytest
from typing import Callable, List

from rich.console import Console

from mastermind.engine import Sequence

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "MASTERMIND_LOG_LEVEL",
        "MASTERMIND_RANDOM_SOURCE",
        "MASTERMIND_RANDOM_TIMEOUT",
        "MASTERMIND_SHOW_CODE",
    ):
        monkeypatch.delenv(name, raising=False)
    # a .env in the working directory must not leak in either
    monkeypatch.setattr("mastermind.config.load_dotenv", lambda *a, **k: False)

@pytest.fixture
def console() -> Console:
    # No colours, no wrapping surprises: output reads like plain text
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)

@pytest.fixture
def output(console) -> Callable[[], str]:
    return lambda: console.file.getvalue()

@pytest.fixture
def feed_input(monkeypatch) -> Callable[[List[str]], None]:
    """
    Replace builtins.input with a scripted list of lines.
    Running out of lines behaves like the player pressing Ctrl-D.
    """
    def _feed(lines: List[str]) -> None:
        remaining = iter(lines)

        def fake_input(*args):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
    return _feed

@pytest.fixture
def rbyg() -> Sequence:
    # Red, Blue, Yellow, Green
    return Sequence.parse("rbyg")
