"""
Testing the terminal loop end to end
- Trick: replace main.fetch_code so the secret is predictable.
- The player's keystrokes come from the feed_input fixture (see conftest).
"""

import pytest

import mastermind.main as app_main
from mastermind.config import Settings
from mastermind.engine import Sequence
from mastermind.store import Game

# 1. Helper: a fake fetch_code that ignores randomness and always gives Red, Blue, Yellow, Green
def fake_fetch_code(source="local", timeout=3.0):
    return Sequence.parse("rbyg")

@pytest.fixture(autouse=True)
def fixed_secret(monkeypatch):
    # Patch the bound symbol that main.py actually uses
    monkeypatch.setattr(app_main, "fetch_code", fake_fetch_code)

def test_welcome_banner_and_legend(console, output, feed_input):
    feed_input([])

    assert app_main.main(settings=Settings(), console=console) == 0

    text = output()
    assert "Welcome to MasterMind!" in text
    for token, label in [("r", "Red"), ("o", "Orange"), ("y", "Yellow"), ("b", "Blue"),
                         ("g", "Green"), ("B", "Brown"), ("w", "White"), ("x", "Black")]:
        assert token in text
        assert label in text

def test_win_after_feedback(console, output, feed_input):
    """
    Flow:
    1) Partly right guess -> clue line.
    2) Disjoint guess -> 'completely wrong'.
    3) Exact guess -> win on turn 3.
    """
    feed_input(["rgbx", "woBx", "rbyg"])

    assert app_main.main(settings=Settings(), console=console) == 0

    text = output()
    assert "Please enter your guess" in text
    assert "Your guess: Red, Green, Blue, Black" in text
    assert "You got 2 white clues and 1 black clues" in text
    assert "Your guess was completely wrong!" in text
    assert "You won on turn 3" in text
    assert "You lost" not in text

def test_invalid_input_does_not_use_a_turn(console, output, feed_input):
    game = Game(code=Sequence.parse("rbyg"))
    feed_input(["rb", "rbzg", "rbyg"])

    app_main.play(console, game)

    text = output()
    assert "Invalid guess" in text
    assert "Please enter 4 symbols, but got 2." in text
    assert "Unknown symbol 'z' at position 3." in text
    assert game.won is True
    assert game.turn == 1
    assert "You won on turn 1" in text

def test_loss_after_twelve_turns_prints_the_code(console, output, feed_input):
    feed_input(["xxxx"] * 12 + ["rbyg"])

    assert app_main.main(settings=Settings(), console=console) == 0

    text = output()
    assert text.count("Your guess was completely wrong!") == 12
    assert "You lost! The code was Red, Blue, Yellow, Green" in text
    assert "You won" not in text

def test_end_of_input_says_goodbye(console, output, feed_input):
    game = Game(code=Sequence.parse("rbyg"))
    feed_input(["rrrr"])

    app_main.play(console, game)

    assert "Goodbye!" in output()
    assert game.status == "in_progress"
    assert game.turn == 1

def test_show_code_debug_setting(console, output, feed_input):
    feed_input(["rbyg"])

    app_main.main(settings=Settings(show_code=True), console=console)

    assert "Secret (debug): Red, Blue, Yellow, Green" in output()

def test_ctrl_c_says_goodbye_and_exits_cleanly(console, output, monkeypatch):
    def interrupted(*args):
        raise KeyboardInterrupt
    monkeypatch.setattr("builtins.input", interrupted)

    assert app_main.main(settings=Settings(), console=console) == 0

    text = output()
    assert "Goodbye!" in text
    assert "You won" not in text
    assert "You lost" not in text
