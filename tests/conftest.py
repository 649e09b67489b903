"""
Pytest fixtures for tictactoe_score tests.
"""

import os

import pytest

# widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tictactoe_score.game_logic import GameEngine


def play(engine, moves):
    """Apply moves in order and return the list of results."""
    return [engine.apply_move(i) for i in moves]


@pytest.fixture
def engine() -> GameEngine:
    """Fresh engine, empty board, X to move."""
    return GameEngine()


@pytest.fixture
def won_engine(engine) -> GameEngine:
    """Engine where X has just taken the top row."""
    play(engine, [0, 3, 1, 4, 2])
    return engine


@pytest.fixture
def drawn_engine(engine) -> GameEngine:
    """Engine whose board is full with no line."""
    play(engine, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    return engine


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
