"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Optional

import pytest

from src.othello.board import Board
from src.othello.discs import Color
from src.othello.session import GameSession


@pytest.fixture
def session_from_notation() -> Callable[[str, Color, Optional[str]], GameSession]:
    """Call the inner function with a board notation and the player to move"""

    def _create_session(
        notation: str, current_player: Color = Color.BLACK, black_player: Optional[str] = "Tester"
    ) -> GameSession:
        session = GameSession.new_game(black_player)
        session.board = Board.from_notation(notation)
        session.current_player = current_player
        return session

    return _create_session


@pytest.fixture
def new_session() -> GameSession:
    return GameSession.new_game("Tester")
