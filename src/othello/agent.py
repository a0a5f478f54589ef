"""Greedy computer opponent: always takes the move that flips the most discs right now."""

from dataclasses import dataclass
from typing import Optional

from src.othello.discs import Color
from src.othello.rules import Board, count_flips
from src.othello.square import Square, all_squares


@dataclass
class GreedyAgent:
    color: Color = Color.WHITE

    def select_move(self, board: Board) -> Optional[Square]:
        """
        Score every square with the number of discs it would flip.
        ----

        * Only a strictly greater score replaces the current best, so ties go to the first square found in row-major order.
        * Occupied squares score zero and can therefore never be picked.
        * None means there is nothing to flip anywhere: the agent has to pass.
        """
        best_square: Optional[Square] = None
        best_flips = 0
        for square in all_squares():
            flips = count_flips(board, square, self.color)
            if flips > best_flips:
                best_flips = flips
                best_square = square
        return best_square
