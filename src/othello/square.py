"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Othello is always played on 8x8
BOARD_SIZE = 8

Vector = tuple[int, int]

# The eight compass directions as (row delta, column delta): N, S, E, W, NE, NW, SE, SW
DIRECTIONS: tuple[Vector, ...] = (
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, 1),
    (-1, -1),
    (1, 1),
    (1, -1),
)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def step(self, direction: Vector) -> Square:
        """Neighbouring square in the given direction (may well be off the board)"""
        return Square(self.row + direction[0], self.col + direction[1])

    def to_label(self) -> str:
        """Human-readable, 1-based: Square(2, 3) reads '(3, 4)'"""
        return f"({self.row + 1}, {self.col + 1})"

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


def all_squares() -> list[Square]:
    """All 64 squares in row-major order (lowest row first, then lowest column)."""
    return [Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
