"""The Board holds the 64 cells and nothing else. Which moves are allowed is up to the rules module."""

from dataclasses import dataclass, field
from typing import Self

from src.core.exceptions import InvalidNotationError, OutOfBoundsError
from src.othello.discs import (
    COLOR_TO_NOTATION,
    NOTATION_TO_COLOR,
    PLAYER_COLORS,
    Color,
)
from src.othello.square import BOARD_SIZE, Square, all_squares

STARTING_DISCS: dict[Square, Color] = {
    Square(3, 3): Color.WHITE,
    Square(3, 4): Color.BLACK,
    Square(4, 3): Color.BLACK,
    Square(4, 4): Color.WHITE,
}

STARTING_NOTATION = "8/8/8/3WB3/3BW3/8/8/8"


def _empty_position() -> dict[Square, Color]:
    return {square: Color.NONE for square in all_squares()}


@dataclass
class Board:
    position: dict[Square, Color] = field(default_factory=_empty_position)

    @classmethod
    def starting_position(cls) -> Self:
        board = cls()
        board.reset()
        return board

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """Construct a board from its row notation.

        Similar to the board part of a FEN string in chess:
        ex. starting position: 8/8/8/3WB3/3BW3/8/8/8
        means:
        * rows are listed top (row 0) to bottom (row 7), separated by slashes
        * within a row, the first character is column 0
        * 'B' is a black disc, 'W' a white disc
        * a digit denotes that many consecutive empty cells
        """
        rows = notation.strip().split("/")
        if len(rows) != BOARD_SIZE:
            raise InvalidNotationError(
                f"Expected {BOARD_SIZE} rows separated by '/', got {len(rows)}: {notation!r}"
            )

        position: dict[Square, Color] = {}
        for row, row_notation in enumerate(rows):
            col = 0
            for character in row_notation:
                if character.isdigit():
                    # A number denotes the amount of empty cells after each other
                    for _ in range(int(character)):
                        position[Square(row, col)] = Color.NONE
                        col += 1
                elif character.upper() in NOTATION_TO_COLOR:
                    position[Square(row, col)] = NOTATION_TO_COLOR[character.upper()]
                    col += 1
                else:
                    raise InvalidNotationError(
                        f"Unknown character {character!r} in row {row}: {row_notation!r}"
                    )
            if col != BOARD_SIZE:
                raise InvalidNotationError(
                    f"Row {row} describes {col} cells instead of {BOARD_SIZE}: {row_notation!r}"
                )
        return cls(position)

    def to_notation(self) -> str:
        """Rows are separated by slashes."""
        return "/".join(self._row_to_notation(row) for row in range(BOARD_SIZE))

    def _row_to_notation(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_SIZE):
            color = self.get(Square(row, col))
            if color == Color.NONE:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(COLOR_TO_NOTATION[color])

        # an empty row still gets its number
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def reset(self) -> None:
        """Clear all cells, then place the four starting discs."""
        for square in self.position:
            self.position[square] = Color.NONE
        self.position.update(STARTING_DISCS)

    def get(self, square: Square) -> Color:
        self._assert_within_bounds(square)
        return self.position[square]

    def set(self, square: Square, color: Color) -> None:
        self._assert_within_bounds(square)
        self.position[square] = color

    def copy(self) -> Self:
        return type(self)(dict(self.position))

    def locate_color(self, color: Color) -> list[Square]:
        return [square for square, cell in self.position.items() if cell == color]

    def empty_squares(self) -> list[Square]:
        return self.locate_color(Color.NONE)

    def is_full(self) -> bool:
        return not self.empty_squares()

    def count(self, color: Color) -> int:
        return len(self.locate_color(color))

    def count_discs(self) -> dict[Color, int]:
        """Tally the discs each player has on the board"""
        return {color: self.count(color) for color in PLAYER_COLORS}

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise OutOfBoundsError(
                f"Square {square.to_tuple()} is not on the {BOARD_SIZE}x{BOARD_SIZE} board."
            )
