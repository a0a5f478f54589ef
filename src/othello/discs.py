"""Defines the disc colors (an empty cell is Color.NONE)"""

from enum import Enum, auto


class Color(Enum):
    NONE = auto()
    BLACK = auto()
    WHITE = auto()


PLAYER_COLORS: tuple[Color, ...] = (Color.BLACK, Color.WHITE)

NOTATION_TO_COLOR: dict[str, Color] = {
    "B": Color.BLACK,
    "W": Color.WHITE,
}

COLOR_TO_NOTATION: dict[Color, str] = {
    value: key for key, value in NOTATION_TO_COLOR.items()
}


def opponent(color: Color) -> Color:
    """Swap black and white. An empty cell has no opponent."""
    if color == Color.BLACK:
        return Color.WHITE
    if color == Color.WHITE:
        return Color.BLACK
    raise ValueError(f"{color} is not a player color.")


def color_name(color: Color) -> str:
    """'Black' / 'White', as used in the move log"""
    return color.name.capitalize()
