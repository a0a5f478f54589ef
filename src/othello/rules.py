"""
Move legality, disc flipping, and scoring.

Key idea: every rule is derived from one non-mutating scan (find_brackets). Legality checks, the flip count used by the agent,
and applying a move all reuse it, so they can never disagree with each other.

All functions are pure with respect to their inputs, except commit_move / apply_move which mutate the given board.
"""

from dataclasses import dataclass
from typing import Protocol

from src.core.exceptions import OutOfBoundsError
from src.othello.discs import Color, opponent
from src.othello.square import DIRECTIONS, Square, Vector, all_squares


class Board(Protocol):
    """Just the parts the rules need"""

    def get(self, square: Square) -> Color: ...
    def set(self, square: Square, color: Color) -> None: ...
    def count_discs(self) -> dict[Color, int]: ...


@dataclass(frozen=True)
class Bracket:
    """A run of opponent discs, in one direction, closed off by a disc of the player placing the new disc."""

    direction: Vector
    run: tuple[Square, ...]


# --- THE SCAN ---
def scan_direction(
    board: Board, square: Square, player: Color, direction: Vector
) -> Bracket | None:
    """
    Walk outward from square while the cells hold the opponent's discs.
    ----

    The walk stops at the edge of the board, at an empty cell, or at one of the player's own discs.
    Only the last case closes off the run, and only if the run is not empty.
    """
    opponent_color = opponent(player)
    run: list[Square] = []
    current = square.step(direction)
    while current.is_within_bounds():
        cell = board.get(current)
        if cell == opponent_color:
            run.append(current)
            current = current.step(direction)
            continue
        if cell == player and run:
            return Bracket(direction, tuple(run))
        return None
    # walked off the board
    return None


def find_brackets(board: Board, square: Square, player: Color) -> list[Bracket]:
    """All directions in which placing a disc on square would flip discs. Empty for an occupied square."""
    _assert_within_bounds(square)
    if board.get(square) != Color.NONE:
        return []

    brackets: list[Bracket] = []
    for direction in DIRECTIONS:
        bracket = scan_direction(board, square, player, direction)
        if bracket is not None:
            brackets.append(bracket)
    return brackets


# --- QUERIES ---
def is_legal_move(board: Board, square: Square, player: Color) -> bool:
    return bool(find_brackets(board, square, player))


def count_flips(board: Board, square: Square, player: Color) -> int:
    """Number of discs that would change color. Zero for an occupied square (and for any illegal move)."""
    return sum(len(bracket.run) for bracket in find_brackets(board, square, player))


def legal_moves(board: Board, player: Color) -> list[Square]:
    """Legal squares in row-major order"""
    return [square for square in all_squares() if is_legal_move(board, square, player)]


def has_any_legal_move(board: Board, player: Color) -> bool:
    return any(is_legal_move(board, square, player) for square in all_squares())


# --- MUTATION ---
def commit_move(
    board: Board, square: Square, player: Color, brackets: list[Bracket]
) -> list[Square]:
    """Place the disc and flip every bracketed run. Returns the flipped squares.

    NOTE: the brackets must have been computed on this very board, before any change was made to it.
    """
    board.set(square, player)
    flipped: list[Square] = []
    for bracket in brackets:
        for run_square in bracket.run:
            board.set(run_square, player)
            flipped.append(run_square)
    return flipped


def apply_move(board: Board, square: Square, player: Color) -> bool:
    """
    Two phases: first determine all brackets without touching the board, then commit.
    An illegal move therefore leaves the board exactly as it was.
    """
    brackets = find_brackets(board, square, player)
    if not brackets:
        return False
    commit_move(board, square, player, brackets)
    return True


# --- SCORING ---
def winner_by_count(board: Board) -> Color:
    """Player with strictly more discs. Color.NONE means a draw."""
    counts = board.count_discs()
    if counts[Color.BLACK] > counts[Color.WHITE]:
        return Color.BLACK
    if counts[Color.WHITE] > counts[Color.BLACK]:
        return Color.WHITE
    return Color.NONE


def _assert_within_bounds(square: Square) -> None:
    if not square.is_within_bounds():
        raise OutOfBoundsError(f"Square {square.to_tuple()} is not on the board.")
