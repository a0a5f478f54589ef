"""Unit tests for /src/othello/rules.py"""

import pytest

from src.core.exceptions import OutOfBoundsError
from src.othello.board import STARTING_NOTATION, Board
from src.othello.discs import PLAYER_COLORS, Color
from src.othello.rules import (
    apply_move,
    count_flips,
    find_brackets,
    has_any_legal_move,
    is_legal_move,
    legal_moves,
    scan_direction,
    winner_by_count,
)
from src.othello.square import Square, all_squares

# White placing a disc on (2, 2) flips north (1 disc), west (1 disc) and south (2 discs)
THREE_DIRECTIONS = "2W5/2B5/WB6/2B5/2B5/2W5/8/8"

# Black surrounded by a ring of white discs
SURROUNDED = "8/8/2WWW3/2WBW3/2WWW3/8/8/8"

# Only (0, 0) is empty. Black can play it, white cannot.
ONE_BLACK_MOVE_LEFT = "/".join(["1WBBBBBB"] + ["BBBBBBBB"] * 7)

ASSORTED_BOARDS = [
    STARTING_NOTATION,
    THREE_DIRECTIONS,
    SURROUNDED,
    ONE_BLACK_MOVE_LEFT,
    "8/8/2B5/2BBB3/2BWB3/3W4/8/8",
    "BWWWWWB1/8/8/8/8/8/8/8",
    "W7/1B6/2B5/3B4/4B3/5B2/6B1/8",
]


# -- SCAN ---
def test_single_bracket_on_fresh_board() -> None:
    board = Board.starting_position()
    brackets = find_brackets(board, Square(2, 3), Color.BLACK)

    assert len(brackets) == 1
    assert brackets[0].direction == (1, 0)
    assert brackets[0].run == (Square(3, 3),)


def test_brackets_in_multiple_directions() -> None:
    board = Board.from_notation(THREE_DIRECTIONS)
    brackets = find_brackets(board, Square(2, 2), Color.WHITE)

    runs = {bracket.direction: bracket.run for bracket in brackets}
    assert runs == {
        (-1, 0): (Square(1, 2),),
        (0, -1): (Square(2, 1),),
        (1, 0): (Square(3, 2), Square(4, 2)),
    }
    assert count_flips(board, Square(2, 2), Color.WHITE) == 4


def test_run_ending_at_edge_is_not_bracketed() -> None:
    """Seven white discs up to the edge of the board: nothing closes them off"""
    board = Board.from_notation("1WWWWWWW/8/8/8/8/8/8/7B")
    assert scan_direction(board, Square(0, 0), Color.BLACK, (0, 1)) is None
    assert not is_legal_move(board, Square(0, 0), Color.BLACK)


def test_run_ending_at_empty_cell_is_not_bracketed() -> None:
    """A black disc further along does not count once the walk hits an empty cell"""
    board = Board.from_notation("1WW1B3/8/8/8/8/8/8/8")
    assert not is_legal_move(board, Square(0, 0), Color.BLACK)
    assert count_flips(board, Square(0, 0), Color.BLACK) == 0


def test_adjacent_own_disc_is_not_a_bracket() -> None:
    """An empty run never brackets"""
    board = Board.from_notation("1B6/8/8/8/8/8/8/8")
    assert find_brackets(board, Square(0, 0), Color.BLACK) == []


def test_occupied_square_is_never_legal() -> None:
    """(3, 2) holds a white disc, followed by another white disc and a black one. Still not a move for black."""
    board = Board.from_notation("8/8/8/2WWB3/8/8/8/8")
    assert find_brackets(board, Square(3, 2), Color.BLACK) == []
    assert not is_legal_move(board, Square(3, 2), Color.BLACK)
    assert count_flips(board, Square(3, 2), Color.BLACK) == 0


@pytest.mark.parametrize("square", [Square(-1, 3), Square(3, 8), Square(8, 8)])
def test_out_of_bounds_square(square: Square) -> None:
    board = Board.starting_position()
    with pytest.raises(OutOfBoundsError):
        is_legal_move(board, square, Color.BLACK)
    with pytest.raises(OutOfBoundsError):
        apply_move(board, square, Color.BLACK)


# -- LEGALITY ---
def test_legal_moves_on_fresh_board() -> None:
    board = Board.starting_position()
    assert legal_moves(board, Color.BLACK) == [
        Square(2, 3),
        Square(3, 2),
        Square(4, 5),
        Square(5, 4),
    ]
    assert legal_moves(board, Color.WHITE) == [
        Square(2, 4),
        Square(3, 5),
        Square(4, 2),
        Square(5, 3),
    ]


@pytest.mark.parametrize("notation", ASSORTED_BOARDS)
def test_legality_agrees_with_flip_count(notation: str) -> None:
    """is_legal_move and count_flips > 0 must agree on every square, for both players"""
    board = Board.from_notation(notation)
    for player in PLAYER_COLORS:
        for square in all_squares():
            assert is_legal_move(board, square, player) == (
                count_flips(board, square, player) > 0
            )


def test_has_any_legal_move() -> None:
    assert has_any_legal_move(Board.starting_position(), Color.BLACK)
    assert has_any_legal_move(Board.starting_position(), Color.WHITE)

    one_move_left = Board.from_notation(ONE_BLACK_MOVE_LEFT)
    assert has_any_legal_move(one_move_left, Color.BLACK)
    assert not has_any_legal_move(one_move_left, Color.WHITE)

    surrounded = Board.from_notation(SURROUNDED)
    assert not has_any_legal_move(surrounded, Color.WHITE)
    assert has_any_legal_move(surrounded, Color.BLACK)


def test_no_moves_on_empty_board() -> None:
    board = Board()
    assert not has_any_legal_move(board, Color.BLACK)
    assert not has_any_legal_move(board, Color.WHITE)


# -- APPLYING MOVES ---
def test_apply_move_on_fresh_board() -> None:
    board = Board.starting_position()
    assert apply_move(board, Square(2, 3), Color.BLACK)

    assert board.get(Square(2, 3)) == Color.BLACK
    assert board.get(Square(3, 3)) == Color.BLACK
    assert board.count_discs() == {Color.BLACK: 4, Color.WHITE: 1}


def test_apply_move_flips_all_directions() -> None:
    board = Board.from_notation(THREE_DIRECTIONS)
    assert apply_move(board, Square(2, 2), Color.WHITE)

    assert board.count_discs() == {Color.BLACK: 0, Color.WHITE: 8}
    for square in [Square(1, 2), Square(2, 1), Square(3, 2), Square(4, 2)]:
        assert board.get(square) == Color.WHITE


@pytest.mark.parametrize(
    "notation, square, player",
    [
        (STARTING_NOTATION, Square(0, 0), Color.BLACK),  # nothing around
        (STARTING_NOTATION, Square(3, 3), Color.BLACK),  # occupied
        (STARTING_NOTATION, Square(2, 4), Color.BLACK),  # legal for white, not for black
        ("1WWWWWWW/8/8/8/8/8/8/7B", Square(0, 0), Color.BLACK),  # run up to the edge
        (SURROUNDED, Square(1, 1), Color.WHITE),
    ],
)
def test_illegal_move_leaves_board_unchanged(
    notation: str, square: Square, player: Color
) -> None:
    board = Board.from_notation(notation)
    before = board.copy()

    assert not apply_move(board, square, player)
    assert board == before


@pytest.mark.parametrize("notation", ASSORTED_BOARDS)
def test_accepted_move_adds_exactly_one_disc(notation: str) -> None:
    """Flipping only changes colors, so the total grows by the placed disc only"""
    for player in PLAYER_COLORS:
        for square in legal_moves(Board.from_notation(notation), player):
            board = Board.from_notation(notation)
            before = sum(board.count_discs().values())
            expected_flips = count_flips(board, square, player)
            player_before = board.count(player)

            assert apply_move(board, square, player)
            assert sum(board.count_discs().values()) == before + 1
            assert board.count(player) == player_before + 1 + expected_flips


# -- SCORING ---
@pytest.mark.parametrize(
    "notation, expected",
    [
        (STARTING_NOTATION, Color.NONE),
        ("/".join(["BBBBBBBB", "WWWWWWWW"] * 4), Color.NONE),
        (ONE_BLACK_MOVE_LEFT, Color.BLACK),
        (SURROUNDED, Color.WHITE),
    ],
)
def test_winner_by_count(notation: str, expected: Color) -> None:
    assert winner_by_count(Board.from_notation(notation)) == expected
