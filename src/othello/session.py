"""
The GameSession is the entrypoint into the domain layer for the service layer.
It owns the board and the move log of one game, and runs the turn logic after every move -->
the service layer only ever sees the resulting SessionSnapshot.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Optional, Self

from src.core.config import DEFAULT_PLAYER_LABEL
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
    OutOfBoundsError,
)
from src.core.models import SessionSnapshot
from src.core.shared_types import Color as PlayerColor
from src.core.shared_types import Status as SnapshotStatus
from src.core.shared_types import Winner as SnapshotWinner
from src.othello.agent import GreedyAgent
from src.othello.board import Board
from src.othello.discs import Color, opponent
from src.othello.history import LogEntry
from src.othello.rules import (
    commit_move,
    find_brackets,
    has_any_legal_move,
    legal_moves,
    winner_by_count,
)
from src.othello.square import Square

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    TERMINAL = auto()


class Winner(Enum):
    BLACK = auto()
    WHITE = auto()
    DRAW = auto()


COLOR_TO_WINNER: dict[Color, Winner] = {
    Color.BLACK: Winner.BLACK,
    Color.WHITE: Winner.WHITE,
    Color.NONE: Winner.DRAW,
}

STATUS_TO_SNAPSHOT: dict[Status, SnapshotStatus] = {
    Status.IN_PROGRESS: SnapshotStatus.IN_PROGRESS,
    Status.TERMINAL: SnapshotStatus.FINISHED,
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GameSession:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Color
    log: list[LogEntry]
    black_player: str
    status: Status = Status.IN_PROGRESS
    winner: Optional[Winner] = None
    last_move: Optional[Square] = None
    started_at: datetime = field(default_factory=utc_now)
    finished_at: Optional[datetime] = None
    agent: GreedyAgent = field(default_factory=GreedyAgent)
    # one lock per session: check-then-apply, the turn switch and the game over check happen as one step
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    @classmethod
    def new_game(cls, black_player: Optional[str] = None) -> Self:
        """Standard starting layout, Black to move."""
        return cls(
            board=Board.starting_position(),
            current_player=Color.BLACK,
            log=[],
            black_player=black_player or DEFAULT_PLAYER_LABEL,
        )

    @property
    def human_color(self) -> Color:
        return opponent(self.agent.color)

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def start_new_game(self, black_player: Optional[str] = None) -> SessionSnapshot:
        """Start over with a (possibly) new player label."""
        with self._lock:
            self.black_player = black_player or DEFAULT_PLAYER_LABEL
            self._restart()
            logger.info("New game started for %s", self.black_player)
            return self.to_snapshot()

    def reset(self) -> SessionSnapshot:
        """Start over, keeping the player label."""
        with self._lock:
            self._restart()
            logger.info("Game reset for %s", self.black_player)
            return self.to_snapshot()

    def legal_moves(self) -> list[Square]:
        """Legal squares of the player to move (nothing once the game is over)."""
        with self._lock:
            if self.is_over:
                return []
            return legal_moves(self.board, self.current_player)

    def apply_human_move(self, row: int, col: int) -> SessionSnapshot:
        """
        Attempt a move of the human player
        -----

        1. the game must still be in progress
        2. the square must be on the board
        3. it must be the human's turn
        4. the move must bracket at least one opponent disc

        Any of these failing raises, and leaves the session exactly as it was.
        """
        with self._lock:
            self._assert_in_progress()

            square = Square(row, col)
            if not square.is_within_bounds():
                logger.debug("Rejected out of bounds move %s", (row, col))
                raise OutOfBoundsError(f"Square {(row, col)} is not on the board.")

            self._assert_your_turn(self.human_color)

            player = self.current_player
            brackets = find_brackets(self.board, square, player)
            if not brackets:
                logger.debug("Rejected illegal move %s for %s", (row, col), player.name)
                raise IllegalMoveError(
                    f"Move not allowed: {square.to_label()} does not flip any discs."
                )

            flipped = commit_move(self.board, square, player, brackets)
            self._record_move(player, square, len(flipped), by_agent=False)
            self._switch_player()
            self.check_game_over()
            return self.to_snapshot()

    def apply_agent_move(self) -> SessionSnapshot:
        """
        Let the greedy agent play its turn
        -----

        If no square flips anything, the agent passes and the board is left untouched.
        Either way the turn goes to the other player before the game over check runs.
        """
        with self._lock:
            self._assert_in_progress()
            self._assert_your_turn(self.agent.color)

            player = self.agent.color
            square = self.agent.select_move(self.board)
            if square is None:
                self._log(LogEntry.agent_pass(player))
                logger.debug("%s (AI) passes", player.name)
            else:
                brackets = find_brackets(self.board, square, player)
                flipped = commit_move(self.board, square, player, brackets)
                self._record_move(player, square, len(flipped), by_agent=True)

            self._switch_player()
            self.check_game_over()
            return self.to_snapshot()

    def check_game_over(self) -> None:
        """
        Turn logic after a move.
        ----

        * Neither side can move: game over, most discs wins.
        * Only one side cannot move: it passes, the other side is to move.
        * Both can move: nothing to do (player was already switched by the caller).

        NOTE: a full board, or one side being out of moves, does NOT end the game by itself. Only both sides being stuck does.
        Once a winner is set this is a no-op.
        """
        with self._lock:
            if self.is_over:
                return

            black_can_move = has_any_legal_move(self.board, Color.BLACK)
            white_can_move = has_any_legal_move(self.board, Color.WHITE)

            if not black_can_move and not white_can_move:
                self._finish()
            elif not black_can_move:
                self._log(LogEntry.forced_pass(Color.BLACK))
                self.current_player = Color.WHITE
            elif not white_can_move:
                self._log(LogEntry.forced_pass(Color.WHITE))
                self.current_player = Color.BLACK

    def to_snapshot(self) -> SessionSnapshot:
        """Encode into the format the Service layer uses"""
        with self._lock:
            counts = self.board.count_discs()
            return SessionSnapshot(
                board=self.board.to_notation(),
                current_player=PlayerColor[self.current_player.name],
                last_move=self.last_move.to_tuple() if self.last_move else None,
                winner=SnapshotWinner[self.winner.name] if self.winner else None,
                move_log=[entry.label for entry in self.log],
                black_player=self.black_player,
                status=STATUS_TO_SNAPSHOT[self.status],
                disc_counts={color.name.lower(): count for color, count in counts.items()},
                started_at=self.started_at,
                finished_at=self.finished_at,
            )

    # -- PRIVATE HELPERS ---
    def _restart(self) -> None:
        self.board.reset()
        self.current_player = Color.BLACK
        self.log = []
        self.status = Status.IN_PROGRESS
        self.winner = None
        self.last_move = None
        self.started_at = utc_now()
        self.finished_at = None

    def _assert_in_progress(self) -> None:
        if self.is_over:
            raise GameStateError(
                f"Game is over. winner: {self.winner.name.lower() if self.winner else None}"
            )

    def _assert_your_turn(self, color: Color) -> None:
        if self.current_player != color:
            raise NotYourTurnError(
                f"It is not {color.name.lower()}'s turn. Waiting for {self.current_player.name.lower()} to move first."
            )

    def _record_move(
        self, player: Color, square: Square, flips: int, by_agent: bool
    ) -> None:
        self.last_move = square
        self._log(LogEntry.move(player, square, by_agent=by_agent))
        logger.debug(
            "%s played %s, flipping %d disc(s)", player.name, square.to_label(), flips
        )

    def _switch_player(self) -> None:
        self.current_player = opponent(self.current_player)

    def _log(self, entry: LogEntry) -> None:
        self.log.append(entry)

    def _finish(self) -> None:
        counts = self.board.count_discs()
        winning_color = winner_by_count(self.board)
        self.winner = COLOR_TO_WINNER[winning_color]
        self.status = Status.TERMINAL
        self.finished_at = utc_now()
        self._log(LogEntry.result(winning_color, counts))
        logger.info(
            "Game over for %s: %s (black %d, white %d)",
            self.black_player,
            self.winner.name.lower(),
            counts[Color.BLACK],
            counts[Color.WHITE],
        )
