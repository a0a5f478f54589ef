"""Orchestration of communication from API router to the game sessions and the move logger (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    AgentMoveRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    ResetGameRequest,
    StartGameRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import SessionSnapshot
from src.db.repository import SessionRepository
from src.othello.session import GameSession
from src.services.move_logger import LoggingMoveLogger, MoveLogger

logger = logging.getLogger(__name__)


class OthelloService:
    """Orchestration of layers for othello games."""

    def __init__(
        self, repository: SessionRepository, move_logger: MoveLogger | None = None
    ) -> None:
        self.repo = repository
        self.move_logger = move_logger or LoggingMoveLogger()

    # -- API routes logic ---
    def create_new_game(self, request: StartGameRequest) -> GameResponse:
        """Player requested to start a new game (playing black against the agent)."""

        session = GameSession.new_game(request.player_name)
        game_id = self.repo.create_session(session)
        snapshot = session.to_snapshot()
        logger.info("Created game %s for %s", game_id, request.player_name)

        self.move_logger.record_game_started(snapshot)
        return self._create_game_response(game_id, snapshot)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to find out whose turn it is / if the game has ended.
        """
        session = self._fetch_session(request.game_id)
        return self._create_game_response(request.game_id, session.to_snapshot())

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Legal squares for the player to move."""
        session = self._fetch_session(request.game_id)
        snapshot = session.to_snapshot()
        return LegalMovesResponse(
            game_id=request.game_id,
            color=snapshot.current_player,
            legal_moves=[square.to_tuple() for square in session.legal_moves()],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Human move attempt. Errors raised by the session propagate unchanged (nothing was changed in that case)."""
        session = self._fetch_session(request.game_id)

        snapshot = session.apply_human_move(request.row, request.col)
        self.move_logger.record_move(snapshot, (request.row, request.col))
        self._record_if_finished(snapshot)

        return self._create_game_response(request.game_id, snapshot)

    def make_agent_move(self, request: AgentMoveRequest) -> GameResponse:
        """Let the agent play (or pass) its turn."""
        session = self._fetch_session(request.game_id)

        snapshot = session.apply_agent_move()
        self._record_if_finished(snapshot)

        return self._create_game_response(request.game_id, snapshot)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Start the game over in the same session."""
        session = self._fetch_session(request.game_id)

        snapshot = session.reset()
        self.move_logger.record_game_started(snapshot)

        return self._create_game_response(request.game_id, snapshot)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to drop a game."""
        if self.repo.delete_session(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _record_if_finished(self, snapshot: SessionSnapshot) -> None:
        """Log the total game duration, exactly once: on the move that ended the game."""
        if snapshot.finished_at is None or snapshot.started_at is None:
            return
        duration_minutes = (
            snapshot.finished_at - snapshot.started_at
        ).total_seconds() / 60
        self.move_logger.record_game_finished(snapshot, duration_minutes)

    def _create_game_response(
        self, game_id: UUID, snapshot: SessionSnapshot
    ) -> GameResponse:
        """Convert info in SessionSnapshot to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            black_player=snapshot.black_player,
            board=snapshot.board,
            current_player=snapshot.current_player,
            last_move=snapshot.last_move,
            winner=snapshot.winner,
            status=snapshot.status,
            score=snapshot.disc_counts,
            move_history=snapshot.move_log,
            started_at=snapshot.started_at,
            finished_at=snapshot.finished_at,
        )

    def _fetch_session(self, game_id: UUID) -> GameSession:
        """Attempt to find the game in the repository and raise error if it fails."""
        session = self.repo.get_session(game_id)
        if session is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return session
