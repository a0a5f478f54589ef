"""
Collaborator that records moves and durations somewhere outside the game (a spreadsheet, a log file, ...).

The service layer calls it with SessionSnapshots. The domain layer does not know it exists.
"""

import logging
from datetime import datetime
from typing import Optional, Protocol

from src.core.config import MOVE_LOG_TIMESTAMP_FORMAT
from src.core.models import Coordinate, SessionSnapshot


class MoveLogger(Protocol):
    """Receives one record per game start, accepted human move, and game end"""

    def record_game_started(self, snapshot: SessionSnapshot) -> None: ...

    def record_move(self, snapshot: SessionSnapshot, square: Coordinate) -> None: ...

    def record_game_finished(
        self, snapshot: SessionSnapshot, duration_minutes: float
    ) -> None: ...


class LoggingMoveLogger:
    """
    Writes every record as one row to a logger
    ---

    Columns: player | column | row | description | value | timestamp
    (coordinates 1-based, one column per field, spreadsheet style)
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("othello.moves")

    def record_game_started(self, snapshot: SessionSnapshot) -> None:
        self._append_row(["=== NEW GAME STARTED ===", "", "", "", "", self._timestamp()])

    def record_move(self, snapshot: SessionSnapshot, square: Coordinate) -> None:
        row, col = square
        self._append_row(
            [snapshot.black_player, str(col + 1), str(row + 1), "", "", self._timestamp()]
        )

    def record_game_finished(
        self, snapshot: SessionSnapshot, duration_minutes: float
    ) -> None:
        self._append_row(
            [
                snapshot.black_player,
                "",
                "",
                "Total Game Duration (min)",
                f"{duration_minutes:.2f}",
                self._timestamp(),
            ]
        )

    def _append_row(self, values: list[str]) -> None:
        self.logger.info(" | ".join(values))

    def _timestamp(self) -> str:
        return datetime.now().strftime(MOVE_LOG_TIMESTAMP_FORMAT)
