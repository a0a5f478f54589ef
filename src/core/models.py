"""
Contract for the Service layer.

Transport-safe snapshot of a game session. The service layer hands this to its collaborators (move logger, API layer)
so none of them have to touch the mutable GameSession itself.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# Type aliases to make SessionSnapshot easier to read
PlayerColor = str
Coordinate = tuple[int, int]


@dataclass
class SessionSnapshot:
    """Othello specific data + session handling info (player label, timestamps)"""

    board: str
    current_player: PlayerColor
    last_move: Optional[Coordinate]
    winner: Optional[str]
    move_log: list[str]
    black_player: str
    status: str
    disc_counts: dict[PlayerColor, int] = field(default_factory=dict)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
