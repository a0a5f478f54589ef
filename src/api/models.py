"""Requests and Response models"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status, Winner

PlayerColor = str
Coordinate = tuple[int, int]


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    player_name: str

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidRequestError("Enter a player name to start a game.")
        return name


class MoveRequest(BaseModel):
    # NOTE: no range check here. Coordinates off the board are rejected by the game session itself.
    game_id: UUID
    row: int
    col: int


class AgentMoveRequest(BaseModel):
    game_id: UUID


class ResetGameRequest(BaseModel):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    black_player: str
    board: str
    current_player: Color
    last_move: Optional[Coordinate]
    winner: Optional[Winner]
    status: Status
    score: dict[PlayerColor, int]
    move_history: list[str]
    started_at: Optional[datetime]
    finished_at: Optional[datetime]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Color
    legal_moves: list[Coordinate]
