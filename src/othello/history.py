"""Entries of a game's move log. The log is append-only and kept in chronological order."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.othello.discs import Color, color_name, opponent
from src.othello.square import Square


class EntryKind(Enum):
    MOVE = auto()
    PASS = auto()
    RESULT = auto()


@dataclass(frozen=True)
class LogEntry:
    kind: EntryKind
    label: str
    player: Optional[Color] = None
    square: Optional[Square] = None

    @classmethod
    def move(cls, player: Color, square: Square, by_agent: bool = False) -> Self:
        """ex. 'Black: (3, 4)' or 'White (AI): (5, 6)'"""
        return cls(
            EntryKind.MOVE,
            f"{_actor(player, by_agent)}: {square.to_label()}",
            player,
            square,
        )

    @classmethod
    def agent_pass(cls, player: Color) -> Self:
        """The agent found nothing to flip anywhere."""
        return cls(
            EntryKind.PASS,
            f"{_actor(player, by_agent=True)} has no valid moves and passes.",
            player,
        )

    @classmethod
    def forced_pass(cls, player: Color) -> Self:
        """Recorded by the turn logic when exactly one side has run out of moves."""
        return cls(
            EntryKind.PASS,
            f"{color_name(player)} has no valid moves - turn passes to {color_name(opponent(player))}.",
            player,
        )

    @classmethod
    def result(cls, winner: Color, counts: dict[Color, int]) -> Self:
        """Color.NONE as winner means a draw."""
        if winner == Color.NONE:
            return cls(EntryKind.RESULT, "It's a draw!")
        loser = opponent(winner)
        return cls(
            EntryKind.RESULT,
            f"{color_name(winner)} wins! ({counts[winner]} vs {counts[loser]})",
        )

    @property
    def is_pass(self) -> bool:
        return self.kind == EntryKind.PASS


def _actor(player: Color, by_agent: bool) -> str:
    return f"{color_name(player)} (AI)" if by_agent else color_name(player)
