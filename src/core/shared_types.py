"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# --- NOTE the domain layer has its own Color enum (with NONE for an empty cell). These string versions are what crosses the boundaries.


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"


class Winner(StrEnum):
    BLACK = "black"
    WHITE = "white"
    DRAW = "draw"
