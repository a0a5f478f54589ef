"""Runtime configuration. Every value can be overridden through an environment variable."""

import logging
import os
from typing import Optional

LOG_LEVEL = os.getenv("OTHELLO_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv(
    "OTHELLO_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Upper limit of games kept in memory by the session repository (least recently used get evicted)
MAX_SESSIONS = int(os.getenv("OTHELLO_MAX_SESSIONS", "50"))

# Label used for the black player if none is supplied
DEFAULT_PLAYER_LABEL = os.getenv("OTHELLO_DEFAULT_PLAYER", "Black")

MOVE_LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Console logging for the application. Meant to be called once by whatever process hosts the service."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
