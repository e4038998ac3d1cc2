"""
Core module of Paddle Court
"""

from paddle_court.core.edits import no_op_edit
from paddle_court.core.edits import press_edit
from paddle_court.core.edits import release_edit
from paddle_court.core.engine import FrameEngine
from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import Direction
from paddle_court.core.entities import GameState
from paddle_court.core.entities import StateEdit
from paddle_court.core.session import GameSession
from paddle_court.core.session import SessionStatus
from paddle_court.core.timer import ThreadTicker

__all__ = [
    "CourtSettings",
    "Direction",
    "FrameEngine",
    "GameSession",
    "GameState",
    "SessionStatus",
    "StateEdit",
    "ThreadTicker",
    "no_op_edit",
    "press_edit",
    "release_edit",
]
