"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Enables multiple rendering backends: Pygame, headless, terminal, etc.
    """

    def render(self, state: GameState, settings: CourtSettings) -> None:
        """
        Render a single frame of the game.

        Called once per tick, including ticks after the game has ended, so the
        final frame is always shown.

        Args:
            state: State to draw, must not be modified
            settings: Static sizes of the ball, the paddle and the court
        """
        ...
