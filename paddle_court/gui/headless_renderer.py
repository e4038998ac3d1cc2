"""
Renderer that keeps frames in memory instead of drawing them
"""

from collections import deque

from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import GameState


class HeadlessRenderer:
    """Records the last rendered frames, for tests and runs without a display"""

    def __init__(self, max_frames: int | None = None):
        self.frames: deque[GameState] = deque(maxlen=max_frames)
        self.frame_count = 0

    def render(self, state: GameState, settings: CourtSettings) -> None:
        self.frames.append(state)
        self.frame_count += 1

    @property
    def last_frame(self) -> GameState | None:
        return self.frames[-1] if self.frames else None
