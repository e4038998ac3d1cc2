"""
Paddle Court frame engine: owns the authoritative state and advances it one tick at a time
"""

import logging
import threading
from functools import partial

from paddle_court.core.edits import press_edit
from paddle_court.core.edits import release_edit
from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import Direction
from paddle_court.core.entities import GameState
from paddle_court.core.entities import StateEdit
from paddle_court.core.physics import PHYSICS_STAGES
from paddle_court.core.physics import PhysicsStage

logger = logging.getLogger(__name__)


class FrameEngine:
    """
    Per-tick state transition pipeline.

    Input producers submit StateEdits from any thread. Each call to tick()
    drains the pending edits in submission order, then runs the physics stages
    in their fixed order (collision, out of court, paddle move, ball move).

    FrameEngine also implements the InputSignals protocol, so it can be handed
    directly to an input source.
    """

    def __init__(
        self,
        settings: CourtSettings,
        initial_state: GameState | None = None,
        stages: tuple[PhysicsStage, ...] = PHYSICS_STAGES,
    ):
        self.settings = settings
        self._state = initial_state or GameState.from_settings(settings)
        self._pending: list[StateEdit] = []
        self._lock = threading.Lock()
        self.stages = [partial(stage, settings=settings) for stage in stages]
        self.tick_count = 0

    @property
    def state(self) -> GameState:
        """Current authoritative state (read-only snapshot)"""
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    @property
    def pending(self) -> int:
        """Number of edits waiting for the next tick"""
        with self._lock:
            return len(self._pending)

    def submit(self, edit: StateEdit) -> None:
        """Queues an edit for the next tick"""
        with self._lock:
            self._pending.append(edit)

    def on_press(self, direction: Direction | str) -> None:
        self.submit(press_edit(direction))

    def on_release(self, direction: Direction | str) -> None:
        self.submit(release_edit(direction))

    def _take_pending(self) -> list[StateEdit]:
        # Swap under the lock: later submissions go to the fresh list
        with self._lock:
            edits, self._pending = self._pending, []
        return edits

    def tick(self) -> bool:
        """
        Advances the game by one frame.

        Returns:
            True on the tick where the game ends, False otherwise (including
            every tick after the game has already ended)
        """
        edits = self._take_pending()

        if self._state.is_over:
            return False

        state = self._state
        for edit in edits:
            state = edit(state)
        if edits:
            logger.debug("Applied %d input edit(s) on tick %d", len(edits), self.tick_count)

        for stage in self.stages:
            state = stage(state)

        self._state = state
        self.tick_count += 1

        if state.is_over:
            logger.info(
                "Game over on tick %d: ball missed at (%.1f, %.1f), paddle at %.1f",
                self.tick_count,
                state.ball_x,
                state.ball_y,
                state.paddle_x,
            )
            return True
        return False
