"""
Automated input source that keeps the paddle under the ball
"""

import logging

import numpy as np
import numpy.typing as npt

from paddle_court.ai.observation import VectorObservationBuilder
from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import Direction
from paddle_court.core.entities import GameState
from paddle_court.core.interfaces.input import InputSignals

logger = logging.getLogger(__name__)


class FollowBallAutopilot:
    """
    Input source that follows the ball horizontally.

    It drives the same press/release signals as a keyboard, so the engine
    cannot tell it apart from a human player. At most one direction is held at
    a time; the held direction is always released before the other is pressed.
    """

    def __init__(
        self,
        signals: InputSignals,
        settings: CourtSettings,
        dead_zone: float | None = None,
        name: str = "FollowBallAutopilot",
    ):
        """
        Args:
            signals: Receiver of the direction signals (engine or session)
            settings: Court settings of the game being played
            dead_zone: Distance in pixels between ball and paddle centre under
                which the paddle is left alone, a quarter of the paddle by default
            name: Display name
        """
        self.signals = signals
        self.settings = settings
        self.name = name
        self.observation_builder = VectorObservationBuilder(settings)

        dead_zone = settings.paddle_width / 4 if dead_zone is None else dead_zone
        self.dead_zone = dead_zone / settings.court_width
        self.holding: Direction | None = None

    def choose_direction(self, observation: npt.NDArray[np.float32]) -> Direction | None:
        """Direction to hold for an observation, None to stay still"""
        offset = float(
            observation[VectorObservationBuilder.BALL_X]
            - observation[VectorObservationBuilder.PADDLE_CENTER]
        )
        if offset > self.dead_zone:
            return Direction.RIGHT
        if offset < -self.dead_zone:
            return Direction.LEFT
        return None

    def update(self, state: GameState) -> Direction | None:
        """Issues the signals needed for the current state, returns the held direction"""
        if state.is_over:
            self.release()
            return None

        wanted = self.choose_direction(self.observation_builder.build_observation(state))
        if wanted is not self.holding:
            self.release()
            if wanted is not None:
                self.signals.on_press(wanted)
                self.holding = wanted
        return self.holding

    def release(self) -> None:
        """Releases the held direction, if any"""
        if self.holding is not None:
            self.signals.on_release(self.holding)
            self.holding = None

    def on_episode_start(self) -> None:
        self.holding = None
        logger.debug("%s ready", self.name)
