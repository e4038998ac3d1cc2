"""
Observation builders - turn a game state into a numeric vector
"""

from typing import Protocol

import numpy as np
import numpy.typing as npt

from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import GameState


class ObservationBuilder(Protocol):
    """
    Protocol for building observations from game state.

    Lets automated players work on a fixed-size numeric representation
    instead of reading GameState fields directly.
    """

    def build_observation(self, state: GameState) -> npt.NDArray[np.float32]:
        """
        Build observation array from game state.

        Example:
            >>> builder = VectorObservationBuilder(settings)
            >>> obs = builder.build_observation(engine.state)
            >>> assert obs.shape == (builder.observation_size,)
            >>> assert obs.dtype == np.float32
        """
        ...

    @property
    def observation_size(self) -> int:
        """Get the size/dimension of the observation vector"""
        ...


class VectorObservationBuilder:
    """
    Vector observation with normalized positions and velocities.

    Observation format (7 values):
    [
        ball_x / court_width,
        ball_y / court_height,
        ball_vx / ball_radius,
        ball_vy / ball_radius,
        paddle_center / court_width,
        left_held (0 or 1),
        right_held (0 or 1)
    ]
    """

    # Indices into the observation vector
    BALL_X = 0
    BALL_Y = 1
    BALL_VX = 2
    BALL_VY = 3
    PADDLE_CENTER = 4
    LEFT_HELD = 5
    RIGHT_HELD = 6

    def __init__(self, settings: CourtSettings):
        self.settings = settings
        self._observation_size = 7

    def build_observation(self, state: GameState) -> npt.NDArray[np.float32]:
        width = self.settings.court_width
        height = self.settings.court_height
        radius = self.settings.ball_radius
        paddle_center = state.paddle_x + self.settings.paddle_width / 2

        return np.array(
            [
                state.ball_x / width,
                state.ball_y / height,
                state.ball_vx / radius,
                state.ball_vy / radius,
                paddle_center / width,
                float(state.left_held),
                float(state.right_held),
            ],
            dtype=np.float32,
        )

    @property
    def observation_size(self) -> int:
        return self._observation_size
