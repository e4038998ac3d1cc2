"""
Paddle Court game entities: immutable game state, court settings, directions
"""

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from paddle_court.utils.config import GameConfig
from paddle_court.utils.config import game_config


class Direction(Enum):
    """The two paddle directions a player can hold"""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class CourtSettings:
    """Static configuration of one game, fixed for the lifetime of an engine"""

    ball_radius: float
    paddle_height: float
    paddle_width: float
    court_width: float
    court_height: float
    paddle_step: float = 7.0
    ball_start_offset: float = 30.0
    ball_start_vx: float = 2.0
    ball_start_vy: float = -2.0

    def __post_init__(self) -> None:
        for name in ("ball_radius", "paddle_height", "paddle_width", "court_width", "court_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.paddle_width >= self.court_width:
            raise ValueError(
                f"paddle_width ({self.paddle_width}) must be smaller than "
                f"court_width ({self.court_width})"
            )

    @property
    def paddle_max_x(self) -> float:
        """Largest paddle_x keeping the paddle inside the court"""
        return self.court_width - self.paddle_width

    @property
    def paddle_top(self) -> float:
        """Vertical coordinate of the paddle's top edge"""
        return self.court_height - self.paddle_height

    @classmethod
    def from_config(
        cls,
        config: GameConfig | None = None,
        court_size: tuple[float, float] | None = None,
    ) -> "CourtSettings":
        """
        Build settings from a validated game configuration

        Args:
            config: Configuration to read, the global game_config by default
            court_size: (width, height) of the render surface, overrides the
                configured field size
        """
        if config is None:
            config = game_config
        width, height = court_size or (config.FIELD_WIDTH, config.FIELD_HEIGHT)
        return cls(
            ball_radius=config.BALL_RADIUS,
            paddle_height=config.PADDLE_HEIGHT,
            paddle_width=config.PADDLE_WIDTH,
            court_width=width,
            court_height=height,
            paddle_step=config.PADDLE_STEP,
            ball_start_offset=config.BALL_START_OFFSET,
            ball_start_vx=config.BALL_START_VX,
            ball_start_vy=config.BALL_START_VY,
        )


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of everything needed to render and simulate one frame.

    States are never mutated: every edit and every pipeline stage returns a new
    instance built with replace().
    """

    ball_x: float
    ball_y: float
    ball_vx: float
    ball_vy: float
    paddle_x: float
    left_held: bool = False
    right_held: bool = False
    is_over: bool = False

    @classmethod
    def initial(
        cls,
        court_width: float,
        court_height: float,
        paddle_width: float,
        start_offset: float = 30.0,
        velocity: tuple[float, float] = (2.0, -2.0),
    ) -> "GameState":
        """Ball centred near the bottom of the court, paddle centred, nothing held"""
        return cls(
            ball_x=court_width / 2,
            ball_y=court_height - start_offset,
            ball_vx=velocity[0],
            ball_vy=velocity[1],
            paddle_x=(court_width - paddle_width) / 2,
        )

    @classmethod
    def from_settings(cls, settings: CourtSettings) -> "GameState":
        return cls.initial(
            settings.court_width,
            settings.court_height,
            settings.paddle_width,
            start_offset=settings.ball_start_offset,
            velocity=(settings.ball_start_vx, settings.ball_start_vy),
        )

    def replace(self, **changes: Any) -> "GameState":
        """Returns a copy of the state with the given fields changed"""
        return dataclasses.replace(self, **changes)

    def with_held(self, direction: Direction, held: bool) -> "GameState":
        """Returns a copy with the hold flag of one direction set"""
        if direction is Direction.LEFT:
            return self.replace(left_held=held)
        return self.replace(right_held=held)

    @property
    def ball_position(self) -> tuple[float, float]:
        return (self.ball_x, self.ball_y)

    @property
    def ball_velocity(self) -> tuple[float, float]:
        return (self.ball_vx, self.ball_vy)


# One queued input effect: a pure function from state to state
StateEdit = Callable[[GameState], GameState]
