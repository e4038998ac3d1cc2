"""
Paddle Court configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Key bindings of the two paddle directions for one keyboard layout"""

    name: str
    left_keys: tuple[int, ...]
    right_keys: tuple[int, ...]
    display_names: dict[str, str]


# Arrow keys are bound on every layout, letter keys follow the physical home row
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys=(pygame.K_LEFT, pygame.K_a),
        right_keys=(pygame.K_RIGHT, pygame.K_d),
        display_names={"left": "← / A", "right": "→ / D"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys=(pygame.K_LEFT, pygame.K_q),  # Q instead of A
        right_keys=(pygame.K_RIGHT, pygame.K_d),
        display_names={"left": "← / Q", "right": "→ / D"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys=(pygame.K_LEFT, pygame.K_a),
        right_keys=(pygame.K_RIGHT, pygame.K_d),
        display_names={"left": "← / A", "right": "→ / D"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Court dimensions
    FIELD_WIDTH: int = Field(default=480, gt=0, description="Court width in pixels")
    FIELD_HEIGHT: int = Field(default=320, gt=0, description="Court height in pixels")

    # Ball
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius in pixels")
    BALL_START_OFFSET: float = Field(
        default=30.0, ge=0, description="Initial ball distance from the bottom of the court"
    )
    BALL_START_VX: float = Field(default=2.0, description="Initial horizontal speed per tick")
    BALL_START_VY: float = Field(default=-2.0, description="Initial vertical speed per tick")

    # Paddle
    PADDLE_WIDTH: float = Field(default=75.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=10.0, gt=0, description="Paddle height in pixels")
    PADDLE_STEP: float = Field(default=7.0, gt=0, description="Paddle move per tick")

    # Timing
    TICK_INTERVAL_MS: int = Field(default=10, gt=0, description="Milliseconds between ticks")
    GAME_OVER_DELAY_MS: int = Field(
        default=1500, ge=0, description="Pause on the game over screen before reset"
    )

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB")
    BALL_COLOR: tuple[int, int, int] = Field(default=(0, 149, 221), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(0, 149, 221), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(40, 40, 40), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_court_dimensions(self) -> "GameConfig":
        """Validate the court is large enough for the ball and the paddle"""
        if self.PADDLE_WIDTH >= self.FIELD_WIDTH:
            raise ValueError(
                f"PADDLE_WIDTH ({self.PADDLE_WIDTH}) must be smaller than "
                f"FIELD_WIDTH ({self.FIELD_WIDTH})"
            )

        if 2 * self.BALL_RADIUS >= min(self.FIELD_WIDTH, self.FIELD_HEIGHT):
            raise ValueError("The ball does not fit in the court")

        if self.BALL_START_OFFSET >= self.FIELD_HEIGHT:
            raise ValueError(
                f"BALL_START_OFFSET must be smaller than FIELD_HEIGHT ({self.FIELD_HEIGHT})"
            )

        return self

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds"""
        return self.TICK_INTERVAL_MS / 1000.0

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "paddle_court_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "paddle_court_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _copy_fields(self, GameConfig())


# Fields every other dimension has to fit in
COURT_SIZE_FIELDS = ("FIELD_WIDTH", "FIELD_HEIGHT")


def _copy_fields(target: GameConfig, source: GameConfig) -> None:
    """Assigns every field of source to target, validating each assignment"""
    # Grow the court first so that each intermediate config stays valid
    for name in COURT_SIZE_FIELDS:
        setattr(target, name, max(getattr(target, name), getattr(source, name)))
    for name in type(target).model_fields.keys():
        if name not in COURT_SIZE_FIELDS:
            setattr(target, name, getattr(source, name))
    for name in COURT_SIZE_FIELDS:
        setattr(target, name, getattr(source, name))


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str = "paddle_court_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (ValueError, OSError) as e:
        logger.error("Error loading config %s: %s", filepath, e)
        return False

    _copy_fields(game_config, loaded_config)
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
