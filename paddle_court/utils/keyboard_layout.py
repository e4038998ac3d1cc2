"""
Keyboard layout preferences for Paddle Court

A saved preference only names a layout. The key bindings live in
KEYBOARD_LAYOUTS and reach the game through game_config.KEYBOARD_LAYOUT, which
PygameInput reads when it builds its key mapping.
"""

import locale
import logging
import os
from pathlib import Path

from pydantic import BaseModel
from pydantic import ValidationError
from pydantic import field_validator

from paddle_court.utils.config import KEYBOARD_LAYOUTS
from paddle_court.utils.config import GameConfig
from paddle_court.utils.config import game_config

logger = logging.getLogger(__name__)

# Locale language prefix -> layout, anything else types on qwerty
LOCALE_LAYOUTS = {"fr": "azerty", "de": "qwertz"}


def detect_system_layout() -> str:
    """Guess the layout from the locale, then from $LANG"""
    for name in (locale.getlocale()[0], os.environ.get("LANG")):
        if name:
            return LOCALE_LAYOUTS.get(name[:2].lower(), "qwerty")
    return "qwerty"


class LayoutPreferences(BaseModel):
    """Layout choice persisted between sessions by configure_keyboard.py"""

    model_config = {"validate_assignment": True}

    keyboard_layout: str | None = None

    @field_validator("keyboard_layout")
    @classmethod
    def validate_keyboard_layout(cls, v: str | None) -> str | None:
        if v is not None and v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".config" / "paddle_court" / "user_config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "LayoutPreferences":
        """Read saved preferences; a missing or invalid file gives empty preferences"""
        if path is None:
            path = cls.default_path()
        if not path.exists():
            return cls()

        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", path, e)
            return cls()

    def save(self, path: Path | None = None) -> bool:
        """Write the preferences, returns False when the file could not be written"""
        if path is None:
            path = self.default_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save preferences to %s: %s", path, e)
            return False
        return True

    def resolve(self) -> str:
        """The saved layout, or the system one when nothing was saved"""
        return self.keyboard_layout or detect_system_layout()


def apply_layout(layout: str | None = None, config: GameConfig | None = None) -> str:
    """
    Select the layout the game binds its keys with

    Args:
        layout: Explicit choice such as a command line option. When None the
            saved preference is used, then the system layout.
        config: Configuration to update, the global game_config by default

    Returns:
        The applied layout name

    Raises:
        pydantic.ValidationError: if an explicit layout is unknown
    """
    if config is None:
        config = game_config
    if layout is None:
        layout = LayoutPreferences.load().resolve()

    config.KEYBOARD_LAYOUT = layout
    logger.info("Keyboard layout: %s", layout)
    return layout


def save_layout(layout: str) -> bool:
    """
    Persist a layout as the user's preference and apply it to game_config

    Raises:
        pydantic.ValidationError: if the layout is unknown
    """
    preferences = LayoutPreferences.load()
    preferences.keyboard_layout = layout
    apply_layout(layout)
    return preferences.save()


def available_layouts() -> dict[str, str]:
    """Layout keys mapped to their display names"""
    return {key: layout.name for key, layout in KEYBOARD_LAYOUTS.items()}


def layout_help(config: GameConfig | None = None) -> str:
    """Help text showing the key mappings of the configured layout"""
    if config is None:
        config = game_config
    layout = config.get_keyboard_layout()

    lines = [f"Keyboard layout: {layout.name}"]
    lines += [f"  {direction}: {keys}" for direction, keys in layout.display_names.items()]
    lines.append(f"Available layouts: {', '.join(available_layouts().values())}")
    return "\n".join(lines) + "\n"
