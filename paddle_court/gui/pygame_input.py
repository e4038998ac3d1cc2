"""
Keyboard input for Paddle Court
"""

import pygame

from paddle_court.core.entities import Direction
from paddle_court.core.interfaces.input import InputSignals
from paddle_court.utils.config import KeyboardLayout
from paddle_court.utils.config import game_config


class PygameInput:
    """Translates pygame key events into direction press/release signals"""

    def __init__(self, signals: InputSignals, layout: KeyboardLayout | None = None):
        """
        Args:
            signals: Receiver of the direction signals (engine or session)
            layout: Key bindings, the configured keyboard layout by default
        """
        self.signals = signals
        self.layout = layout or game_config.get_keyboard_layout()

        self.key_mapping: dict[int, Direction] = {}
        for key in self.layout.left_keys:
            self.key_mapping[key] = Direction.LEFT
        for key in self.layout.right_keys:
            self.key_mapping[key] = Direction.RIGHT

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Forward a key event to the signals receiver

        Returns:
            True if the event was a bound direction key
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        direction = self.key_mapping.get(event.key)
        if direction is None:
            return False

        if event.type == pygame.KEYDOWN:
            self.signals.on_press(direction)
        else:
            self.signals.on_release(direction)
        return True

    def get_control_info(self) -> dict[str, str]:
        """Get information about controls"""
        return self.layout.display_names.copy()
