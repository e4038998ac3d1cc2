"""
GUI module for Paddle Court - PyGame interface
"""

from paddle_court.gui.game_app import PaddleCourtApp
from paddle_court.gui.game_app import main
from paddle_court.gui.headless_renderer import HeadlessRenderer
from paddle_court.gui.pygame_input import PygameInput
from paddle_court.gui.pygame_renderer import PygameRenderer
from paddle_court.gui.pygame_ticker import PygameTicker

__all__ = [
    "HeadlessRenderer",
    "PaddleCourtApp",
    "PygameInput",
    "PygameRenderer",
    "PygameTicker",
    "main",
]
