"""
Paddle Court utility modules
"""

from paddle_court.utils.config import GameConfig
from paddle_court.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
