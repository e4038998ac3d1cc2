"""
Paddle Court: single-player ball-and-paddle game
"""

__version__ = "0.1.0"
