"""
Simple Paddle Court game example with graphical interface
"""

import logging

from paddle_court.gui.game_app import PaddleCourtApp


def run_simple_game(autopilot: bool = False) -> None:
    """Launch one game window, with the keyboard or the autopilot moving the paddle"""
    print("Launching Paddle Court...")

    app = PaddleCourtApp(autopilot=autopilot)
    app.run()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_simple_game()
