"""
Paddle Court without a window: the autopilot plays one game on a threaded timer
"""

import logging
import threading

from paddle_court.ai.autopilot import FollowBallAutopilot
from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import GameState
from paddle_court.core.session import GameSession
from paddle_court.core.timer import ThreadTicker
from paddle_court.gui.headless_renderer import HeadlessRenderer
from paddle_court.utils.config import game_config


def run_headless_game(max_seconds: float = 10.0, dead_zone: float = 40.0) -> None:
    """Lets the autopilot play until it misses or the time runs out"""
    settings = CourtSettings.from_config(game_config)
    renderer = HeadlessRenderer(max_frames=1)
    finished = threading.Event()

    def on_game_over(state: GameState) -> None:
        print(f"Ball missed at x={state.ball_x:.1f}, paddle at {state.paddle_x:.1f}")
        finished.set()

    session = GameSession(
        settings, renderer, ThreadTicker(), on_game_over, interval=game_config.tick_interval
    )
    # A wide dead zone makes the autopilot lazy enough to miss eventually
    autopilot = FollowBallAutopilot(session, settings, dead_zone=dead_zone)

    session.run()
    while not finished.wait(game_config.tick_interval):
        autopilot.update(session.state)
        if renderer.frame_count * game_config.tick_interval > max_seconds:
            break

    session.stop()
    print(f"{renderer.frame_count} frames rendered")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_headless_game()
