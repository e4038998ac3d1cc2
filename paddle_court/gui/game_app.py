"""
Main game application with PyGame GUI
"""

import logging
import sys
import traceback

import pygame

from paddle_court.ai.autopilot import FollowBallAutopilot
from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import GameState
from paddle_court.core.session import GameSession
from paddle_court.core.session import SessionStatus
from paddle_court.gui.pygame_input import PygameInput
from paddle_court.gui.pygame_renderer import PygameRenderer
from paddle_court.gui.pygame_ticker import PygameTicker
from paddle_court.utils.config import game_config

logger = logging.getLogger(__name__)


class PaddleCourtApp:
    """Main application class for Paddle Court with PyGame GUI"""

    def __init__(self, autopilot: bool = False) -> None:
        pygame.init()
        pygame.display.set_mode((game_config.FIELD_WIDTH, game_config.FIELD_HEIGHT))
        pygame.display.set_caption("Paddle Court")

        self.renderer = PygameRenderer()
        # Court size comes from the render surface
        self.settings = CourtSettings.from_config(game_config, court_size=self.renderer.size)

        self.ticker = PygameTicker()
        self.session = GameSession(
            self.settings,
            self.renderer,
            self.ticker,
            on_game_over=self.on_game_over,
            interval=game_config.tick_interval,
        )
        self.input = PygameInput(self.session)
        self.autopilot = FollowBallAutopilot(self.session, self.settings) if autopilot else None

        self.clock = pygame.time.Clock()
        self.running = True
        self.reset_at: int | None = None

    def on_game_over(self, state: GameState) -> None:
        """Schedules the reset that follows the game over screen"""
        print("GAME OVER")
        self.reset_at = pygame.time.get_ticks() + game_config.GAME_OVER_DELAY_MS

    def restart(self) -> None:
        """Starts a brand new game"""
        self.reset_at = None
        self.session.reset()
        if self.autopilot is not None:
            self.autopilot.on_episode_start()
        self.session.run()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif self.ticker.dispatch(event):
            if self.autopilot is not None:
                self.autopilot.update(self.session.state)
        elif self.autopilot is None:
            self.input.handle_event(event)

    def run(self) -> None:
        """Main application loop"""
        print("Starting Paddle Court...")
        self.renderer.render(self.session.state, self.settings)
        self.session.run()

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                if (
                    self.session.status is SessionStatus.OVER
                    and self.reset_at is not None
                    and pygame.time.get_ticks() >= self.reset_at
                ):
                    self.restart()

                self.clock.tick(1000)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.session.stop()
        self.ticker.cancel_all()
        pygame.quit()
        logger.info("Paddle Court closed after %d game(s)", self.session.games_played)


def main(autopilot: bool = False) -> None:
    """Main entry point"""
    try:
        app = PaddleCourtApp(autopilot=autopilot)
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        sys.exit(1)
