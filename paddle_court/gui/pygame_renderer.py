"""
PyGame renderer for Paddle Court
"""

import pygame

from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import GameState
from paddle_court.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer drawing the ball and the paddle on a surface"""

    def __init__(self, surface: pygame.Surface | None = None, present: bool = True):
        """
        Args:
            surface: Surface to draw on, the display surface by default
            present: Flip the display after each frame
        """
        self.screen = surface if surface is not None else pygame.display.get_surface()
        if self.screen is None:
            raise RuntimeError("No display surface, call pygame.display.set_mode() first")
        self.present_frames = present

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = game_config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = game_config.PADDLE_COLOR
        self.text_color: tuple[int, int, int] = game_config.TEXT_COLOR

        self._font: pygame.font.Font | None = None

    @property
    def size(self) -> tuple[int, int]:
        """Court size taken from the drawing surface"""
        return self.screen.get_size()

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 48)
        return self._font

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_ball(self, state: GameState, settings: CourtSettings) -> None:
        """Draw the ball as a filled disc"""
        pos = (int(state.ball_x), int(state.ball_y))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(settings.ball_radius))

    def draw_paddle(self, state: GameState, settings: CourtSettings) -> None:
        """Draw the paddle anchored at the bottom of the court"""
        rect = pygame.Rect(
            int(state.paddle_x),
            int(settings.paddle_top),
            int(settings.paddle_width),
            int(settings.paddle_height),
        )
        pygame.draw.rect(self.screen, self.paddle_color, rect)

    def draw_game_over(self) -> None:
        """Draw the game over banner over the last frame"""
        width, height = self.size
        text_surface = self.font.render("GAME OVER", True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.center = (width // 2, height // 2)
        self.screen.blit(text_surface, text_rect)

    def render(self, state: GameState, settings: CourtSettings) -> None:
        """Render one frame"""
        self.clear_screen()
        self.draw_ball(state, settings)
        self.draw_paddle(state, settings)

        if state.is_over:
            self.draw_game_over()

        if self.present_frames:
            self.present()

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()
