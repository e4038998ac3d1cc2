"""
Tests for the pygame input translation and renderer
"""

import pygame
import pytest

from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import Direction
from paddle_court.core.entities import GameState
from paddle_court.gui.pygame_input import PygameInput
from paddle_court.gui.pygame_renderer import PygameRenderer
from paddle_court.gui.pygame_ticker import PygameTicker
from paddle_court.utils.config import KEYBOARD_LAYOUTS
from paddle_court.utils.config import game_config

SETTINGS = CourtSettings(
    ball_radius=10, paddle_height=10, paddle_width=75, court_width=480, court_height=320
)


class RecordingSignals:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Direction]] = []

    def on_press(self, direction):
        self.calls.append(("press", direction))

    def on_release(self, direction):
        self.calls.append(("release", direction))


def key_event(event_type: int, key: int) -> pygame.event.Event:
    return pygame.event.Event(event_type, key=key)


class TestPygameInput:
    """Test key event translation"""

    def test_arrow_keys(self):
        signals = RecordingSignals()
        keyboard = PygameInput(signals, KEYBOARD_LAYOUTS["qwerty"])

        assert keyboard.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
        assert keyboard.handle_event(key_event(pygame.KEYUP, pygame.K_LEFT))
        assert keyboard.handle_event(key_event(pygame.KEYDOWN, pygame.K_RIGHT))

        assert signals.calls == [
            ("press", Direction.LEFT),
            ("release", Direction.LEFT),
            ("press", Direction.RIGHT),
        ]

    @pytest.mark.parametrize("layout,left_key", [("qwerty", pygame.K_a), ("azerty", pygame.K_q)])
    def test_letter_keys_follow_layout(self, layout, left_key):
        signals = RecordingSignals()
        keyboard = PygameInput(signals, KEYBOARD_LAYOUTS[layout])
        keyboard.handle_event(key_event(pygame.KEYDOWN, left_key))
        keyboard.handle_event(key_event(pygame.KEYDOWN, pygame.K_d))
        assert signals.calls == [("press", Direction.LEFT), ("press", Direction.RIGHT)]

    def test_unbound_keys_ignored(self):
        signals = RecordingSignals()
        keyboard = PygameInput(signals, KEYBOARD_LAYOUTS["qwerty"])
        assert not keyboard.handle_event(key_event(pygame.KEYDOWN, pygame.K_SPACE))
        assert not keyboard.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1))
        assert signals.calls == []

    def test_default_layout_from_config(self):
        keyboard = PygameInput(RecordingSignals())
        assert keyboard.layout is game_config.get_keyboard_layout()
        assert keyboard.get_control_info() == keyboard.layout.display_names


class TestPygameRenderer:
    """Test drawing on an off-screen surface"""

    @pytest.fixture
    def surface(self) -> pygame.Surface:
        return pygame.Surface((480, 320))

    @staticmethod
    def color_at(surface: pygame.Surface, pos: tuple[int, int]) -> tuple[int, int, int]:
        return tuple(surface.get_at(pos))[:3]

    def test_draws_ball_and_paddle(self, surface):
        renderer = PygameRenderer(surface, present=False)
        renderer.render(GameState.from_settings(SETTINGS), SETTINGS)

        assert renderer.size == (480, 320)
        assert self.color_at(surface, (240, 290)) == game_config.BALL_COLOR
        assert self.color_at(surface, (240, 315)) == game_config.PADDLE_COLOR
        assert self.color_at(surface, (5, 5)) == game_config.BACKGROUND_COLOR
        assert self.color_at(surface, (100, 315)) == game_config.BACKGROUND_COLOR

    def test_paddle_follows_state(self, surface):
        renderer = PygameRenderer(surface, present=False)
        state = GameState.from_settings(SETTINGS).replace(paddle_x=0.0)
        renderer.render(state, SETTINGS)
        assert self.color_at(surface, (10, 315)) == game_config.PADDLE_COLOR
        assert self.color_at(surface, (240, 315)) == game_config.BACKGROUND_COLOR

    def test_game_over_frame(self, surface):
        """Test the terminal frame still shows the ball"""
        renderer = PygameRenderer(surface, present=False)
        state = GameState.from_settings(SETTINGS).replace(ball_x=100.0, ball_y=308.0, is_over=True)
        renderer.render(state, SETTINGS)
        assert self.color_at(surface, (100, 308)) == game_config.BALL_COLOR


class TestPygameTicker:
    """Test timer events driving callbacks"""

    @pytest.fixture(autouse=True)
    def pygame_events(self):
        pygame.init()
        yield
        pygame.quit()

    def test_restarts_reuse_event_type(self):
        """Test one ticker never allocates more than one event type"""
        ticker = PygameTicker()
        event_type = ticker.event_type
        for _ in range(5):
            timer = ticker.start(lambda: None, 0.01)
            timer.cancel()
        assert ticker.event_type == event_type

    def test_dispatch_runs_current_callback(self):
        calls = []
        ticker = PygameTicker()
        ticker.start(lambda: calls.append("tick"), 10.0)

        assert ticker.dispatch(pygame.event.Event(ticker.event_type)) is True
        assert ticker.dispatch(key_event(pygame.KEYDOWN, pygame.K_a)) is False
        assert calls == ["tick"]

    def test_start_replaces_previous_timer(self):
        calls = []
        ticker = PygameTicker()
        first = ticker.start(lambda: calls.append("first"), 10.0)
        second = ticker.start(lambda: calls.append("second"), 10.0)

        assert not first.active
        assert second.active
        ticker.dispatch(pygame.event.Event(ticker.event_type))
        assert calls == ["second"]

    def test_cancelled_timer_ignores_events(self):
        calls = []
        ticker = PygameTicker()
        ticker.start(lambda: calls.append("tick"), 10.0)
        ticker.cancel_all()

        assert ticker.dispatch(pygame.event.Event(ticker.event_type)) is True
        assert calls == []
