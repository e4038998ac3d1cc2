"""
Tests for the observation builder and the autopilot input source
"""

import numpy as np
import pytest

from paddle_court.ai.autopilot import FollowBallAutopilot
from paddle_court.ai.observation import VectorObservationBuilder
from paddle_court.core.engine import FrameEngine
from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import Direction
from paddle_court.core.entities import GameState

SETTINGS = CourtSettings(
    ball_radius=10, paddle_height=10, paddle_width=75, court_width=480, court_height=320
)


class RecordingSignals:
    """Input signals receiver keeping every call"""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Direction]] = []

    def on_press(self, direction):
        self.calls.append(("press", direction))

    def on_release(self, direction):
        self.calls.append(("release", direction))


class TestVectorObservationBuilder:
    """Test the observation vector"""

    def test_initial_observation(self):
        builder = VectorObservationBuilder(SETTINGS)
        obs = builder.build_observation(GameState.from_settings(SETTINGS))

        assert obs.shape == (builder.observation_size,)
        assert obs.dtype == np.float32
        assert obs.tolist() == pytest.approx([0.5, 290 / 320, 0.2, -0.2, 0.5, 0.0, 0.0])

    def test_hold_flags(self):
        builder = VectorObservationBuilder(SETTINGS)
        state = GameState.from_settings(SETTINGS).replace(right_held=True)
        obs = builder.build_observation(state)
        assert obs[VectorObservationBuilder.LEFT_HELD] == 0.0
        assert obs[VectorObservationBuilder.RIGHT_HELD] == 1.0

    def test_paddle_center(self):
        builder = VectorObservationBuilder(SETTINGS)
        state = GameState.from_settings(SETTINGS).replace(paddle_x=0.0)
        obs = builder.build_observation(state)
        assert obs[VectorObservationBuilder.PADDLE_CENTER] == pytest.approx(37.5 / 480)

    def test_ball_over_paddle_center_matches(self):
        """Test ball x and paddle centre share one scale"""
        builder = VectorObservationBuilder(SETTINGS)
        state = GameState.from_settings(SETTINGS).replace(paddle_x=300.0, ball_x=337.5)
        obs = builder.build_observation(state)
        assert obs[VectorObservationBuilder.BALL_X] == pytest.approx(
            obs[VectorObservationBuilder.PADDLE_CENTER]
        )


class TestFollowBallAutopilot:
    """Test the autopilot decisions"""

    @pytest.fixture
    def signals(self) -> RecordingSignals:
        return RecordingSignals()

    def test_presses_towards_ball(self, signals):
        autopilot = FollowBallAutopilot(signals, SETTINGS)
        state = GameState.from_settings(SETTINGS).replace(ball_x=400.0)

        assert autopilot.update(state) is Direction.RIGHT
        assert signals.calls == [("press", Direction.RIGHT)]

    def test_keeps_holding_without_new_signals(self, signals):
        autopilot = FollowBallAutopilot(signals, SETTINGS)
        state = GameState.from_settings(SETTINGS).replace(ball_x=400.0)
        autopilot.update(state)
        autopilot.update(state)
        assert signals.calls == [("press", Direction.RIGHT)]

    def test_releases_before_switching(self, signals):
        """Test at most one direction is held"""
        autopilot = FollowBallAutopilot(signals, SETTINGS)
        base = GameState.from_settings(SETTINGS)
        autopilot.update(base.replace(ball_x=400.0))
        autopilot.update(base.replace(ball_x=50.0))

        assert signals.calls == [
            ("press", Direction.RIGHT),
            ("release", Direction.RIGHT),
            ("press", Direction.LEFT),
        ]

    def test_dead_zone(self, signals):
        autopilot = FollowBallAutopilot(signals, SETTINGS)
        state = GameState.from_settings(SETTINGS).replace(ball_x=250.0)
        assert autopilot.update(state) is None
        assert signals.calls == []

    def test_releases_when_game_over(self, signals):
        autopilot = FollowBallAutopilot(signals, SETTINGS)
        base = GameState.from_settings(SETTINGS)
        autopilot.update(base.replace(ball_x=50.0))
        autopilot.update(base.replace(ball_x=50.0, is_over=True))
        assert signals.calls[-1] == ("release", Direction.LEFT)
        assert autopilot.holding is None

    def test_keeps_ball_in_play(self):
        """Test the autopilot driving a real engine never misses"""
        engine = FrameEngine(SETTINGS)
        autopilot = FollowBallAutopilot(engine, SETTINGS)
        for _ in range(3000):
            autopilot.update(engine.state)
            assert engine.tick() is False
        assert not engine.is_over

    def test_without_input_the_ball_is_missed(self):
        """Test the same game is lost when nobody moves the paddle"""
        engine = FrameEngine(SETTINGS)
        assert any(engine.tick() for _ in range(3000))
