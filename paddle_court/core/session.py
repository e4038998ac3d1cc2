"""
Game session: host-side state machine around a FrameEngine

RUNNING --(ball missed)--> OVER --reset()--> RUNNING (with a brand new engine)
"""

import logging
import threading
from collections.abc import Callable
from enum import Enum

from paddle_court.core.engine import FrameEngine
from paddle_court.core.entities import CourtSettings
from paddle_court.core.entities import Direction
from paddle_court.core.entities import GameState
from paddle_court.core.interfaces.renderer import RendererProtocol
from paddle_court.core.interfaces.timer import Ticker
from paddle_court.core.interfaces.timer import TimerHandle

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """Lifecycle of a game session"""

    RUNNING = "running"
    OVER = "over"


class GameSession:
    """Drives a FrameEngine from a timer, renders every frame and reports the end of the game"""

    def __init__(
        self,
        settings: CourtSettings,
        renderer: RendererProtocol,
        ticker: Ticker,
        on_game_over: Callable[[GameState], None] | None = None,
        interval: float = 0.01,
    ):
        self.settings = settings
        self.renderer = renderer
        self.ticker = ticker
        self.on_game_over = on_game_over
        self.interval = interval

        self.engine = FrameEngine(settings)
        self.status = SessionStatus.RUNNING
        self.games_played = 0

        self._handle: TimerHandle | None = None
        self._notified = False
        self._lock = threading.RLock()

    @property
    def state(self) -> GameState:
        with self._lock:
            return self.engine.state

    @property
    def running(self) -> bool:
        """True while the timer is installed and the game is not over"""
        with self._lock:
            return self._handle is not None and self._handle.active

    # Input signals are forwarded to whichever engine is current, so input
    # sources survive a reset

    def on_press(self, direction: Direction | str) -> None:
        self.engine.on_press(direction)

    def on_release(self, direction: Direction | str) -> None:
        self.engine.on_release(direction)

    def run(self) -> TimerHandle:
        """Installs the recurring tick callback and returns its cancellation handle"""
        with self._lock:
            if self._handle is not None and self._handle.active:
                return self._handle
            if self.status is SessionStatus.OVER:
                raise RuntimeError("Game is over, call reset() before running again")

            logger.info("Starting game (tick every %.3fs)", self.interval)
            self._handle = self.ticker.start(self.step, self.interval)
            return self._handle

    def step(self) -> bool:
        """
        One timer callback: tick, render, and react to the end of the game.

        Returns:
            True when this step ended the game
        """
        with self._lock:
            ended = self.engine.tick()
            self.renderer.render(self.engine.state, self.settings)

            if ended:
                self._game_over()
            return ended

    def _game_over(self) -> None:
        self.stop()
        self.status = SessionStatus.OVER
        if self._notified:
            return
        self._notified = True
        self.games_played += 1
        logger.info("Game %d over", self.games_played)
        if self.on_game_over is not None:
            self.on_game_over(self.engine.state)

    def stop(self) -> None:
        """Cancels the tick timer, if any"""
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None

    def reset(self) -> None:
        """Discards the current engine and prepares a fresh game (run() restarts ticking)"""
        with self._lock:
            self.stop()
            self.engine = FrameEngine(self.settings)
            self.status = SessionStatus.RUNNING
            self._notified = False
            logger.info("Game reset")
