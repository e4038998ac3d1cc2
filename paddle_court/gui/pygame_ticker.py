"""
Tick timer built on pygame timer events
"""

import logging
from collections.abc import Callable

import pygame

logger = logging.getLogger(__name__)


class PygameTimer:
    """Recurring pygame timer event bound to a callback"""

    def __init__(self, ticker: "PygameTicker", callback: Callable[[], None]):
        self.ticker = ticker
        self.callback = callback
        self._active = True

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        pygame.time.set_timer(self.ticker.event_type, 0)
        # Ticks already queued must not reach the next timer
        pygame.event.clear(self.ticker.event_type)

    @property
    def active(self) -> bool:
        return self._active


class PygameTicker:
    """
    Ticker running callbacks from the pygame event loop.

    Callbacks run on the thread that pumps events, which keeps all drawing on
    the main thread. The host loop passes every event to dispatch().

    The ticker owns a single custom event type for its whole life, so at most
    one timer runs at a time: starting a new one cancels the previous one.
    """

    def __init__(self) -> None:
        self.event_type = pygame.event.custom_type()
        self.timer: PygameTimer | None = None

    def start(self, callback: Callable[[], None], interval: float) -> PygameTimer:
        if self.timer is not None:
            self.timer.cancel()
        self.timer = PygameTimer(self, callback)
        pygame.time.set_timer(self.event_type, max(1, round(interval * 1000)))
        logger.debug("Timer event %d every %.3fs", self.event_type, interval)
        return self.timer

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Runs the timer callback on a timer event, returns True if the event was one"""
        if event.type != self.event_type:
            return False
        if self.timer is not None and self.timer.active:
            self.timer.callback()
        return True

    def cancel_all(self) -> None:
        if self.timer is not None:
            self.timer.cancel()
