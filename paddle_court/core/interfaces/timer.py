"""
Timer protocols - the recurring callback source that drives ticks
"""

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """Cancellation handle of a running recurring timer"""

    def cancel(self) -> None:
        """Stops further callbacks. Safe to call more than once and from the callback."""
        ...

    @property
    def active(self) -> bool:
        """True until the timer has been cancelled or stopped"""
        ...


class Ticker(Protocol):
    """Source of fixed-period recurring callbacks"""

    def start(self, callback: Callable[[], None], interval: float) -> TimerHandle:
        """
        Install a recurring callback.

        Args:
            callback: Function invoked once per period
            interval: Period in seconds

        Returns:
            Handle used to cancel the timer
        """
        ...
