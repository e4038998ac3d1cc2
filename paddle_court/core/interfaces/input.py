"""
Input signal protocol - the capability set an input source drives
"""

from typing import Protocol

from paddle_court.core.entities import Direction


class InputSignals(Protocol):
    """
    Receiver of abstract direction signals.

    Input sources (keyboard, gamepad, autopilot, ...) translate whatever they
    observe into these two calls. FrameEngine implements this protocol by
    queueing the matching state edits.
    """

    def on_press(self, direction: Direction | str) -> None:
        """A direction started being held"""
        ...

    def on_release(self, direction: Direction | str) -> None:
        """A direction stopped being held"""
        ...
