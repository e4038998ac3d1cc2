"""
Protocols of the collaborators the frame engine works with
"""

from paddle_court.core.interfaces.input import InputSignals
from paddle_court.core.interfaces.renderer import RendererProtocol
from paddle_court.core.interfaces.timer import Ticker
from paddle_court.core.interfaces.timer import TimerHandle

__all__ = ["InputSignals", "RendererProtocol", "Ticker", "TimerHandle"]
