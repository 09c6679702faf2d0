"""RingTimer: single countdown with a progress outline and expiry alarm."""

import logging

from .alarm import AlarmController, AlarmMode
from .controller import CountdownController
from .display import DisplayState
from .progress import IndicatorShape, ring_geometry, square_geometry
from .timer import Duration, TimerEngine, TimerState

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AlarmController",
    "AlarmMode",
    "CountdownController",
    "DisplayState",
    "Duration",
    "IndicatorShape",
    "TimerEngine",
    "TimerState",
    "ring_geometry",
    "square_geometry",
]
