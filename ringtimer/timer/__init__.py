"""Timer package."""

from .duration import Duration, format_hms, MAX_HOURS, MAX_MINUTES, MAX_SECONDS
from .engine import (
    TimerEngine,
    TimerState,
    TimerSession,
    TICK_INTERVAL_MS,
)
from .scheduling import TimerHandle

__all__ = [
    "Duration",
    "format_hms",
    "MAX_HOURS",
    "MAX_MINUTES",
    "MAX_SECONDS",
    "TimerEngine",
    "TimerState",
    "TimerSession",
    "TimerHandle",
    "TICK_INTERVAL_MS",
]
