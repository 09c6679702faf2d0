"""What the renderer and the window title get to see.

Everything here is recomputed from the engine, alarm and settings on
demand; nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from .alarm.controller import AlarmController, AlarmMode
from .progress import Geometry, IndicatorShape, indicator_geometry
from .settings import Settings
from .timer.engine import TimerEngine, TimerState

IDLE_TITLE = "RingTimer"


@dataclass(frozen=True)
class DisplayState:
    formatted_time: str
    fraction: float
    state: TimerState
    alarming: bool
    mode: AlarmMode
    can_start: bool
    can_reset: bool
    shape: IndicatorShape
    color: str
    geometry: Geometry


def build_display_state(
    engine: TimerEngine, alarm: AlarmController, settings: Settings
) -> DisplayState:
    fraction = engine.fraction
    shape = settings.shape
    return DisplayState(
        formatted_time=engine.formatted_time,
        fraction=fraction,
        state=engine.state,
        alarming=alarm.active,
        mode=alarm.mode,
        can_start=engine.can_start,
        can_reset=engine.can_reset,
        shape=shape,
        color=settings.indicator_color,
        geometry=indicator_geometry(
            shape,
            fraction,
            radius=settings.ring_radius,
            size=settings.square_size,
            stroke_width=settings.stroke_width,
        ),
    )


def title_text(engine: TimerEngine) -> str:
    """Countdown while running, the app name otherwise."""
    if engine.state == TimerState.RUNNING:
        return engine.formatted_time
    return IDLE_TITLE
