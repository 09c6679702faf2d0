"""Countdown state machine for RingTimer.

States
------
IDLE      No session yet — waiting for a duration and ``start()``.
RUNNING   Counting down against an absolute deadline.
PAUSED    Frozen; remembers remaining and original seconds.
EXPIRED   Reached zero.  Needs ``reset()`` or ``delete()`` to go again.

Transitions
-----------
IDLE → RUNNING                  (start, input duration > 0)
RUNNING → PAUSED                (pause)
PAUSED → RUNNING                (start, remaining > 0)
RUNNING → EXPIRED               (tick reaches 0)
RUNNING | PAUSED | EXPIRED → PAUSED   (reset — never auto-resumes)
Any → IDLE                      (delete)

Timekeeping
-----------
Ticks are nominally one second apart but Qt gives no delivery
guarantee, so every tick recomputes
``remaining = max(0, ceil(deadline - now))`` instead of subtracting one.
A late or coalesced tick catches up; an early one changes nothing.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from ..progress import progress_fraction
from .duration import Duration, ZERO, format_hms
from .scheduling import TimerHandle

_LOGGER = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


# ── constants ─────────────────────────────────────────────────────────────

TICK_INTERVAL_MS = 1000

Clock = Callable[[], float]


@dataclass(frozen=True)
class TimerSession:
    """Read-only snapshot of the active countdown."""

    original_seconds: int
    remaining_seconds: int
    state: TimerState


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-driven single countdown with drift-free ticking.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every tick that ran against the live session.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    expired()
        Emitted exactly once per run, after the engine is already
        EXPIRED with ``remaining == 0``.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    expired = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        super().__init__(parent)
        self._clock = clock

        # ── input ─────────────────────────────────────────────────────
        self._duration: Duration = ZERO

        # ── session ───────────────────────────────────────────────────
        self._state: TimerState = TimerState.IDLE
        self._original: int = 0
        self._remaining: int = 0
        self._deadline: float | None = None

        # ── tick source ───────────────────────────────────────────────
        self._ticker = TimerHandle(self, TICK_INTERVAL_MS, self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def duration(self) -> Duration:
        """The pending input duration used by the next fresh ``start()``."""
        return self._duration

    @property
    def original(self) -> int:
        return self._original

    @property
    def remaining(self) -> int:
        """Seconds left on the clock (0 when there is no session)."""
        return self._remaining

    @property
    def deadline(self) -> float | None:
        """Clock value at which the running session hits zero."""
        return self._deadline

    @property
    def has_started(self) -> bool:
        return self._state != TimerState.IDLE

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def session(self) -> TimerSession | None:
        if not self.has_started:
            return None
        return TimerSession(self._original, self._remaining, self._state)

    @property
    def fraction(self) -> float:
        """1.0 → 0.0 share of the session still to go."""
        if not self.has_started:
            return 1.0
        return progress_fraction(self._original, self._remaining)

    @property
    def can_start(self) -> bool:
        if self.has_started:
            return self._remaining > 0
        return bool(self._duration)

    @property
    def can_reset(self) -> bool:
        return self.has_started and self._remaining != self._original

    @property
    def formatted_time(self) -> str:
        if self.has_started:
            return format_hms(self._remaining)
        return format_hms(self._duration.total_seconds)

    def set_duration(self, hours: object = 0, minutes: object = 0, seconds: object = 0) -> Duration:
        """Update the input fields; each is clamped on its own."""
        self._duration = Duration.clamped(hours, minutes, seconds)
        return self._duration

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin a fresh session from IDLE, or resume from PAUSED.

        Silently ignored while already running and whenever
        ``can_start`` is false.
        """
        if self._state == TimerState.RUNNING or not self.can_start:
            return
        if self._state == TimerState.IDLE:
            self._original = self._duration.total_seconds
            self._remaining = self._original
        self._deadline = self._clock() + self._remaining
        self._ticker.arm()
        self._set_state(TimerState.RUNNING)

    def pause(self) -> None:
        if self._state != TimerState.RUNNING:
            return
        # Settle the count at the pause instant before freezing it.
        remaining = self._compute_remaining()
        self._disarm()
        if remaining <= 0:
            self._expire()
            return
        self._remaining = remaining
        self._set_state(TimerState.PAUSED)
        self.tick.emit(self._remaining)

    def reset(self) -> None:
        """Restore the full duration and hold in PAUSED."""
        if self._state == TimerState.IDLE:
            return
        self._disarm()
        self._remaining = self._original
        self._set_state(TimerState.PAUSED)
        self.tick.emit(self._remaining)

    def delete(self) -> None:
        """Drop the session and the input duration; back to IDLE."""
        self._disarm()
        self._original = 0
        self._remaining = 0
        self._duration = ZERO
        self._set_state(TimerState.IDLE)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _compute_remaining(self) -> int:
        if self._deadline is None:
            return self._remaining
        # Round off float noise so an exact whole second never ceils up.
        left = math.ceil(round(self._deadline - self._clock(), 6))
        return max(0, min(self._original, left))

    def _on_tick(self) -> None:
        if self._state != TimerState.RUNNING:
            return
        remaining = self._compute_remaining()
        if remaining <= 0:
            self._disarm()
            self._expire()
            return
        self._remaining = remaining
        self.tick.emit(self._remaining)

    def _expire(self) -> None:
        # Everything observable is settled before any signal goes out.
        self._remaining = 0
        self._state = TimerState.EXPIRED
        _LOGGER.info("Countdown of %s expired", format_hms(self._original))
        self.tick.emit(0)
        self.state_changed.emit(TimerState.EXPIRED)
        self.expired.emit()

    def _disarm(self) -> None:
        self._ticker.disarm()
        self._deadline = None

    def _set_state(self, new_state: TimerState) -> None:
        _LOGGER.debug("Timer %s -> %s (remaining=%d)",
                      self._state.value, new_state.value, self._remaining)
        self._state = new_state
        self.state_changed.emit(new_state)
