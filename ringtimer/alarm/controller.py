"""Expiry alarm with a fixed auto-dismiss window.

States
------
INACTIVE  Nothing showing.
ACTIVE    Alarm visible; dismissed by any interaction or, failing that,
          automatically ``AUTO_DISMISS_SECONDS`` after ``trigger()``.

The mode only picks a cosmetic cadence for the renderer.  Every mode
shares the same window; NONE turns triggering off altogether.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from ..timer.scheduling import TimerHandle

_LOGGER = logging.getLogger(__name__)


class AlarmMode(Enum):
    NONE = "none"
    FADE = "fade"
    SLOW = "slow"
    FAST = "fast"

    @classmethod
    def parse(cls, value: object, default: AlarmMode | None = None) -> AlarmMode:
        """Lenient lookup by value or name; unknown input gives *default*."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if mode.value == key:
                    return mode
        return cls.FADE if default is None else default


AUTO_DISMISS_SECONDS = 10


@dataclass(frozen=True)
class AlarmSession:
    mode: AlarmMode
    active: bool
    deadline: float | None


class AlarmController(QObject):
    """Owns the alarm flag and its auto-dismiss timeout.

    Signals
    -------
    triggered(mode: AlarmMode)
    dismissed()
    active_changed(active: bool)
    """

    triggered = pyqtSignal(object)
    dismissed = pyqtSignal()
    active_changed = pyqtSignal(bool)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        mode: AlarmMode = AlarmMode.FADE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(parent)
        self._clock = clock
        self._mode: AlarmMode = mode
        self._active: bool = False
        self._deadline: float | None = None
        self._timeout = TimerHandle(
            self, AUTO_DISMISS_SECONDS * 1000, self._on_timeout, single_shot=True,
        )

    # ── properties ────────────────────────────────────────────────────

    @property
    def mode(self) -> AlarmMode:
        return self._mode

    @mode.setter
    def mode(self, value: AlarmMode) -> None:
        self._mode = AlarmMode.parse(value, self._mode)

    @property
    def enabled(self) -> bool:
        return self._mode != AlarmMode.NONE

    @property
    def active(self) -> bool:
        return self._active

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def session(self) -> AlarmSession | None:
        if not self._active:
            return None
        return AlarmSession(self._mode, True, self._deadline)

    # ── controls ──────────────────────────────────────────────────────

    def trigger(self) -> bool:
        """Raise the alarm.  Returns False when disabled or already up."""
        if not self.enabled or self._active:
            return False
        self._active = True
        self._deadline = self._clock() + AUTO_DISMISS_SECONDS
        self._timeout.arm()
        _LOGGER.info("Alarm triggered (mode=%s)", self._mode.value)
        self.triggered.emit(self._mode)
        self.active_changed.emit(True)
        return True

    def dismiss(self) -> None:
        """Silence the alarm.  No-op when nothing is showing."""
        self._timeout.disarm()
        if not self._active:
            return
        self._active = False
        self._deadline = None
        _LOGGER.info("Alarm dismissed")
        self.dismissed.emit()
        self.active_changed.emit(False)

    def interact(self) -> None:
        """Any user input while the alarm shows counts as a dismissal."""
        if self._active:
            _LOGGER.debug("Alarm dismissed by interaction")
        self.dismiss()

    # ── internal ──────────────────────────────────────────────────────

    def _on_timeout(self) -> None:
        if not self._active or self._deadline is None:
            return
        left = self._deadline - self._clock()
        if left > 0:
            # Qt delivered early; wait out the rest of the window.
            self._timeout.arm(math.ceil(left * 1000))
            return
        self.dismiss()
