"""Owned, cancellable wrapper around ``QTimer``.

Every ``arm()`` replaces the previous ``QTimer`` and bumps a generation
counter; the timeout slot is bound to the generation it was armed with.
A timeout that was already queued when ``disarm()`` ran therefore
arrives with a stale generation and is dropped.
"""

from __future__ import annotations

from functools import partial
from typing import Callable

from PyQt6.QtCore import QObject, Qt, QTimer


class TimerHandle:
    """One timer slot, exclusively owned by the component that made it."""

    def __init__(
        self,
        owner: QObject,
        interval_ms: int,
        callback: Callable[[], None],
        *,
        single_shot: bool = False,
    ) -> None:
        self._owner = owner
        self._interval_ms = interval_ms
        self._callback = callback
        self._single_shot = single_shot
        self._generation: int = 0
        self._qt_timer: QTimer | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def armed(self) -> bool:
        return self._qt_timer is not None

    def arm(self, interval_ms: int | None = None) -> int:
        """(Re)start the timer and return the new generation."""
        self.disarm()
        timer = QTimer(self._owner)
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.setSingleShot(self._single_shot)
        timer.setInterval(max(0, self._interval_ms if interval_ms is None else interval_ms))
        timer.timeout.connect(partial(self._fire, self._generation))
        self._qt_timer = timer
        timer.start()
        return self._generation

    def disarm(self) -> None:
        """Stop the timer.  Safe to call any number of times."""
        self._generation += 1
        timer, self._qt_timer = self._qt_timer, None
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def _fire(self, generation: int) -> None:
        if generation != self._generation:
            return
        if self._single_shot:
            self.disarm()
        self._callback()
