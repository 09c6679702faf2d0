"""Glue between the timer engine, the alarm and persisted preferences.

The controller is the only object a UI needs to hold.  It forwards user
actions to the engine, raises the alarm on expiry, remembers the
preferences the user changes, and pushes a fresh ``DisplayState`` and
title string whenever anything visible changes.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from .alarm.controller import AlarmController, AlarmMode
from .display import DisplayState, build_display_state, title_text
from .progress import IndicatorShape
from .settings import (
    ALARM_KEY, DURATION_KEY, INDICATOR_KEY, Settings, load_settings, save_settings,
    valid_color,
)
from .storage import MemoryStore, PreferenceStore
from .timer.duration import Duration
from .timer.engine import TimerEngine, TimerState

_LOGGER = logging.getLogger(__name__)


class CountdownController(QObject):
    """Single countdown with progress outline and expiry alarm.

    Signals
    -------
    display_changed(state: DisplayState)
    title_changed(title: str)
    """

    display_changed = pyqtSignal(object)
    title_changed = pyqtSignal(str)

    def __init__(
        self,
        store: PreferenceStore | None = None,
        parent: QObject | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(parent)
        self._store: PreferenceStore = store if store is not None else MemoryStore()
        self._settings: Settings = load_settings(self._store)
        self._title: str = ""

        self._engine = TimerEngine(self, clock=clock)
        self._alarm = AlarmController(self, mode=self._settings.mode, clock=clock)

        last = self._settings.last_duration
        self._engine.set_duration(last.hours, last.minutes, last.seconds)

        self._engine.tick.connect(self._publish)
        self._engine.state_changed.connect(self._publish)
        self._engine.expired.connect(self._on_expired)
        self._alarm.active_changed.connect(self._publish)

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def alarm(self) -> AlarmController:
        return self._alarm

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def title(self) -> str:
        return title_text(self._engine)

    def display_state(self) -> DisplayState:
        return build_display_state(self._engine, self._alarm, self._settings)

    # ── timer actions ─────────────────────────────────────────────────

    def set_duration(self, hours: object = 0, minutes: object = 0, seconds: object = 0) -> Duration:
        duration = self._engine.set_duration(hours, minutes, seconds)
        self._publish()
        return duration

    def start(self) -> None:
        fresh = self._engine.state == TimerState.IDLE and self._engine.can_start
        self._engine.start()
        if fresh:
            self._remember_duration(self._engine.duration)

    def pause(self) -> None:
        self._engine.pause()

    def toggle(self) -> None:
        """Start/resume when stopped, pause when running."""
        if self._engine.is_running:
            self._engine.pause()
        else:
            self.start()

    def reset(self) -> None:
        self._alarm.dismiss()
        self._engine.reset()

    def delete(self) -> None:
        self._alarm.dismiss()
        self._engine.delete()

    def interact(self) -> None:
        """Forward any user input; it silences a showing alarm."""
        self._alarm.interact()

    # ── preferences ───────────────────────────────────────────────────

    def set_alarm_mode(self, mode: AlarmMode | str) -> None:
        self._alarm.mode = AlarmMode.parse(mode, self._alarm.mode)
        self._settings.alarm_mode = self._alarm.mode.value
        if not self._alarm.enabled:
            self._alarm.dismiss()
        save_settings(self._store, self._settings, ALARM_KEY)
        self._publish()

    def set_indicator(
        self, shape: IndicatorShape | str | None = None, color: str | None = None
    ) -> None:
        if shape is not None:
            try:
                self._settings.indicator_shape = IndicatorShape(shape).value
            except ValueError:
                _LOGGER.warning("Unknown indicator shape %r; keeping %s",
                                shape, self._settings.indicator_shape)
        if color is not None:
            if valid_color(color):
                self._settings.indicator_color = color.strip()
            else:
                _LOGGER.warning("Ignoring blank indicator colour %r", color)
        save_settings(self._store, self._settings, INDICATOR_KEY)
        self._publish()

    def _remember_duration(self, duration: Duration) -> None:
        self._settings.last_hours = duration.hours
        self._settings.last_minutes = duration.minutes
        self._settings.last_seconds = duration.seconds
        save_settings(self._store, self._settings, DURATION_KEY)

    # ── internal ──────────────────────────────────────────────────────

    def _on_expired(self) -> None:
        self._alarm.trigger()

    def _publish(self, *_args) -> None:
        self.display_changed.emit(self.display_state())
        title = self.title
        if title != self._title:
            self._title = title
            self.title_changed.emit(title)
