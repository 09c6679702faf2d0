"""User preferences persisted through a key-value store.

Each group of preferences is saved as one JSON blob under its own key:

- ``indicator``: shape, colour and geometry of the progress outline
- ``alarm``: alarm mode
- ``duration``: last-used hours/minutes/seconds

Usage::

    store = JsonFileStore()
    settings = load_settings(store)
    settings.alarm_mode = "fast"
    save_settings(store, settings)

Missing keys, broken JSON and out-of-range values fall back to the
defaults below, field by field, and never raise.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from .alarm.controller import AlarmMode
from .progress import IndicatorShape
from .storage import PreferenceStore
from .timer.duration import Duration, MAX_HOURS, MAX_MINUTES, MAX_SECONDS

_LOGGER = logging.getLogger(__name__)

INDICATOR_KEY = "indicator"
ALARM_KEY = "alarm"
DURATION_KEY = "duration"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── indicator ─────────────────────────────────────────────────────
    indicator_shape: str = IndicatorShape.RING.value
    indicator_color: str = "#CBA6F7"
    ring_radius: float = 90.0
    square_size: float = 200.0
    stroke_width: float = 12.0

    # ── alarm ─────────────────────────────────────────────────────────
    alarm_mode: str = AlarmMode.FADE.value

    # ── last-used duration ────────────────────────────────────────────
    last_hours: int = 0
    last_minutes: int = 5
    last_seconds: int = 0

    @property
    def shape(self) -> IndicatorShape:
        try:
            return IndicatorShape(self.indicator_shape)
        except ValueError:
            return IndicatorShape.RING

    @property
    def mode(self) -> AlarmMode:
        return AlarmMode.parse(self.alarm_mode)

    @property
    def last_duration(self) -> Duration:
        return Duration.clamped(self.last_hours, self.last_minutes, self.last_seconds)


# Which Settings fields live under which store key, and the JSON name each
# one uses inside that blob.
_GROUPS: dict[str, dict[str, str]] = {
    INDICATOR_KEY: {
        "shape": "indicator_shape",
        "color": "indicator_color",
        "radius": "ring_radius",
        "size": "square_size",
        "stroke_width": "stroke_width",
    },
    ALARM_KEY: {
        "mode": "alarm_mode",
    },
    DURATION_KEY: {
        "hours": "last_hours",
        "minutes": "last_minutes",
        "seconds": "last_seconds",
    },
}


# Upper bound for ring radius, square size and stroke width.
MAX_GEOMETRY = 10_000.0


_DURATION_LIMITS = {
    "last_hours": MAX_HOURS,
    "last_minutes": MAX_MINUTES,
    "last_seconds": MAX_SECONDS,
}


def valid_color(value: object) -> bool:
    """Colours are opaque to the core; they only have to be non-blank text."""
    return isinstance(value, str) and bool(value.strip())


def _valid(name: str, value: object) -> bool:
    if name == "indicator_shape":
        return isinstance(value, str) and value in {s.value for s in IndicatorShape}
    if name == "alarm_mode":
        return isinstance(value, str) and value in {m.value for m in AlarmMode}
    if name == "indicator_color":
        return valid_color(value)
    if name in ("ring_radius", "square_size", "stroke_width"):
        return (isinstance(value, (int, float)) and not isinstance(value, bool)
                and 0 <= value <= MAX_GEOMETRY)
    if name in _DURATION_LIMITS:
        return (isinstance(value, int) and not isinstance(value, bool)
                and 0 <= value <= _DURATION_LIMITS[name])
    return False


def _read_blob(store: PreferenceStore, key: str) -> dict:
    raw = store.get(key)
    if raw is None:
        return {}
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        _LOGGER.warning("Preference %r is not valid JSON; using defaults", key)
        return {}
    if not isinstance(data, dict):
        _LOGGER.warning("Preference %r is not a JSON object; using defaults", key)
        return {}
    return data


def load_settings(store: PreferenceStore) -> Settings:
    """Load settings from *store*, falling back to defaults."""
    values: dict[str, object] = {}
    for key, mapping in _GROUPS.items():
        blob = _read_blob(store, key)
        for json_name, field_name in mapping.items():
            if json_name not in blob:
                continue
            value = blob[json_name]
            if _valid(field_name, value):
                values[field_name] = value
            else:
                _LOGGER.warning("Ignoring bad preference %s.%s=%r", key, json_name, value)
    return Settings(**values)


def save_settings(store: PreferenceStore, settings: Settings, *keys: str) -> None:
    """Write the given groups (all of them by default) to *store*."""
    for key in keys or tuple(_GROUPS):
        mapping = _GROUPS[key]
        blob = {json_name: getattr(settings, field_name)
                for json_name, field_name in mapping.items()}
        store.set(key, json.dumps(blob))
