"""Hours/minutes/seconds input for the countdown.

The engine works in whole seconds; this module is the boundary between
that single integer and the three clamped input fields the UI shows.
"""

from __future__ import annotations

from dataclasses import dataclass


MAX_HOURS = 99
MAX_MINUTES = 59
MAX_SECONDS = 59
MAX_TOTAL_SECONDS = MAX_HOURS * 3600 + MAX_MINUTES * 60 + MAX_SECONDS


def _clamp(value: object, upper: int) -> int:
    """Coerce *value* to an int in ``[0, upper]``; junk becomes 0."""
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0
    except OverflowError:
        # infinite floats
        return upper if value > 0 else 0  # type: ignore[operator]
    return max(0, min(upper, number))


@dataclass(frozen=True)
class Duration:
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def clamped(cls, hours: object = 0, minutes: object = 0, seconds: object = 0) -> Duration:
        """Build a Duration with every field clamped independently."""
        return cls(
            _clamp(hours, MAX_HOURS),
            _clamp(minutes, MAX_MINUTES),
            _clamp(seconds, MAX_SECONDS),
        )

    @classmethod
    def from_seconds(cls, total: int) -> Duration:
        total = max(0, min(MAX_TOTAL_SECONDS, int(total)))
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return cls(hours, minutes, seconds)

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def __bool__(self) -> bool:
        return self.total_seconds > 0

    def __str__(self) -> str:
        return format_hms(self.total_seconds)


ZERO = Duration()


def format_hms(total_seconds: int) -> str:
    """Zero-padded ``HH:MM:SS`` for the display and window title."""
    d = Duration.from_seconds(total_seconds)
    return f"{d.hours:02d}:{d.minutes:02d}:{d.seconds:02d}"
