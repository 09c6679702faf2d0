"""Progress-indicator geometry.

Maps the fraction of time remaining onto the stroke parameters a
renderer needs for a dashed outline that empties as the countdown runs:

- Ring:    circle of radius ``r``, rotated -90° so it starts at 12 o'clock.
- Square:  inset square of side ``size - stroke_width``, traced
           clockwise from the top-left corner.

For both, ``dashoffset == 0`` draws the full outline (fraction 1) and
``dashoffset == length`` hides it (fraction 0).  Nothing here holds
state; the same inputs always give the same output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


class IndicatorShape(Enum):
    RING = "ring"
    SQUARE = "square"


RING_ROTATION_DEG = -90.0


def progress_fraction(original_seconds: int, remaining_seconds: int) -> float:
    """``remaining / original`` clamped to [0, 1]; 1 with no duration."""
    if original_seconds <= 0:
        return 1.0
    return _clamp_fraction(remaining_seconds / original_seconds)


def _clamp_fraction(fraction: float) -> float:
    if math.isnan(fraction):
        return 1.0
    return max(0.0, min(1.0, fraction))


# ── ring ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RingGeometry:
    radius: float
    circumference: float
    dashoffset: float
    rotation: float = RING_ROTATION_DEG

    @property
    def length(self) -> float:
        return self.circumference


def ring_geometry(fraction: float, radius: float) -> RingGeometry:
    radius = max(0.0, float(radius))
    circumference = 2 * math.pi * radius
    offset = circumference * (1.0 - _clamp_fraction(fraction))
    return RingGeometry(radius, circumference, offset)


# ── square ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SquareGeometry:
    size: float
    stroke_width: float
    perimeter: float
    dashoffset: float
    path: str

    @property
    def length(self) -> float:
        return self.perimeter


def _square_path(size: float, stroke_width: float) -> str:
    # Stroke is centred on the path, so inset by half the width.
    lo = stroke_width / 2
    hi = max(lo, size - lo)
    return f"M {lo:g} {lo:g} H {hi:g} V {hi:g} H {lo:g} Z"


def square_geometry(fraction: float, size: float, stroke_width: float) -> SquareGeometry:
    size = max(0.0, float(size))
    stroke_width = max(0.0, float(stroke_width))
    side = max(0.0, size - stroke_width)
    perimeter = 4 * side
    offset = perimeter * (1.0 - _clamp_fraction(fraction))
    return SquareGeometry(
        size, stroke_width, perimeter, offset, _square_path(size, stroke_width),
    )


# ── dispatch ──────────────────────────────────────────────────────────────

Geometry = Union[RingGeometry, SquareGeometry]


def indicator_geometry(
    shape: IndicatorShape,
    fraction: float,
    *,
    radius: float,
    size: float,
    stroke_width: float,
) -> Geometry:
    """Geometry for whichever indicator shape the user picked."""
    if shape == IndicatorShape.SQUARE:
        return square_geometry(fraction, size, stroke_width)
    return ring_geometry(fraction, radius)
