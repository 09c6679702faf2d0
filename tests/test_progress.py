"""Tests for progress-indicator geometry."""

import math

import pytest

from ringtimer.progress import (
    IndicatorShape, RingGeometry, SquareGeometry, indicator_geometry,
    progress_fraction, ring_geometry, square_geometry,
)


class TestFraction:

    def test_no_duration_is_full(self):
        assert progress_fraction(0, 0) == 1.0

    def test_ratio(self):
        assert progress_fraction(60, 15) == pytest.approx(0.25)

    def test_clamped(self):
        assert progress_fraction(10, 20) == 1.0
        assert progress_fraction(10, -5) == 0.0


class TestRing:

    def test_full_is_drawn(self):
        g = ring_geometry(1.0, 90)
        assert g.dashoffset == 0
        assert g.circumference == pytest.approx(2 * math.pi * 90)

    def test_empty_is_hidden(self):
        g = ring_geometry(0.0, 90)
        assert g.dashoffset == pytest.approx(g.circumference)

    def test_half(self):
        g = ring_geometry(0.5, 10)
        assert g.dashoffset == pytest.approx(math.pi * 10)

    def test_starts_at_twelve_oclock(self):
        assert ring_geometry(0.3, 50).rotation == -90.0

    def test_out_of_range_fraction_clamped(self):
        assert ring_geometry(1.7, 10).dashoffset == 0
        g = ring_geometry(-0.2, 10)
        assert g.dashoffset == pytest.approx(g.circumference)

    def test_deterministic(self):
        assert ring_geometry(0.42, 33) == ring_geometry(0.42, 33)


class TestSquare:

    def test_perimeter_uses_inset_side(self):
        g = square_geometry(1.0, 200, 12)
        assert g.perimeter == pytest.approx(4 * 188)
        assert g.dashoffset == 0

    def test_empty_is_hidden(self):
        g = square_geometry(0.0, 200, 12)
        assert g.dashoffset == pytest.approx(g.perimeter)

    def test_path_clockwise_from_top_left(self):
        g = square_geometry(0.5, 100, 10)
        assert g.path == "M 5 5 H 95 V 95 H 5 Z"

    def test_stroke_wider_than_size(self):
        g = square_geometry(0.5, 10, 20)
        assert g.perimeter == 0
        assert g.dashoffset == 0


class TestDispatch:

    def test_ring(self):
        g = indicator_geometry(IndicatorShape.RING, 0.5, radius=10, size=100, stroke_width=5)
        assert isinstance(g, RingGeometry)
        assert g.length == pytest.approx(2 * math.pi * 10)

    def test_square(self):
        g = indicator_geometry(IndicatorShape.SQUARE, 0.5, radius=10, size=100, stroke_width=5)
        assert isinstance(g, SquareGeometry)
        assert g.dashoffset == pytest.approx(0.5 * 4 * 95)
