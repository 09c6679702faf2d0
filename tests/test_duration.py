"""Tests for duration input clamping and HH:MM:SS formatting."""

import pytest

from ringtimer.timer.duration import Duration, MAX_TOTAL_SECONDS, format_hms


class TestDuration:

    def test_total_seconds(self):
        assert Duration(1, 2, 3).total_seconds == 3723

    @pytest.mark.parametrize("fields, expected", [
        ((100, 0, 0), Duration(99, 0, 0)),
        ((0, 60, 0), Duration(0, 59, 0)),
        ((0, 0, 75), Duration(0, 0, 59)),
        ((-1, -1, -1), Duration(0, 0, 0)),
        (("2", "", None), Duration(2, 0, 0)),
        ((0, "abc", 5), Duration(0, 0, 5)),
    ])
    def test_fields_clamped_independently(self, fields, expected):
        assert Duration.clamped(*fields) == expected

    @pytest.mark.parametrize("value, expected", [
        (float("inf"), Duration(99, 59, 59)),
        (float("-inf"), Duration(0, 0, 0)),
        (float("nan"), Duration(0, 0, 0)),
    ])
    def test_non_finite_input_is_clamped(self, value, expected):
        assert Duration.clamped(value, value, value) == expected

    def test_from_seconds(self):
        assert Duration.from_seconds(3723) == Duration(1, 2, 3)
        assert Duration.from_seconds(MAX_TOTAL_SECONDS + 10) == Duration(99, 59, 59)

    def test_bool(self):
        assert not Duration()
        assert Duration(0, 0, 1)


class TestFormat:

    @pytest.mark.parametrize("seconds, text", [
        (0, "00:00:00"),
        (5, "00:00:05"),
        (3599, "00:59:59"),
        (3600 * 12 + 61, "12:01:01"),
    ])
    def test_zero_padded(self, seconds, text):
        assert format_hms(seconds) == text

    def test_str(self):
        assert str(Duration(0, 1, 0)) == "00:01:00"
