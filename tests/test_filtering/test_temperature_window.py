"""
Unit tests for TemperatureWindow.
"""

import math

import pytest

from pcm_explorer.filtering.temperature_window import TemperatureWindow


class TestTemperatureWindow:
    """Test cases for TemperatureWindow."""

    @pytest.mark.parametrize(
        "tmin, tmax, expected",
        [
            (200.0, 300.0, True),
            (300.0, 300.0, True),
            (300.0, 200.0, False),
            (None, 300.0, False),
            (200.0, None, False),
            (math.nan, 300.0, False),
            (-math.inf, 300.0, False),
        ],
    )
    def test_is_valid(self, tmin, tmax, expected):
        assert TemperatureWindow(tmin, tmax).is_valid is expected

    def test_from_inputs(self):
        """Test parsing raw form text."""
        window = TemperatureWindow.from_inputs(" 200 ", "300.5K")

        assert window == TemperatureWindow(200.0, 300.5)
        assert window.is_valid

    def test_from_empty_inputs(self):
        window = TemperatureWindow.from_inputs("", None)

        assert window == TemperatureWindow(None, None)
        assert not window.is_valid

    def test_coerce(self):
        """Test accepted window representations."""
        window = TemperatureWindow(1.0, 2.0)

        assert TemperatureWindow.coerce(None) is None
        assert TemperatureWindow.coerce(window) is window
        assert TemperatureWindow.coerce((1, 2)) == window
        assert TemperatureWindow.coerce((None, 2)) == TemperatureWindow(None, 2.0)

    def test_coerce_text_bounds(self):
        """Test text bounds parsed like form input."""
        assert TemperatureWindow.coerce(("200", "300K")) == TemperatureWindow(200.0, 300.0)

    def test_coerce_unparseable_text_gives_inactive_window(self):
        window = TemperatureWindow.coerce(("abc", "300"))

        assert window == TemperatureWindow(None, 300.0)
        assert not window.is_valid
