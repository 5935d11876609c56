"""Tests for config.py and the command-line options in main.py."""

import pytest

from config import AppConfig


class TestAppConfig:

    def test_defaults(self):
        config = AppConfig()
        assert config.title == "Pendulum"
        assert (config.width, config.height) == (800, 480)
        assert (config.origin_x, config.origin_y, config.radius) == (400.0, 0.0, 200.0)
        assert (config.mass, config.gravity) == (1.0, 0.5)
        assert config.strict is False
        assert config.min_radius is None

    def test_frame_interval(self):
        assert AppConfig(fps=60).frame_interval_ms == 16
        assert AppConfig(fps=5000).frame_interval_ms == 1

    @pytest.mark.parametrize("kwargs", [
        {"fps": 0},
        {"fps": -30},
        {"width": 0},
        {"height": -1},
        {"min_radius": -1.0},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            AppConfig(**kwargs)

    def test_frozen(self):
        config = AppConfig()
        with pytest.raises(AttributeError):
            config.fps = 30


class TestParseArgs:
    """main.parse_args; imports PyQt6 through main, so skip without it."""

    @pytest.fixture
    def parse_args(self):
        pytest.importorskip("PyQt6.QtWidgets")
        from main import parse_args
        return parse_args

    def test_defaults(self, parse_args):
        args = parse_args([])
        assert args.fps == 60
        assert args.strict is False
        assert args.min_radius is None
        assert args.debug is False

    def test_options(self, parse_args):
        args = parse_args(["--fps", "30", "--strict", "--min-radius", "12.5", "--debug"])
        assert args.fps == 30
        assert args.strict is True
        assert args.min_radius == 12.5
        assert args.debug is True
