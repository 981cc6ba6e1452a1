"""Tests for configuration loading."""

import threading
from dataclasses import FrozenInstanceError

import pytest

from core.config import ConfigError, ExporterConfig, load_config, parse_duration


class TestParseDuration:
    """Test duration string parsing."""

    @pytest.mark.parametrize("text, expected", [
        ("2s", 2.0),
        ("500ms", 0.5),
        ("1m", 60.0),
        ("1h30m", 5400.0),
        ("1.5s", 1.5),
        (".5s", 0.5),
        ("250us", 0.00025),
        ("250µs", 0.00025),
        ("100ns", 1e-7),
        ("+3s", 3.0),
        ("0", 0.0),
    ])
    def test_valid(self, text, expected):
        assert parse_duration(text) == pytest.approx(expected)

    def test_negative(self):
        assert parse_duration("-2s") == -2.0

    def test_out_of_range(self):
        """Durations beyond a 64-bit nanosecond count are rejected."""
        with pytest.raises(ConfigError):
            parse_duration("2562048h")
        assert parse_duration("2562047h") == 2562047 * 3600.0

    @pytest.mark.parametrize("text", ["", "2", "s", "abc", "2x", "1.2.3s", "2 s", "-", ".s", " 2s ", "2s\n"])
    def test_invalid(self, text):
        with pytest.raises(ConfigError):
            parse_duration(text)


class TestLoadConfig:
    """Test building the configuration from the environment."""

    def test_defaults(self):
        config = load_config({})
        assert config == ExporterConfig(interval=2.0, vip="")
        assert config.detection_enabled is False

    def test_custom_values(self):
        config = load_config({"INTERVAL": "500ms", "VIP": "10.0.0.5"})
        assert config.interval == 0.5
        assert config.vip == "10.0.0.5"
        assert config.detection_enabled is True

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("INTERVAL", "5s")
        monkeypatch.setenv("VIP", "192.168.0.10")
        config = load_config()
        assert config.interval == 5.0
        assert config.vip == "192.168.0.10"

    def test_invalid_interval(self):
        with pytest.raises(ConfigError):
            load_config({"INTERVAL": "soon"})

    def test_non_positive_interval(self):
        """A ticker needs a positive period."""
        with pytest.raises(ConfigError):
            load_config({"INTERVAL": "0"})
        with pytest.raises(ConfigError):
            load_config({"INTERVAL": "-1s"})

    def test_config_is_immutable(self):
        config = load_config({})
        with pytest.raises(FrozenInstanceError):
            config.vip = "10.0.0.5"

    def test_interval_too_long(self):
        """Intervals beyond what a timer can wait for abort startup."""
        with pytest.raises(ConfigError):
            load_config({"INTERVAL": "3000000h", "VIP": "10.0.0.5"})

    def test_interval_beyond_timer_limit(self, monkeypatch):
        monkeypatch.setattr(threading, "TIMEOUT_MAX", 60.0)
        assert load_config({"INTERVAL": "1m"}).interval == 60.0
        with pytest.raises(ConfigError):
            load_config({"INTERVAL": "61s"})
