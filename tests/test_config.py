"""Tests for feature_showcase.config module.

Validates configuration dataclasses, enums, coercion, and defaults.
"""

import logging
from pathlib import Path

import pytest

from feature_showcase.config import CounterConfig, ShowcaseConfig, LogFormat


class TestLogFormat:
    """Verify LogFormat enum values."""

    def test_values(self):
        assert LogFormat.TEXT.value == "text"
        assert LogFormat.JSON.value == "json"

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            LogFormat("xml")


class TestCounterConfig:
    """Test CounterConfig defaults and validation."""

    def test_defaults_match_demo(self):
        config = CounterConfig()
        assert config.workers == 5
        assert config.increments_per_worker == 100
        assert config.expected_total == 500
        assert config.resource_users == ["User 1", "User 2"]
        assert config.resource_hold_seconds == 0.01

    def test_zero_counts_allowed(self):
        assert CounterConfig(workers=0).expected_total == 0
        assert CounterConfig(increments_per_worker=0).expected_total == 0

    def test_negative_workers_raises(self):
        with pytest.raises(ValueError, match="workers"):
            CounterConfig(workers=-1)

    def test_negative_increments_raises(self):
        with pytest.raises(ValueError, match="increments_per_worker"):
            CounterConfig(increments_per_worker=-5)

    def test_negative_hold_raises(self):
        with pytest.raises(ValueError):
            CounterConfig(resource_hold_seconds=-0.1)

    def test_resource_users_not_shared(self):
        """Each instance gets its own users list."""
        a = CounterConfig()
        b = CounterConfig()
        a.resource_users.append("User 3")
        assert b.resource_users == ["User 1", "User 2"]


class TestShowcaseConfig:
    """Test ShowcaseConfig defaults and coercion."""

    def test_defaults(self):
        config = ShowcaseConfig()
        assert isinstance(config.counter, CounterConfig)
        assert config.log_level == "WARNING"
        assert config.log_format is LogFormat.TEXT
        assert config.json_logs is False
        assert config.log_file is None

    def test_string_log_format_coerced(self):
        config = ShowcaseConfig(log_format="JSON")
        assert config.log_format is LogFormat.JSON
        assert config.json_logs is True

    def test_string_log_file_coerced(self):
        config = ShowcaseConfig(log_file="logs/run.log")
        assert isinstance(config.log_file, Path)
        assert config.log_file == Path("logs/run.log")

    def test_log_level_uppercased(self):
        assert ShowcaseConfig(log_level="debug").log_level == "DEBUG"

    def test_int_log_level_kept(self):
        assert ShowcaseConfig(log_level=logging.DEBUG).log_level == logging.DEBUG
