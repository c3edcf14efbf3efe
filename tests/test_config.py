"""Unit tests for configuration loading."""

import json

import pytest
from config import (
    Config,
    IdConfig,
    ServerConfig,
    LoggingConfig,
    load_config,
)
from core.errors import InvalidLength
from identifiers.limits import Precision


class TestIdConfig:
    """Tests for IdConfig class."""

    def test_default_values(self):
        """IdConfig has sensible defaults."""
        config = IdConfig()
        assert config.default_bytes == 10
        assert config.precision is Precision.SECONDS
        assert config.ordered is True
        assert config.max_batch == 100

    def test_custom_values(self):
        """IdConfig accepts custom values."""
        config = IdConfig(default_bytes=16, precision="microseconds", ordered=False, max_batch=5)
        assert config.default_bytes == 16
        assert config.precision is Precision.MICROSECONDS
        assert config.ordered is False
        assert config.max_batch == 5

    def test_default_bytes_too_large(self):
        """default_bytes above the maximum is rejected."""
        with pytest.raises(InvalidLength):
            IdConfig(default_bytes=33)

    def test_default_bytes_below_timestamp_width(self):
        """default_bytes must fit the configured timestamp."""
        with pytest.raises(InvalidLength):
            IdConfig(default_bytes=6, precision="microseconds")

    def test_unknown_precision(self):
        """Unknown precision names are rejected."""
        with pytest.raises(ValueError):
            IdConfig(precision="hours")

    def test_bad_batch(self):
        """max_batch must be positive."""
        with pytest.raises(ValueError):
            IdConfig(max_batch=0)

    def test_to_dict(self):
        """to_dict uses plain values."""
        assert IdConfig().to_dict() == {
            "default_bytes": 10,
            "precision": "seconds",
            "ordered": True,
            "max_batch": 100,
        }


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_default_values(self):
        """ServerConfig has sensible defaults."""
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080

    def test_custom_values(self):
        """ServerConfig accepts custom values."""
        config = ServerConfig(host="0.0.0.0", port=9000)
        assert config.host == "0.0.0.0"
        assert config.port == 9000


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig has sensible defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.crash_file == "logs/crash.log"

    def test_custom_values(self):
        """LoggingConfig accepts custom values."""
        config = LoggingConfig(level="DEBUG", crash_file="/var/log/crash.log")
        assert config.level == "DEBUG"
        assert config.crash_file == "/var/log/crash.log"


class TestConfig:
    """Tests for Config and load_config."""

    def test_defaults(self):
        """Config builds default sections."""
        config = Config()
        assert isinstance(config.ids, IdConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict_partial(self):
        """Missing sections fall back to defaults."""
        config = Config.from_dict({"ids": {"precision": "microseconds"}})
        assert config.ids.precision is Precision.MICROSECONDS
        assert config.ids.default_bytes == 10
        assert config.server.port == 8080

    def test_load_missing_file(self, tmp_path):
        """Missing file gives defaults."""
        config = load_config(tmp_path / "nope.json")
        assert config.ids.default_bytes == 10

    def test_load_file(self, tmp_path):
        """Values are read from JSON."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "ids": {"default_bytes": 12, "ordered": False},
            "server": {"port": 9999},
            "logging": {"level": "DEBUG"},
        }))
        config = load_config(path)
        assert config.ids.default_bytes == 12
        assert config.ids.ordered is False
        assert config.server.port == 9999
        assert config.logging.level == "DEBUG"

    def test_load_bundled_file(self):
        """The shipped config.json loads."""
        config = load_config()
        assert config.ids.default_bytes == 10
        assert config.ids.precision is Precision.SECONDS
