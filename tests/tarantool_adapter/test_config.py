"""Tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from tarantool_adapter.config import ConnectionConfig, Environment, Settings, load_settings
from tarantool_adapter.database.dsn import build_dsn, parse_dsn


def test_environment_values() -> None:
    """Test environment enum values."""
    assert Environment.DEVELOPMENT == "development"
    assert Environment.PRODUCTION == "production"
    assert Environment.TESTING == "testing"


def test_default_settings() -> None:
    """Test default settings values."""
    with patch.dict(os.environ, {}, clear=True):
        settings = load_settings()

    assert settings.environment == Environment.DEVELOPMENT
    assert settings.log_level == "INFO"
    assert settings.host == "127.0.0.1"
    assert settings.port == 3301
    assert settings.dsn is None
    assert settings.connect_timeout is None
    assert settings.is_development is True


def test_settings_from_environment() -> None:
    """Test TARANTOOL_* variables are read."""
    env = {
        "TARANTOOL_ENV": "production",
        "TARANTOOL_LOG_LEVEL": "debug",
        "TARANTOOL_HOST": "db",
        "TARANTOOL_PORT": "3302",
        "TARANTOOL_USERNAME": "admin",
        "TARANTOOL_PASSWORD": "secret",
        "TARANTOOL_CONNECT_TIMEOUT": "2.5",
        "TARANTOOL_SOCKET_TIMEOUT": "",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = load_settings()

    assert settings.is_production is True
    assert settings.is_testing is False
    assert settings.log_level == "DEBUG"
    assert settings.port == 3302
    assert settings.socket_timeout is None

    config = settings.connection_config()
    assert config.host == "db"
    assert config.username == "admin"
    assert config.options == {"connect_timeout": 2.5}


def test_invalid_environment() -> None:
    """Test an unknown environment name is rejected."""
    with patch.dict(os.environ, {"TARANTOOL_ENV": "staging"}, clear=True):
        with pytest.raises(ValueError):
            load_settings()


def test_connection_config_ignores_unknown_keys() -> None:
    """Test framework-level keys in a connection mapping are ignored."""
    config = ConnectionConfig.from_value(
        {"driver": "tarantool", "host": "db", "prefix": "", "charset": "utf8"}
    )

    assert config.host == "db"
    assert config.driver == "tarantool"


def test_connection_config_copy_is_deep() -> None:
    """Test from_value does not share options with the original."""
    original = ConnectionConfig(host="db", options={"connect_timeout": 1})

    copy = ConnectionConfig.from_value(original)
    copy.options["connect_timeout"] = 5

    assert original.options == {"connect_timeout": 1}
    assert Settings().connection_config().type == "tcp"


def test_unix_socket_settings() -> None:
    """Test unix socket settings produce a DSN without a port."""
    env = {
        "TARANTOOL_HOST": "/var/run/tarantool.sock",
        "TARANTOOL_CONNECTION_TYPE": "unix",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = load_settings()

    dsn = build_dsn(settings.connection_config())

    assert dsn == "unix:///var/run/tarantool.sock"
    assert parse_dsn(dsn)["port"] == "/var/run/tarantool.sock"
