"""Tests for the named connection manager."""

from unittest.mock import MagicMock, patch

import pytest

from tarantool_adapter.config import ConnectionConfig
from tarantool_adapter.database import DatabaseManager, register_tarantool
from tarantool_adapter.database.implementations.tarantool import TarantoolConnection
from tarantool_adapter.exceptions import ConfigurationError


@pytest.fixture
def manager() -> DatabaseManager:
    """Create a manager with two configured connections."""
    return DatabaseManager(
        {
            "main": {"driver": "tarantool", "host": "db", "port": 3301},
            "reports": ConnectionConfig(host="reports", port=3302),
        }
    )


def test_default_is_first_connection(manager: DatabaseManager) -> None:
    """Test the first configured name is the default."""
    assert manager.default == "main"


def test_connection_uses_registered_factory(manager: DatabaseManager) -> None:
    """Test connections are built by the driver factory and cached."""
    factory = MagicMock()
    manager.extend("tarantool", factory)

    first = manager.connection()
    second = manager.connection("main")

    assert first is second
    factory.assert_called_once()
    config, name = factory.call_args.args
    assert config.host == "db"
    assert name == "main"


def test_unknown_connection(manager: DatabaseManager) -> None:
    """Test unknown names are rejected."""
    with pytest.raises(ConfigurationError):
        manager.connection("missing")


def test_unknown_driver() -> None:
    """Test a driver without a factory is rejected."""
    manager = DatabaseManager({"main": {"driver": "mysql", "host": "db"}})

    with pytest.raises(ConfigurationError):
        manager.connection()


def test_no_connections_configured() -> None:
    """Test an empty manager has nothing to return."""
    with pytest.raises(ConfigurationError):
        DatabaseManager({}).connection()


def test_purge_disconnects(manager: DatabaseManager) -> None:
    """Test purge closes and forgets the connection."""
    factory = MagicMock()
    manager.extend("tarantool", factory)
    connection = manager.connection("reports")

    manager.purge("reports")

    connection.disconnect.assert_called_once_with()
    assert "reports" not in manager.connections
    assert manager.connection("reports") is not None
    assert factory.call_count == 2


def test_register_tarantool(manager: DatabaseManager) -> None:
    """Test the tarantool driver creates Tarantool connections."""
    register_tarantool(manager)

    with patch("tarantool.Connection"):
        connection = manager.connection("reports")

    assert isinstance(connection, TarantoolConnection)
    assert connection.name == "reports"
    assert connection.dsn == "tcp://reports:3302"


def test_context_manager_purges_all(manager: DatabaseManager) -> None:
    """Test leaving the manager disconnects every connection."""
    manager.extend("tarantool", MagicMock(side_effect=lambda config, name: MagicMock()))
    with manager:
        main = manager.connection("main")
        reports = manager.connection("reports")

    main.disconnect.assert_called_once_with()
    reports.disconnect.assert_called_once_with()
    assert manager.connections == {}
