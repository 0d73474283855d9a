"""Named database connections and the drivers that create them."""

from collections.abc import Callable, Mapping
from typing import Any

from tarantool_adapter.config import ConnectionConfig
from tarantool_adapter.database.implementations.tarantool import TarantoolConnection
from tarantool_adapter.database.interfaces import DatabaseConnection
from tarantool_adapter.exceptions import ConfigurationError
from tarantool_adapter.log import get_logger
from tarantool_adapter.types import ConfigMapping

logger = get_logger(__name__)

ConnectionFactory = Callable[[ConnectionConfig, str], DatabaseConnection]


class DatabaseManager:
    """Creates connections lazily from named configurations.

    Drivers are registered with :meth:`extend`; the configuration's
    ``driver`` field picks the factory.
    """

    def __init__(
        self,
        connections: Mapping[str, ConnectionConfig | ConfigMapping],
        default: str | None = None,
    ) -> None:
        """Initialize database manager.

        Args:
            connections: Configuration per connection name
            default: Name used when none is given (the first name if unset)
        """
        self._configs = {
            name: ConnectionConfig.from_value(config)
            for name, config in connections.items()
        }
        self.default = default or next(iter(self._configs), None)
        self._factories: dict[str, ConnectionFactory] = {}
        self._connections: dict[str, DatabaseConnection] = {}

    def extend(self, driver: str, factory: ConnectionFactory) -> None:
        """Register a factory for a driver name."""
        self._factories[driver] = factory

    def connection(self, name: str | None = None) -> DatabaseConnection:
        """Get a connection by name, creating it on first use.

        Raises:
            ConfigurationError: If the name or its driver is unknown
        """
        name = name or self.default
        if name is None:
            raise ConfigurationError("No database connections are configured")

        if name not in self._connections:
            self._connections[name] = self._make_connection(name)
        return self._connections[name]

    def purge(self, name: str | None = None) -> None:
        """Disconnect a connection and forget it."""
        name = name or self.default
        connection = self._connections.pop(name, None) if name else None
        if connection is not None:
            connection.disconnect()

    def purge_all(self) -> None:
        for name in list(self._connections):
            self.purge(name)

    @property
    def connections(self) -> dict[str, DatabaseConnection]:
        return dict(self._connections)

    def _make_connection(self, name: str) -> DatabaseConnection:
        config = self._configs.get(name)
        if config is None:
            raise ConfigurationError(f"Database connection [{name}] not configured")

        factory = self._factories.get(config.driver)
        if factory is None:
            raise ConfigurationError(f"Unsupported driver [{config.driver}]")

        logger.info(f"Opening connection [{name}] with driver {config.driver}")
        return factory(config, name)

    def __enter__(self) -> "DatabaseManager":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.purge_all()


def register_tarantool(manager: DatabaseManager) -> DatabaseManager:
    """Register the ``tarantool`` driver on a manager."""
    manager.extend(
        TarantoolConnection.driver_name,
        lambda config, name: TarantoolConnection(config, name=name),
    )
    return manager
