"""SQL client backed by the tarantool connector."""

from typing import Any

import tarantool
from tarantool.error import Error as TarantoolError

from tarantool_adapter.database.dsn import parse_dsn, redact_dsn
from tarantool_adapter.database.interfaces import SqlClient
from tarantool_adapter.exceptions import TarantoolConnectionError
from tarantool_adapter.log import get_logger

from .results import SqlQueryResult, SqlUpdateResult

logger = get_logger(__name__)

# IPROTO body keys describing SQL result columns
IPROTO_METADATA = 0x32
IPROTO_FIELD_NAME = 0x00
IPROTO_FIELD_TYPE = 0x01


class TarantoolClient(SqlClient):
    """Runs SQL through a ``tarantool.Connection``."""

    def __init__(self, connection: tarantool.Connection) -> None:
        """Initialize client.

        Args:
            connection: Open tarantool connection
        """
        self._connection = connection

    @classmethod
    def from_dsn(cls, dsn: str) -> "TarantoolClient":
        """Connect to the server described by a DSN.

        Args:
            dsn: Connection string, see :func:`build_dsn`

        Returns:
            Connected client

        Raises:
            ConfigurationError: If the DSN cannot be parsed
            TarantoolConnectionError: If the server cannot be reached
        """
        kwargs = parse_dsn(dsn)
        try:
            connection = tarantool.Connection(**kwargs)
        except (TarantoolError, OSError) as e:
            logger.error(f"Failed to connect to Tarantool: {e}")
            raise TarantoolConnectionError(redact_dsn(dsn), e) from e

        logger.info(f"Connected to Tarantool: {redact_dsn(dsn)}")
        return cls(connection)

    @property
    def connection(self) -> tarantool.Connection:
        return self._connection

    def execute_query(self, sql: str, params: list[Any]) -> SqlQueryResult:
        response = self._connection.execute(sql, params)
        return SqlQueryResult(
            data=list(response.data or []),
            metadata=_read_metadata(response),
        )

    def execute_update(self, sql: str, params: list[Any]) -> SqlUpdateResult:
        response = self._connection.execute(sql, params)
        return SqlUpdateResult(
            count=response.affected_row_count or 0,
            autoincrement_ids=list(response.autoincrement_ids or []),
        )

    def execute(self, sql: str) -> None:
        self._connection.execute(sql)

    def close(self) -> None:
        self._connection.close()
        logger.info("Disconnected from Tarantool")


def _read_metadata(response: Any) -> list[dict[str, Any]]:
    """Extract column names and types from an SQL response body."""
    # Connector releases before the public ``body`` property keep it private
    body = getattr(response, "body", None)
    if body is None:
        body = getattr(response, "_body", None) or {}

    return [
        {
            "name": column.get(IPROTO_FIELD_NAME),
            "type": column.get(IPROTO_FIELD_TYPE),
        }
        for column in body.get(IPROTO_METADATA, [])
    ]
