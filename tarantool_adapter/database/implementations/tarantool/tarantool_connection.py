"""Tarantool database connection implementation."""

import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

from tarantool_adapter.config import ConnectionConfig
from tarantool_adapter.database.dsn import build_dsn
from tarantool_adapter.database.interfaces import DatabaseConnection, SqlClient
from tarantool_adapter.log import get_logger
from tarantool_adapter.types import ConfigMapping, DatabaseParamType, RecordType

from .client import TarantoolClient
from .executor import QueryExecutor
from .processor import TarantoolProcessor
from .query_builder import TarantoolQueryBuilder
from .results import SqlQueryResult, SqlUpdateResult
from .schema_builder import TarantoolSchemaBuilder

logger = get_logger(__name__)

R = TypeVar("R")


@dataclass
class QueryLogEntry:
    """A statement run on the connection."""

    sql: str
    bindings: list[Any]
    time_ms: float


class TarantoolConnection(DatabaseConnection):
    """Tarantool database connection implementation.

    Wraps exactly one client. Not safe for concurrent use; callers keep one
    connection per unit of work.
    """

    driver_name = "tarantool"

    def __init__(
        self,
        config: ConnectionConfig | ConfigMapping,
        client: SqlClient | None = None,
        name: str = "tarantool",
    ) -> None:
        """Initialize Tarantool connection.

        Args:
            config: Connection configuration; copied, later changes to the
                caller's object have no effect
            client: Client to use instead of connecting with the DSN
            name: Connection name used in log messages

        Raises:
            ConfigurationError: If the configuration cannot form a DSN
            TarantoolConnectionError: If the server cannot be reached
        """
        self.name = name
        self.config = ConnectionConfig.from_value(config)
        self.dsn = build_dsn(self.config)
        self._client = client if client is not None else self.create_client(self.dsn)
        self._executor = QueryExecutor(self._client)

        self._post_processor = TarantoolProcessor()
        self._query_builder = TarantoolQueryBuilder()
        self._schema_builder = TarantoolSchemaBuilder()

        self.records_modified = False
        self._pretending = False
        self._logging_queries = False
        self._query_log: list[QueryLogEntry] = []

    def create_client(self, dsn: str) -> SqlClient:
        """Create the network client for a DSN."""
        return TarantoolClient.from_dsn(dsn)

    @property
    def client(self) -> SqlClient:
        return self._client

    @property
    def query_builder(self) -> TarantoolQueryBuilder:
        return self._query_builder

    @property
    def schema_builder(self) -> TarantoolSchemaBuilder:
        return self._schema_builder

    @property
    def post_processor(self) -> TarantoolProcessor:
        return self._post_processor

    def select(self, query: str, bindings: DatabaseParamType = None) -> list[RecordType]:
        """Run a select statement.

        Returns:
            Records with lower-cased column names; a non-select statement
            yields a single ``{"info": affected_rows}`` record
        """
        result = self._run(query, bindings, self._executor.execute)
        if result is None:
            return []
        return self._post_processor.process_select(result)

    def insert(
        self, query: str, bindings: DatabaseParamType = None
    ) -> SqlQueryResult | SqlUpdateResult:
        return self._run_changing(query, bindings)

    def update(
        self, query: str, bindings: DatabaseParamType = None
    ) -> SqlQueryResult | SqlUpdateResult:
        return self._run_changing(query, bindings)

    def delete(self, query: str, bindings: DatabaseParamType = None) -> int:
        """Run a delete statement.

        Returns:
            1 if any row was deleted, 0 otherwise. The exact number of deleted
            rows is not reported.
        """
        result = self._run_changing(query, bindings)
        return int(result.count != 0)

    def statement(self, query: str, bindings: DatabaseParamType = None) -> bool:
        self._run_changing(query, bindings)
        return True

    def insert_get_id(self, query: str, bindings: DatabaseParamType = None) -> Any:
        """Run an insert and return the id generated for its first row."""
        return self._post_processor.process_insert_get_id(self, query, bindings)

    def unprepared(self, query: str) -> bool:
        """Run a raw statement, typically DDL, without bindings.

        Returns:
            True if the statement produced a result
        """
        result = self._run(query, None, lambda sql, bindings: self._executor.run_raw(sql))
        if self._pretending:
            return True

        changed = result is not None
        if changed:
            self.records_modified = True
        return changed

    def cursor(
        self, query: str, bindings: DatabaseParamType = None
    ) -> Iterator[RecordType]:
        """Iterate over the rows of a select statement.

        The statement runs when ``cursor`` is called and the whole result is
        fetched at once. The iterator is single pass; call ``cursor`` again
        to re-run the query.

        Raises:
            QueryExecutionError: If the statement fails
            ValueError: If the statement does not return rows
        """
        result = self._run(query, bindings, self._executor.execute)
        if result is None:
            return iter(())
        if not isinstance(result, SqlQueryResult):
            raise ValueError(f"cursor() needs a statement returning rows: {query}")

        lowered = SqlQueryResult(
            data=result.data,
            metadata=self._post_processor.lower_metadata(result.metadata),
        )
        return iter(lowered)

    def disconnect(self) -> None:
        self._client.close()
        logger.info(f"Closed connection [{self.name}]")

    # Query log

    def enable_query_log(self) -> None:
        self._logging_queries = True

    def disable_query_log(self) -> None:
        self._logging_queries = False

    def get_query_log(self) -> list[QueryLogEntry]:
        return list(self._query_log)

    def flush_query_log(self) -> None:
        self._query_log = []

    @property
    def pretending(self) -> bool:
        return self._pretending

    def pretend(self, callback: Callable[["TarantoolConnection"], Any]) -> list[QueryLogEntry]:
        """Collect the statements a callback would run without running them.

        Args:
            callback: Function receiving this connection

        Returns:
            The statements issued by the callback
        """
        logging_queries = self._logging_queries
        self._query_log = []
        self._logging_queries = True
        self._pretending = True
        try:
            callback(self)
            return self.get_query_log()
        finally:
            self._pretending = False
            self._logging_queries = logging_queries

    def _run_changing(
        self, query: str, bindings: DatabaseParamType
    ) -> SqlQueryResult | SqlUpdateResult:
        result = self._run(query, bindings, self._executor.execute)
        if result is None:
            return SqlUpdateResult(count=0)
        if result.count > 0:
            self.records_modified = True
        return result

    def _run(
        self,
        query: str,
        bindings: DatabaseParamType,
        callback: Callable[[str, DatabaseParamType], R],
    ) -> R | None:
        """Run a statement through a callback, timing and logging it.

        Nothing is executed while pretending; the statement is only logged
        and None is returned.
        """
        params = list(bindings or [])
        start = time.perf_counter()
        result = None if self._pretending else callback(query, params)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

        logger.debug(f"[{self.name}] {query} {params} ({elapsed_ms} ms)")
        if self._logging_queries:
            self._query_log.append(QueryLogEntry(query, params, elapsed_ms))
        return result
