"""Statement routing between the query and update entry points."""

from typing import Any

from tarantool.error import Error as TarantoolError

from tarantool_adapter.database.interfaces import SqlClient
from tarantool_adapter.exceptions import QueryExecutionError
from tarantool_adapter.log import get_logger
from tarantool_adapter.types import DatabaseParamType, StatementType

from .results import SqlQueryResult, SqlUpdateResult

logger = get_logger(__name__)

# Lets ad hoc predicates scan spaces that have no matching index
ENABLE_SEQ_SCAN_SQL = 'SET SESSION "sql_seq_scan" = true;'


def statement_type(sql: str) -> str:
    """Return the upper-cased leading keyword of a statement.

    Example:
        >>> statement_type("  select * from t")
        'SELECT'
    """
    tokens = sql.strip().split(maxsplit=1)
    return tokens[0].upper() if tokens else ""


class QueryExecutor:
    """Sends SQL to a client and picks the matching entry point."""

    def __init__(self, client: SqlClient) -> None:
        self.client = client

    def execute(
        self, sql: str, bindings: DatabaseParamType = None
    ) -> SqlQueryResult | SqlUpdateResult:
        """Run a data statement with sequential scans enabled.

        Args:
            sql: SQL statement
            bindings: Positional parameters

        Returns:
            Rows for SELECT statements, an update result otherwise

        Raises:
            QueryExecutionError: If the client rejects the statement
        """
        params = list(bindings or [])
        try:
            self.client.execute(ENABLE_SEQ_SCAN_SQL)
        except TarantoolError as e:
            logger.error(f"Failed to enable sequential scan: {e}")
            raise QueryExecutionError(ENABLE_SEQ_SCAN_SQL, [], e) from e

        return self._dispatch(sql, params)

    def run_raw(self, sql: str) -> SqlQueryResult | SqlUpdateResult:
        """Run a statement as-is, without bindings or session setup."""
        return self._dispatch(sql, [])

    def _dispatch(
        self, sql: str, params: list[Any]
    ) -> SqlQueryResult | SqlUpdateResult:
        logger.debug(f"Executing: {sql} {params}")
        try:
            if statement_type(sql) == StatementType.SELECT:
                return self.client.execute_query(sql, params)
            return self.client.execute_update(sql, params)
        except TarantoolError as e:
            logger.error(f"Query execution failed: {e}")
            raise QueryExecutionError(sql, params, e) from e
