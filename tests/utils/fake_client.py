"""Recording SQL client used in place of a Tarantool server."""

from typing import Any

from tarantool_adapter.database.implementations.tarantool import (
    SqlQueryResult,
    SqlUpdateResult,
)
from tarantool_adapter.database.interfaces import SqlClient

Call = tuple[str, str, list[Any] | None]


class FakeClient(SqlClient):
    """In-memory SQL client recording every call it receives."""

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self.query_result = SqlQueryResult(data=[], metadata=[])
        self.update_result = SqlUpdateResult(count=0)
        self.error: BaseException | None = None
        self.session_error: BaseException | None = None
        self.closed = False

    def execute_query(self, sql: str, params: list[Any]) -> SqlQueryResult:
        self.calls.append(("query", sql, params))
        self._raise_if_failing()
        return self.query_result

    def execute_update(self, sql: str, params: list[Any]) -> SqlUpdateResult:
        self.calls.append(("update", sql, params))
        self._raise_if_failing()
        return self.update_result

    def execute(self, sql: str) -> None:
        self.calls.append(("execute", sql, None))
        if self.session_error is not None:
            raise self.session_error

    def close(self) -> None:
        self.closed = True

    @property
    def statements(self) -> list[Call]:
        """Calls other than session setup."""
        return [call for call in self.calls if call[0] != "execute"]

    def _raise_if_failing(self) -> None:
        if self.error is not None:
            raise self.error


def rows(names: list[str], *data: list[Any]) -> SqlQueryResult:
    """Build a query result from column names and row values."""
    return SqlQueryResult(
        data=[list(row) for row in data],
        metadata=[{"name": name, "type": "any"} for name in names],
    )
