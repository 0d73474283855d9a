"""SQL client interface the executor drives."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tarantool_adapter.database.implementations.tarantool.results import (
        SqlQueryResult,
        SqlUpdateResult,
    )


class SqlClient(ABC):
    """Capabilities needed from a network client that speaks SQL."""

    @abstractmethod
    def execute_query(self, sql: str, params: list[Any]) -> "SqlQueryResult":
        """Run a row-returning statement.

        Args:
            sql: SQL statement
            params: Positional bindings

        Returns:
            Column metadata and rows
        """
        pass

    @abstractmethod
    def execute_update(self, sql: str, params: list[Any]) -> "SqlUpdateResult":
        """Run a data- or schema-changing statement.

        Args:
            sql: SQL statement
            params: Positional bindings

        Returns:
            Affected row count and generated ids
        """
        pass

    @abstractmethod
    def execute(self, sql: str) -> None:
        """Run a session command whose result is not needed."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the underlying network connection."""
        pass
