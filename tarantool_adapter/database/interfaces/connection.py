"""Database connection interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from types import TracebackType
from typing import Any

from tarantool_adapter.types import DatabaseParamType, RecordType


class DatabaseConnection(ABC):
    """Abstract database connection interface.

    Statements arrive already compiled by the query and schema builders;
    implementations only run them and shape the results.
    """

    @abstractmethod
    def select(self, query: str, bindings: DatabaseParamType = None) -> list[RecordType]:
        """Run a select statement.

        Args:
            query: SQL query
            bindings: Positional query parameters

        Returns:
            List of rows as dictionaries
        """
        pass

    def select_one(
        self, query: str, bindings: DatabaseParamType = None
    ) -> RecordType | None:
        """Run a select statement and return the first row.

        Args:
            query: SQL query
            bindings: Positional query parameters

        Returns:
            Single row as dictionary or None if nothing matched
        """
        records = self.select(query, bindings)
        return records[0] if records else None

    @abstractmethod
    def insert(self, query: str, bindings: DatabaseParamType = None) -> Any:
        """Run an insert statement."""
        pass

    @abstractmethod
    def update(self, query: str, bindings: DatabaseParamType = None) -> Any:
        """Run an update statement."""
        pass

    @abstractmethod
    def delete(self, query: str, bindings: DatabaseParamType = None) -> int:
        """Run a delete statement."""
        pass

    @abstractmethod
    def statement(self, query: str, bindings: DatabaseParamType = None) -> bool:
        """Run a statement and report whether it succeeded."""
        pass

    @abstractmethod
    def unprepared(self, query: str) -> bool:
        """Run a raw statement without bindings.

        Returns:
            True if the statement produced a result
        """
        pass

    @abstractmethod
    def cursor(
        self, query: str, bindings: DatabaseParamType = None
    ) -> Iterator[RecordType]:
        """Run a select statement and iterate over its rows."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection."""
        pass

    def __enter__(self) -> "DatabaseConnection":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit."""
        self.disconnect()
