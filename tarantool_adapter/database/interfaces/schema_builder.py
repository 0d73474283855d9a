"""Abstract schema builder interface for different SQL backends."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tarantool_adapter.database.schema import ColumnDefinition, TableDefinition


class SchemaBuilder(ABC):
    """Abstract schema builder for different SQL backends."""

    @abstractmethod
    def create_table_sql(self, table: TableDefinition) -> str:
        """Generate CREATE TABLE SQL.

        Args:
            table: Table definition

        Returns:
            CREATE TABLE SQL statement
        """
        pass

    @abstractmethod
    def drop_table_sql(self, table_name: str) -> str:
        """Generate DROP TABLE SQL."""
        pass

    @abstractmethod
    def create_index_sql(
        self, table_name: str, index_name: str, columns: Sequence[str]
    ) -> str:
        """Generate CREATE INDEX SQL.

        Args:
            table_name: Name of the table
            index_name: Name of the index
            columns: List of column names to index

        Returns:
            CREATE INDEX SQL statement
        """
        pass

    @abstractmethod
    def unique_index_sql(
        self, table_name: str, index_name: str, columns: Sequence[str]
    ) -> str:
        """Generate CREATE UNIQUE INDEX SQL."""
        pass

    @abstractmethod
    def drop_index_sql(self, table_name: str, index_name: str) -> str:
        """Generate DROP INDEX SQL."""
        pass

    @abstractmethod
    def primary_key_sql(self, table_name: str, columns: Sequence[str]) -> str:
        """Generate SQL adding a primary key to an existing table."""
        pass

    @abstractmethod
    def foreign_key_sql(
        self,
        table_name: str,
        columns: Sequence[str],
        on_table: str,
        references: Sequence[str],
    ) -> str | None:
        """Generate SQL adding a foreign key.

        Returns:
            The statement, or None when the backend does not support it
        """
        pass

    @abstractmethod
    def drop_foreign_sql(self, table_name: str, constraint_name: str) -> str:
        """Generate SQL dropping a foreign key constraint."""
        pass

    @abstractmethod
    def add_column_sql(self, table_name: str, column: ColumnDefinition) -> str:
        """Generate ALTER TABLE ADD COLUMN SQL.

        Args:
            table_name: Name of the table
            column: Column definition to add

        Returns:
            ALTER TABLE SQL statement
        """
        pass

    @abstractmethod
    def table_exists_sql(self) -> str:
        """Generate a query that finds a table by name (bound as parameter)."""
        pass
