"""Schema operations run through a Tarantool connection."""

from collections.abc import Sequence

from tarantool_adapter.database.schema import ColumnDefinition, IndexDefinition, TableDefinition
from tarantool_adapter.log import get_logger

from .tarantool_connection import TarantoolConnection

logger = get_logger(__name__)


class SchemaManager:
    """Compiles schema changes with the connection's schema builder and runs them."""

    def __init__(self, connection: TarantoolConnection) -> None:
        self.connection = connection
        self.builder = connection.schema_builder

    def has_table(self, table_name: str) -> bool:
        """Check whether a space with this name exists."""
        rows = self.connection.select(self.builder.table_exists_sql(), [table_name])
        return len(rows) > 0

    def create(self, table: TableDefinition) -> None:
        """Create a table and then its indexes."""
        self.connection.unprepared(self.builder.create_table_sql(table))
        for index in table.indexes:
            self.create_index(table.name, index)
        logger.info(f"> Created table {table.name}")

    def drop(self, table_name: str) -> None:
        self.connection.unprepared(self.builder.drop_table_sql(table_name))
        logger.info(f"Dropped table {table_name}")

    def drop_if_exists(self, table_name: str) -> bool:
        """Drop a table when it exists.

        Returns:
            True if the table was dropped
        """
        if not self.has_table(table_name):
            return False
        self.drop(table_name)
        return True

    def add_column(self, table_name: str, column: ColumnDefinition) -> None:
        self.connection.unprepared(self.builder.add_column_sql(table_name, column))

    def create_index(self, table_name: str, index: IndexDefinition) -> None:
        if index.unique:
            sql = self.builder.unique_index_sql(table_name, index.name, index.columns)
        else:
            sql = self.builder.create_index_sql(table_name, index.name, index.columns)
        self.connection.unprepared(sql)

    def drop_index(self, table_name: str, index_name: str) -> None:
        self.connection.unprepared(self.builder.drop_index_sql(table_name, index_name))

    def add_primary_key(self, table_name: str, columns: Sequence[str]) -> None:
        self.connection.unprepared(self.builder.primary_key_sql(table_name, columns))

    def add_foreign_key(
        self,
        table_name: str,
        columns: Sequence[str],
        on_table: str,
        references: Sequence[str],
    ) -> bool:
        """Add a foreign key if the builder compiles one.

        Returns:
            False when no statement was compiled and nothing ran
        """
        sql = self.builder.foreign_key_sql(table_name, columns, on_table, references)
        if sql is None:
            logger.warning(f"Foreign keys are not supported; skipped on {table_name}")
            return False
        self.connection.unprepared(sql)
        return True

    def drop_foreign(self, table_name: str, constraint_name: str) -> None:
        self.connection.unprepared(
            self.builder.drop_foreign_sql(table_name, constraint_name)
        )
