"""Tarantool-specific schema builder implementation."""

from collections.abc import Callable, Sequence
from typing import Any

from tarantool_adapter.database.interfaces.schema_builder import SchemaBuilder
from tarantool_adapter.database.schema import (
    ColumnDefinition,
    ColumnType,
    Raw,
    TableDefinition,
)
from tarantool_adapter.database.utils import columnize, quote_identifier
from tarantool_adapter.log import get_logger

logger = get_logger(__name__)

# Tarantool truncates longer index names
MAX_INDEX_NAME_LENGTH = 31
TABLE_EXISTS_SQL = 'select * from "_space" where "name" = ?'
DEFAULT_STRING_LENGTH = 255
ID_COLUMN = '"id"'


class TarantoolSchemaBuilder(SchemaBuilder):
    """Tarantool-specific schema builder.

    Columns are compiled as ``"name" TYPE`` followed by the modifiers in
    ``modifiers`` order. Tarantool needs a primary key on every space, so a
    table with an ``id`` column gets ``PRIMARY KEY AUTOINCREMENT`` on it
    unless the markers are already present.
    """

    modifiers: tuple[str, ...] = ("default", "nullable", "primary_key", "increment")

    def create_table_sql(self, table: TableDefinition) -> str:
        """Generate CREATE TABLE SQL for Tarantool.

        Args:
            table: Table definition

        Returns:
            CREATE TABLE SQL statement
        """
        definitions = self.add_primary_key(
            [self.compile_column(column) for column in table.columns]
        )
        columns_sql = ", ".join(definitions)
        return f"CREATE TABLE IF NOT EXISTS {quote_identifier(table.name)} ({columns_sql})"

    def drop_table_sql(self, table_name: str) -> str:
        return f"drop table {quote_identifier(table_name)}"

    def create_index_sql(
        self, table_name: str, index_name: str, columns: Sequence[str]
    ) -> str:
        return (
            f"CREATE INDEX {self.index_name(index_name)} "
            f"ON {quote_identifier(table_name)} ({columnize(columns)})"
        )

    def unique_index_sql(
        self, table_name: str, index_name: str, columns: Sequence[str]
    ) -> str:
        return (
            f"CREATE UNIQUE INDEX {self.index_name(index_name)} "
            f"ON {quote_identifier(table_name)} ({columnize(columns)})"
        )

    def drop_index_sql(self, table_name: str, index_name: str) -> str:
        return f"DROP INDEX {self.index_name(index_name)} ON {quote_identifier(table_name)}"

    def primary_key_sql(self, table_name: str, columns: Sequence[str]) -> str:
        """Generate SQL adding a primary key.

        Tarantool names the key itself, so no constraint name is emitted.
        """
        return self._compile_key(table_name, columns, "PRIMARY KEY")

    def foreign_key_sql(
        self,
        table_name: str,
        columns: Sequence[str],
        on_table: str,
        references: Sequence[str],
    ) -> str | None:
        """Foreign keys are not compiled for Tarantool; always returns None."""
        logger.debug(
            f"Skipping foreign key {table_name}({', '.join(columns)}) -> "
            f"{on_table}({', '.join(references)}): not supported"
        )
        return None

    def drop_foreign_sql(self, table_name: str, constraint_name: str) -> str:
        # The constraint name is written as given so existing migrations keep working
        return f"alter table {quote_identifier(table_name)} drop constraint {constraint_name}"

    def add_column_sql(self, table_name: str, column: ColumnDefinition) -> str:
        return (
            f"alter table {quote_identifier(table_name)} "
            f"add column {self.compile_column(column)}"
        )

    def table_exists_sql(self) -> str:
        return TABLE_EXISTS_SQL

    def index_name(self, name: str) -> str:
        return name[:MAX_INDEX_NAME_LENGTH].upper()

    def compile_column(self, column: ColumnDefinition) -> str:
        """Compile one column into its definition inside CREATE TABLE."""
        sql = f"{quote_identifier(column.name)} {self.get_type(column)}"
        for modifier in self.modifiers:
            sql += getattr(self, f"modify_{modifier}")(column)
        return sql

    def add_primary_key(self, definitions: list[str]) -> list[str]:
        """Put PRIMARY KEY AUTOINCREMENT on the id column when missing.

        Args:
            definitions: Compiled column definitions

        Returns:
            The definitions, with at most the id column extended
        """
        id_index: int | None = None
        primary_key_exists = False
        autoincrement_exists = False

        for index, definition in enumerate(definitions):
            lowered = definition.lower()
            if "primary key" in lowered:
                primary_key_exists = True
            if "autoincrement" in lowered:
                autoincrement_exists = True
            if id_index is None and lowered.startswith(f"{ID_COLUMN} "):
                id_index = index

        if id_index is None:
            return definitions

        suffix = ""
        if not primary_key_exists:
            suffix += " PRIMARY KEY"
        if not autoincrement_exists:
            suffix += " AUTOINCREMENT"

        result = list(definitions)
        result[id_index] += suffix
        return result

    def _compile_key(self, table_name: str, columns: Sequence[str], key_type: str) -> str:
        return f"alter table {quote_identifier(table_name)} add {key_type} ({columnize(columns)})"

    # Modifiers

    def modify_default(self, column: ColumnDefinition) -> str:
        if column.default is None:
            return ""
        return f" default {self.default_value(column.default)}"

    def modify_nullable(self, column: ColumnDefinition) -> str:
        return "" if column.nullable else " not null"

    def modify_primary_key(self, column: ColumnDefinition) -> str:
        return " PRIMARY KEY" if column.primary_key else ""

    def modify_increment(self, column: ColumnDefinition) -> str:
        return " AUTOINCREMENT" if column.auto_increment else ""

    def default_value(self, value: Any) -> str:
        """Render a column default as an SQL literal."""
        if isinstance(value, Raw):
            return value.sql
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, (int, float)):
            return str(value)
        escaped = str(value).replace("'", "''")
        return f"'{escaped}'"

    # Column types

    def get_type(self, column: ColumnDefinition) -> str:
        renderer: Callable[[ColumnDefinition], str] = getattr(
            self, f"type_{ColumnType(column.type).value}"
        )
        return renderer(column)

    def type_char(self, column: ColumnDefinition) -> str:
        return "TEXT"

    def type_string(self, column: ColumnDefinition) -> str:
        return f"VARCHAR({column.length or DEFAULT_STRING_LENGTH})"

    def type_text(self, column: ColumnDefinition) -> str:
        return "TEXT"

    def type_medium_text(self, column: ColumnDefinition) -> str:
        return "TEXT"

    def type_long_text(self, column: ColumnDefinition) -> str:
        return "TEXT"

    def type_integer(self, column: ColumnDefinition) -> str:
        return "INTEGER"

    def type_big_integer(self, column: ColumnDefinition) -> str:
        return "INTEGER"

    def type_medium_integer(self, column: ColumnDefinition) -> str:
        return "INTEGER"

    def type_tiny_integer(self, column: ColumnDefinition) -> str:
        return "INTEGER"

    def type_small_integer(self, column: ColumnDefinition) -> str:
        return "INTEGER"

    def type_float(self, column: ColumnDefinition) -> str:
        return "NUMBER"

    def type_double(self, column: ColumnDefinition) -> str:
        return "NUMBER"

    def type_decimal(self, column: ColumnDefinition) -> str:
        return "NUMBER"

    def type_boolean(self, column: ColumnDefinition) -> str:
        return "SCALAR"

    def type_enum(self, column: ColumnDefinition) -> str:
        return "TEXT"

    def type_json(self, column: ColumnDefinition) -> str:
        return "TEXT"

    def type_date(self, column: ColumnDefinition) -> str:
        return "VARCHAR(10)"

    def type_date_time(self, column: ColumnDefinition) -> str:
        return "VARCHAR(30)"

    def type_time(self, column: ColumnDefinition) -> str:
        return "VARCHAR(10)"

    def type_timestamp(self, column: ColumnDefinition) -> str:
        return "VARCHAR(200)"

    def type_binary(self, column: ColumnDefinition) -> str:
        return "SCALAR"
