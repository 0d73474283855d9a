"""Tests for Tarantool schema builder."""

import pytest

from tarantool_adapter.database.implementations.tarantool import TarantoolSchemaBuilder
from tarantool_adapter.database.schema import (
    ColumnDefinition,
    ColumnType,
    Raw,
    TableDefinition,
)


@pytest.fixture
def schema_builder() -> TarantoolSchemaBuilder:
    """Create Tarantool schema builder instance."""
    return TarantoolSchemaBuilder()


@pytest.mark.parametrize(
    ("column_type", "expected"),
    [
        (ColumnType.CHAR, "TEXT"),
        (ColumnType.TEXT, "TEXT"),
        (ColumnType.MEDIUM_TEXT, "TEXT"),
        (ColumnType.LONG_TEXT, "TEXT"),
        (ColumnType.INTEGER, "INTEGER"),
        (ColumnType.BIG_INTEGER, "INTEGER"),
        (ColumnType.MEDIUM_INTEGER, "INTEGER"),
        (ColumnType.TINY_INTEGER, "INTEGER"),
        (ColumnType.SMALL_INTEGER, "INTEGER"),
        (ColumnType.FLOAT, "NUMBER"),
        (ColumnType.DOUBLE, "NUMBER"),
        (ColumnType.DECIMAL, "NUMBER"),
        (ColumnType.BOOLEAN, "SCALAR"),
        (ColumnType.ENUM, "TEXT"),
        (ColumnType.JSON, "TEXT"),
        (ColumnType.DATE, "VARCHAR(10)"),
        (ColumnType.DATE_TIME, "VARCHAR(30)"),
        (ColumnType.TIME, "VARCHAR(10)"),
        (ColumnType.TIMESTAMP, "VARCHAR(200)"),
        (ColumnType.BINARY, "SCALAR"),
    ],
)
def test_column_types(
    schema_builder: TarantoolSchemaBuilder, column_type: ColumnType, expected: str
) -> None:
    """Test each portable type maps to its Tarantool type."""
    column = ColumnDefinition("c", column_type, nullable=True)

    assert schema_builder.compile_column(column) == f'"c" {expected}'


def test_string_column_length(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test string columns use their length, 255 by default."""
    assert schema_builder.get_type(ColumnDefinition("s", ColumnType.STRING, 50)) == (
        "VARCHAR(50)"
    )
    assert schema_builder.get_type(ColumnDefinition("s", ColumnType.STRING)) == (
        "VARCHAR(255)"
    )


def test_column_type_given_as_string(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test the type may be passed by its value."""
    column = ColumnDefinition("n", "big_integer")  # type: ignore[arg-type]

    assert schema_builder.get_type(column) == "INTEGER"


def test_modifiers(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test default comes before nullability."""
    column = ColumnDefinition("name", ColumnType.STRING, 100, default="x")

    assert schema_builder.compile_column(column) == (
        "\"name\" VARCHAR(100) default 'x' not null"
    )


def test_default_literals(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test defaults are rendered per value type."""
    assert schema_builder.default_value(0) == "0"
    assert schema_builder.default_value(1.5) == "1.5"
    assert schema_builder.default_value(True) == "TRUE"
    assert schema_builder.default_value(False) == "FALSE"
    assert schema_builder.default_value("it's") == "'it''s'"
    assert schema_builder.default_value(Raw("CURRENT_TIMESTAMP")) == (
        "CURRENT_TIMESTAMP"
    )


def test_create_table_adds_primary_key_to_id(
    schema_builder: TarantoolSchemaBuilder,
) -> None:
    """Test the id column receives PRIMARY KEY AUTOINCREMENT."""
    table = TableDefinition(
        "users",
        [
            ColumnDefinition("id", ColumnType.INTEGER),
            ColumnDefinition("name", ColumnType.STRING, 100),
        ],
    )

    sql = schema_builder.create_table_sql(table)

    assert sql == (
        'CREATE TABLE IF NOT EXISTS "users" '
        '("id" INTEGER not null PRIMARY KEY AUTOINCREMENT, '
        '"name" VARCHAR(100) not null)'
    )


def test_create_table_without_id_is_unchanged(
    schema_builder: TarantoolSchemaBuilder,
) -> None:
    """Test no primary key is injected when there is no id column."""
    table = TableDefinition(
        "tags",
        [ColumnDefinition("name", ColumnType.STRING, 20, primary_key=True)],
    )

    sql = schema_builder.create_table_sql(table)

    assert sql == 'CREATE TABLE IF NOT EXISTS "tags" ("name" VARCHAR(20) not null PRIMARY KEY)'


def test_create_table_does_not_duplicate_markers(
    schema_builder: TarantoolSchemaBuilder,
) -> None:
    """Test existing markers are not added a second time."""
    table = TableDefinition(
        "items",
        [
            ColumnDefinition("id", ColumnType.INTEGER, auto_increment=True),
            ColumnDefinition("code", ColumnType.STRING, 10, primary_key=True),
        ],
    )

    sql = schema_builder.create_table_sql(table)

    assert sql.count("PRIMARY KEY") == 1
    assert sql.count("AUTOINCREMENT") == 1
    assert '"id" INTEGER not null AUTOINCREMENT,' in sql


def test_add_primary_key_only_touches_id(
    schema_builder: TarantoolSchemaBuilder,
) -> None:
    """Test only the column named exactly id is extended."""
    definitions = ['"idx" INTEGER', '"id" INTEGER', '"name" TEXT']

    result = schema_builder.add_primary_key(definitions)

    assert result == ['"idx" INTEGER', '"id" INTEGER PRIMARY KEY AUTOINCREMENT', '"name" TEXT']
    assert definitions[1] == '"id" INTEGER'


def test_add_primary_key_markers_case_insensitive(
    schema_builder: TarantoolSchemaBuilder,
) -> None:
    """Test lower-case markers count as present."""
    definitions = ['"id" INTEGER primary key autoincrement']

    assert schema_builder.add_primary_key(definitions) == definitions


def test_drop_table(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test DROP TABLE statement."""
    assert schema_builder.drop_table_sql("users") == 'drop table "users"'


def test_index_statements(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test index names are upper-cased and capped at 31 characters."""
    long_name = "users_email_and_name_and_created_at_index"

    assert schema_builder.create_index_sql("users", "users_email", ["email"]) == (
        'CREATE INDEX USERS_EMAIL ON "users" ("email")'
    )
    assert schema_builder.unique_index_sql("users", "uq", ["a", "b"]) == (
        'CREATE UNIQUE INDEX UQ ON "users" ("a", "b")'
    )
    assert schema_builder.drop_index_sql("users", long_name) == (
        f'DROP INDEX {long_name[:31].upper()} ON "users"'
    )


def test_primary_key_statement(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test ALTER TABLE adding a primary key."""
    assert schema_builder.primary_key_sql("users", ["id"]) == (
        'alter table "users" add PRIMARY KEY ("id")'
    )


def test_foreign_keys_are_not_compiled(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test foreign key compilation yields nothing."""
    assert schema_builder.foreign_key_sql("posts", ["user_id"], "users", ["id"]) is None


def test_drop_foreign(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test the constraint name is written as given."""
    assert schema_builder.drop_foreign_sql("posts", "posts_user_id_foreign") == (
        'alter table "posts" drop constraint posts_user_id_foreign'
    )


def test_add_column(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test ALTER TABLE adding a column."""
    column = ColumnDefinition("age", ColumnType.INTEGER, nullable=True)

    assert schema_builder.add_column_sql("users", column) == (
        'alter table "users" add column "age" INTEGER'
    )


def test_table_exists(schema_builder: TarantoolSchemaBuilder) -> None:
    """Test the space lookup statement."""
    assert schema_builder.table_exists_sql() == (
        'select * from "_space" where "name" = ?'
    )
