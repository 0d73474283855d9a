"""Database layer: builders, connections and schema tools for Tarantool."""

from .dsn import build_dsn, parse_dsn
from .implementations.tarantool import (
    SchemaManager,
    SqlQueryResult,
    SqlUpdateResult,
    TarantoolConnection,
    TarantoolQueryBuilder,
    TarantoolRepository,
    TarantoolSchemaBuilder,
)
from .manager import DatabaseManager, register_tarantool
from .schema import ColumnDefinition, ColumnType, IndexDefinition, Raw, TableDefinition

__all__ = [
    "build_dsn",
    "parse_dsn",
    "ColumnDefinition",
    "ColumnType",
    "IndexDefinition",
    "Raw",
    "TableDefinition",
    "DatabaseManager",
    "register_tarantool",
    "SchemaManager",
    "SqlQueryResult",
    "SqlUpdateResult",
    "TarantoolConnection",
    "TarantoolQueryBuilder",
    "TarantoolRepository",
    "TarantoolSchemaBuilder",
]
