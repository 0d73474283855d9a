"""Tarantool database implementation package."""

from .client import TarantoolClient
from .executor import QueryExecutor, statement_type
from .processor import TarantoolProcessor
from .query_builder import TarantoolQueryBuilder
from .repository import TarantoolRepository
from .results import SqlQueryResult, SqlUpdateResult
from .schema_builder import TarantoolSchemaBuilder
from .schema_manager import SchemaManager
from .tarantool_connection import QueryLogEntry, TarantoolConnection

__all__ = [
    "TarantoolClient",
    "TarantoolConnection",
    "TarantoolProcessor",
    "TarantoolQueryBuilder",
    "TarantoolRepository",
    "TarantoolSchemaBuilder",
    "QueryExecutor",
    "QueryLogEntry",
    "SchemaManager",
    "SqlQueryResult",
    "SqlUpdateResult",
    "statement_type",
]
