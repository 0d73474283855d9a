"""Database interfaces module."""

from .client import SqlClient
from .connection import DatabaseConnection
from .query_builder import QueryBuilder
from .repository import Repository
from .schema_builder import SchemaBuilder

__all__ = [
    "SqlClient",
    "DatabaseConnection",
    "QueryBuilder",
    "Repository",
    "SchemaBuilder",
]
