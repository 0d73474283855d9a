"""Database implementations package."""

from .tarantool import (
    SchemaManager,
    TarantoolConnection,
    TarantoolRepository,
)

__all__ = [
    "TarantoolConnection",
    "TarantoolRepository",
    "SchemaManager",
]
