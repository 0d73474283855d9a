"""Common type definitions for the tarantool adapter."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeAlias

DatabaseParamType: TypeAlias = list[Any] | tuple[Any, ...] | None
RepositoryRowType: TypeAlias = dict[str, Any] | tuple[Any, ...]
RecordType: TypeAlias = dict[str, Any]
ConfigMapping: TypeAlias = Mapping[str, Any]


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class StatementType(str, Enum):
    """Leading keyword of the SQL statements the executor routes on."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
