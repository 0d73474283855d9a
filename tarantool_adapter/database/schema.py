"""Database schema definitions consumed by the schema builders."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ColumnType(str, Enum):
    """Portable column types understood by the schema builders."""

    CHAR = "char"
    STRING = "string"
    TEXT = "text"
    MEDIUM_TEXT = "medium_text"
    LONG_TEXT = "long_text"
    INTEGER = "integer"
    BIG_INTEGER = "big_integer"
    MEDIUM_INTEGER = "medium_integer"
    TINY_INTEGER = "tiny_integer"
    SMALL_INTEGER = "small_integer"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    ENUM = "enum"
    JSON = "json"
    DATE = "date"
    DATE_TIME = "date_time"
    TIME = "time"
    TIMESTAMP = "timestamp"
    BINARY = "binary"


@dataclass(frozen=True)
class Raw:
    """SQL fragment that is written into a statement verbatim."""

    sql: str

    def __str__(self) -> str:
        return self.sql


@dataclass
class ColumnDefinition:
    """Database column definition."""

    name: str
    type: ColumnType
    length: int | None = None
    nullable: bool = False
    default: Any = None
    primary_key: bool = False
    auto_increment: bool = False


@dataclass
class IndexDefinition:
    """Database index definition."""

    name: str
    columns: Sequence[str]
    unique: bool = False


@dataclass
class TableDefinition:
    """Database table definition."""

    name: str
    columns: Sequence[ColumnDefinition]
    indexes: Sequence[IndexDefinition] = field(default_factory=list)
