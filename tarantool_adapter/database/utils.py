"""Database utilities shared by the SQL builders."""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from tarantool_adapter.types import RepositoryRowType

T = TypeVar("T", bound=BaseModel)


def quote_identifier(name: str) -> str:
    """Wrap an identifier in double quotes unless it is already quoted.

    Example:
        >>> quote_identifier("name")
        '"name"'
        >>> quote_identifier('"name"')
        '"name"'
    """
    if '"' in name:
        return name
    return f'"{name}"'


def columnize(columns: Iterable[str]) -> str:
    """Quote every column name and join them into a column list."""
    return ", ".join(quote_identifier(column) for column in columns)


def parameterize(values: Iterable[Any]) -> str:
    """Build a qmark placeholder list with one ``?`` per value."""
    return ", ".join("?" for _ in values)


def build_where_clause(conditions: Mapping[str, Any]) -> tuple[str, list[Any]]:
    """Build WHERE clause from conditions dictionary.

    Keys are used as given, so callers wrap identifiers beforehand. ``None``
    compiles to ``IS NULL`` and list or tuple values to ``IN``.

    Args:
        conditions: Dictionary of column-value pairs

    Returns:
        Tuple of (where_clause, positional_parameters)

    Example:
        >>> build_where_clause({"name": "John", "age": 30})
        ('WHERE name = ? AND age = ?', ['John', 30])
    """
    if not conditions:
        return "", []

    clauses: list[str] = []
    params: list[Any] = []

    for column, value in conditions.items():
        if value is None:
            clauses.append(f"{column} IS NULL")
        elif isinstance(value, (list, tuple)):
            if not value:
                raise ValueError(f"Empty value list for column {column}")
            clauses.append(f"{column} IN ({parameterize(value)})")
            params.extend(value)
        else:
            clauses.append(f"{column} = ?")
            params.append(value)

    return f"WHERE {' AND '.join(clauses)}", params


def build_order_by_clause(order_by: list[str] | None) -> str:
    """Build ORDER BY clause from field list.

    Example:
        >>> build_order_by_clause(["name", "age DESC"])
        'ORDER BY name, age DESC'
    """
    if not order_by:
        return ""

    return f"ORDER BY {', '.join(order_by)}"


def build_limit_clause(limit: int | None, offset: int | None = None) -> str:
    """Build LIMIT clause with optional OFFSET.

    Example:
        >>> build_limit_clause(10, 20)
        'LIMIT 10 OFFSET 20'
    """
    if limit is None:
        return ""

    clause = f"LIMIT {limit}"
    if offset is not None:
        clause += f" OFFSET {offset}"

    return clause


def row_to_model(model_class: type[T], row: RepositoryRowType) -> T:
    """Convert database row to Pydantic model.

    Args:
        model_class: The Pydantic model class to convert to
        row: Database row as dict or tuple

    Returns:
        Instance of the Pydantic model

    Raises:
        ValueError: If row type is not supported
    """
    if isinstance(row, dict):
        return model_class.model_validate(row)

    if not isinstance(row, tuple):
        raise ValueError(f"Unsupported row type: {type(row)}")

    field_names = list(model_class.model_fields.keys())
    if len(field_names) != len(row):
        raise ValueError(
            f"Tuple length ({len(row)}) doesn't match model fields "
            f"({len(field_names)})"
        )
    return model_class.model_validate(dict(zip(field_names, row, strict=False)))
