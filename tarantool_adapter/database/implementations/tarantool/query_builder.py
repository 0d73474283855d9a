"""Tarantool-specific query builder implementation."""

from collections.abc import Mapping, Sequence
from typing import Any

from tarantool_adapter.database.interfaces.query_builder import QueryBuilder
from tarantool_adapter.database.utils import (
    build_limit_clause,
    build_order_by_clause,
    build_where_clause,
    columnize,
    parameterize,
    quote_identifier,
)

# Names that must be quoted when used as bare table names
RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "migration", "batch", "exists",
        "all", "alter", "analyze", "and", "any", "as", "asc", "asensitive",
        "begin", "between", "binary", "by", "call", "case", "char", "character",
        "check", "collate", "column", "commit", "condition", "connect",
        "constraint", "create", "cross", "current", "current_date",
        "current_time", "current_timestamp", "current_user", "cursor", "date",
        "decimal", "declare", "default", "delete", "dense_rank", "desc",
        "describe", "deterministic", "distinct", "double", "drop", "each",
        "else", "elseif", "end", "escape", "except", "explain", "fetch",
        "float", "for", "foreign", "from", "function", "get", "grant", "group",
        "having", "if", "immediate", "in", "index", "inner", "inout",
        "insensitive", "insert", "integer", "intersect", "into", "is",
        "iterate", "join", "leave", "left", "like", "localtime",
        "localtimestamp", "loop", "match", "natural", "not", "null", "of", "on",
        "or", "order", "out", "outer", "over", "partition", "pragma",
        "precision", "primary", "procedure", "range", "rank", "reads",
        "recursive", "references", "reindex", "release", "rename", "repeat",
        "replace", "resignal", "return", "revoke", "right", "rollback", "row",
        "row_number", "rows", "savepoint", "select", "sensitive", "set",
        "signal", "smallint", "specific", "sql", "start", "system", "table",
        "then", "to", "transaction", "trigger", "union", "unique", "update",
        "user", "using", "values", "varchar", "view", "when", "whenever",
        "where", "while", "with",
    }
)


class TarantoolQueryBuilder(QueryBuilder):
    """Tarantool-specific query builder.

    Statements use qmark placeholders. Column names are always quoted, table
    names only when they are reserved words; pass a quoted name such as
    ``'"users"'`` to address a lower-case space.
    """

    reserved_words: frozenset[str] = RESERVED_WORDS

    def select(
        self,
        table: str,
        columns: list[str] | None = None,
        where: dict[str, Any] | None = None,
        order_by: list[str] | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> tuple[str, list[Any]]:
        """Build SELECT query for Tarantool.

        Args:
            table: Table name
            columns: List of columns to select (None for all)
            where: WHERE conditions dictionary
            order_by: ORDER BY fields list, optionally with a direction
            limit: LIMIT value
            offset: OFFSET value

        Returns:
            Tuple of (query, parameters)
        """
        cols = "*" if not columns else ", ".join(self.wrap(c) for c in columns)
        query = f"SELECT {cols} FROM {self.wrap_table(table)}"
        params: list[Any] = []

        if where:
            where_clause, params = self._where(where)
            query += f" {where_clause}"

        if order_by:
            query += f" {build_order_by_clause([self._order(o) for o in order_by])}"

        limit_clause = build_limit_clause(limit, offset)
        if limit_clause:
            query += f" {limit_clause}"

        return query, params

    def insert(
        self,
        table: str,
        data: Mapping[str, Any] | Sequence[Mapping[str, Any]],
    ) -> tuple[str, list[Any]]:
        """Build INSERT query for Tarantool.

        Every insert is compiled as a batch: a single row becomes a batch of
        one, and the column list is taken from the first row.

        Args:
            table: Table name
            data: Row dictionary, or a sequence of row dictionaries

        Returns:
            Tuple of (query, parameters), parameters in row-major order
        """
        rows = [data] if isinstance(data, Mapping) else list(data)
        if not rows or not rows[0]:
            raise ValueError("Cannot insert empty data")

        keys = list(rows[0].keys())
        columns = columnize(keys)
        tuples = ", ".join(f"({parameterize(keys)})" for _ in rows)
        params = [row[key] for row in rows for key in keys]

        return f"insert into {self.wrap_table(table)} ({columns}) values {tuples}", params

    def update(
        self,
        table: str,
        data: dict[str, Any],
        where: dict[str, Any] | None = None,
    ) -> tuple[str, list[Any]]:
        """Build UPDATE query for Tarantool."""
        if not data:
            raise ValueError("Cannot update with empty data")

        set_clause = ", ".join(f"{quote_identifier(key)} = ?" for key in data)
        query = f"UPDATE {self.wrap_table(table)} SET {set_clause}"
        params = list(data.values())

        if where:
            where_clause, where_params = self._where(where)
            query += f" {where_clause}"
            params.extend(where_params)

        return query, params

    def delete(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, list[Any]]:
        """Build DELETE query for Tarantool."""
        query = f"DELETE FROM {self.wrap_table(table)}"
        params: list[Any] = []

        if where:
            where_clause, params = self._where(where)
            query += f" {where_clause}"

        return query, params

    def count(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, list[Any]]:
        """Build COUNT query; the result column is named ``aggregate``."""
        query = f'SELECT COUNT(*) AS "aggregate" FROM {self.wrap_table(table)}'
        params: list[Any] = []

        if where:
            where_clause, params = self._where(where)
            query += f" {where_clause}"

        return query, params

    def wrap_union(self, sql: str) -> str:
        # Tarantool rejects parenthesized UNION branches
        return sql

    def wrap_table(self, table: str) -> str:
        if '"' not in table and table.lower() in self.reserved_words:
            return quote_identifier(table)
        return table

    def wrap(self, column: str) -> str:
        """Quote a column name, leaving ``*`` and expressions alone."""
        if column == "*" or "(" in column or " " in column:
            return column
        return quote_identifier(column)

    def _where(self, conditions: dict[str, Any]) -> tuple[str, list[Any]]:
        return build_where_clause(
            {quote_identifier(column): value for column, value in conditions.items()}
        )

    def _order(self, order: str) -> str:
        column, _, direction = order.partition(" ")
        return f"{quote_identifier(column)} {direction}".rstrip()
