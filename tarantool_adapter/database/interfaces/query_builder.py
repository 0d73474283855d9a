"""Abstract query builder interface for different SQL backends."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any


class QueryBuilder(ABC):
    """Abstract query builder for different SQL backends."""

    @abstractmethod
    def select(
        self,
        table: str,
        columns: list[str] | None = None,
        where: dict[str, Any] | None = None,
        order_by: list[str] | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> tuple[str, list[Any]]:
        """Build SELECT query.

        Args:
            table: Table name
            columns: List of columns to select (None for all)
            where: WHERE conditions dictionary
            order_by: ORDER BY fields list
            limit: LIMIT value
            offset: OFFSET value

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def insert(
        self,
        table: str,
        data: Mapping[str, Any] | Sequence[Mapping[str, Any]],
    ) -> tuple[str, list[Any]]:
        """Build INSERT query for one row or a batch of rows.

        Args:
            table: Table name
            data: Row dictionary, or a sequence of row dictionaries

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def update(
        self,
        table: str,
        data: dict[str, Any],
        where: dict[str, Any] | None = None,
    ) -> tuple[str, list[Any]]:
        """Build UPDATE query.

        Args:
            table: Table name
            data: Data dictionary to update
            where: WHERE conditions dictionary

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def delete(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, list[Any]]:
        """Build DELETE query.

        Args:
            table: Table name
            where: WHERE conditions dictionary

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def count(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, list[Any]]:
        """Build COUNT query.

        Args:
            table: Table name
            where: WHERE conditions dictionary

        Returns:
            Tuple of (query, parameters)
        """
        pass

    def union(
        self, *queries: tuple[str, list[Any]], all: bool = False
    ) -> tuple[str, list[Any]]:
        """Combine compiled queries with UNION.

        Args:
            *queries: Compiled (query, parameters) pairs, two or more
            all: Use UNION ALL instead of UNION

        Returns:
            Tuple of (query, parameters)
        """
        if len(queries) < 2:
            raise ValueError("UNION needs at least two queries")

        keyword = " union all " if all else " union "
        sql = keyword.join(self.wrap_union(query) for query, _ in queries)
        params = [param for _, query_params in queries for param in query_params]
        return sql, params

    def wrap_union(self, sql: str) -> str:
        """Wrap one branch of a UNION."""
        return f"({sql})"
