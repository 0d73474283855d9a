"""Repository for pydantic models stored in a Tarantool space."""

from typing import Any, TypeVar

from pydantic import BaseModel

from tarantool_adapter.database.interfaces import Repository
from tarantool_adapter.database.utils import quote_identifier, row_to_model
from tarantool_adapter.exceptions import QueryExecutionError
from tarantool_adapter.log import get_logger

from .tarantool_connection import TarantoolConnection

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class TarantoolRepository(Repository[T]):
    """Repository mapping rows of one table to a pydantic model.

    Model field names must match the lower-cased column names.
    """

    def __init__(
        self,
        connection: TarantoolConnection,
        model: type[T],
        table: str,
        primary_key: str = "id",
    ) -> None:
        super().__init__(connection)
        self.connection: TarantoolConnection = connection
        self.model = model
        self.table = quote_identifier(table)
        self.primary_key = primary_key
        self.builder = connection.query_builder

    def create(self, entity: T) -> int:
        data = entity.model_dump()
        entity_id = data.get(self.primary_key)
        if entity_id is None:
            data.pop(self.primary_key, None)

        query, params = self.builder.insert(self.table, data)
        try:
            if entity_id is None:
                entity_id = self.connection.insert_get_id(query, params)
            else:
                self.connection.insert(query, params)
        except QueryExecutionError as exc:
            logger.error(f"Failed to create {data}: {exc}")
            raise

        logger.debug(f"Created {self.table} {self.primary_key}={entity_id}")
        return entity_id

    def get_by_id(self, entity_id: int) -> T | None:
        return self.find_one(**{self.primary_key: entity_id})

    def update(self, entity: T) -> bool:
        data = entity.model_dump()
        entity_id = data.pop(self.primary_key, None)
        if entity_id is None:
            raise ValueError(f"Cannot update {self.model.__name__} without {self.primary_key}")

        query, params = self.builder.update(
            self.table, data, {self.primary_key: entity_id}
        )
        result = self.connection.update(query, params)
        return result.count > 0

    def delete(self, entity_id: int) -> bool:
        query, params = self.builder.delete(self.table, {self.primary_key: entity_id})
        return self.connection.delete(query, params) == 1

    def get_all(self, limit: int = 100, offset: int = 0, **filters: Any) -> list[T]:
        query, params = self.builder.select(
            self.table,
            where=filters or None,
            order_by=[self.primary_key],
            limit=limit,
            offset=offset,
        )
        return [row_to_model(self.model, row) for row in self.connection.select(query, params)]

    def count(self, **filters: Any) -> int:
        query, params = self.builder.count(self.table, filters or None)
        row = self.connection.select_one(query, params)
        return int(row["aggregate"]) if row else 0

    def exists(self, entity_id: int) -> bool:
        return self.count(**{self.primary_key: entity_id}) > 0

    def find_one(self, **filters: Any) -> T | None:
        query, params = self.builder.select(self.table, where=filters or None, limit=1)
        row = self.connection.select_one(query, params)
        return row_to_model(self.model, row) if row else None

    def find_all(self, **filters: Any) -> list[T]:
        query, params = self.builder.select(
            self.table, where=filters or None, order_by=[self.primary_key]
        )
        return [row_to_model(self.model, row) for row in self.connection.select(query, params)]
