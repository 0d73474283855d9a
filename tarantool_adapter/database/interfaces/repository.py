"""Repository interface for database operations."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from tarantool_adapter.database.interfaces.connection import DatabaseConnection

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Generic repository interface for database operations."""

    def __init__(self, connection: DatabaseConnection) -> None:
        """Initialize repository with database connection.

        Args:
            connection: Database connection instance
        """
        self.connection = connection

    @abstractmethod
    def create(self, entity: T) -> int:
        """Create entity and return ID.

        Args:
            entity: Entity to create

        Returns:
            Created entity ID
        """
        pass

    @abstractmethod
    def get_by_id(self, entity_id: int) -> T | None:
        """Get entity by ID.

        Args:
            entity_id: Entity ID

        Returns:
            Entity instance or None if not found
        """
        pass

    @abstractmethod
    def update(self, entity: T) -> bool:
        """Update entity.

        Returns:
            True if a row was updated, False otherwise
        """
        pass

    @abstractmethod
    def delete(self, entity_id: int) -> bool:
        """Delete entity by ID.

        Returns:
            True if deleted, False otherwise
        """
        pass

    @abstractmethod
    def get_all(self, limit: int = 100, offset: int = 0, **filters: Any) -> list[T]:
        """List entities with pagination and filters.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip
            **filters: Additional filter criteria

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    def count(self, **filters: Any) -> int:
        """Count entities matching filters."""
        pass

    @abstractmethod
    def exists(self, entity_id: int) -> bool:
        """Check if entity exists."""
        pass

    @abstractmethod
    def find_one(self, **filters: Any) -> T | None:
        """Find single entity matching filters."""
        pass

    @abstractmethod
    def find_all(self, **filters: Any) -> list[T]:
        """Find all entities matching filters."""
        pass
