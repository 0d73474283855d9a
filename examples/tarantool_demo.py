#!/usr/bin/env python3
"""Demonstration of the Tarantool adapter against a running server."""

from pydantic import BaseModel

from tarantool_adapter import get_logger, load_settings, setup_logging
from tarantool_adapter.database import (
    ColumnDefinition,
    ColumnType,
    DatabaseManager,
    IndexDefinition,
    SchemaManager,
    TableDefinition,
    TarantoolRepository,
    register_tarantool,
)


class Book(BaseModel):
    id: int | None = None
    title: str
    author: str
    pages: int = 0


BOOKS_TABLE = TableDefinition(
    "books",
    [
        ColumnDefinition("id", ColumnType.INTEGER),
        ColumnDefinition("title", ColumnType.STRING, 200),
        ColumnDefinition("author", ColumnType.STRING, 100),
        ColumnDefinition("pages", ColumnType.INTEGER, default=0),
    ],
    indexes=[IndexDefinition("books_author", ["author"])],
)


def main() -> None:
    """Demonstrate schema, repository and raw query usage."""
    settings = load_settings()
    setup_logging(level=settings.log_level)
    logger = get_logger(__name__)

    manager = register_tarantool(
        DatabaseManager({"default": settings.connection_config()})
    )

    with manager:
        connection = manager.connection()
        schema = SchemaManager(connection)

        # Demo 1: schema
        logger.info("=== Demo 1: Schema ===")
        schema.drop_if_exists("books")
        for statement in connection.pretend(lambda conn: SchemaManager(conn).create(BOOKS_TABLE)):
            logger.info(f"Would run: {statement.sql}")
        schema.create(BOOKS_TABLE)

        # Demo 2: repository
        logger.info("=== Demo 2: Repository ===")
        books = TarantoolRepository(connection, Book, "books")
        book_id = books.create(Book(title="Dune", author="Frank Herbert", pages=412))
        books.create(Book(title="Solaris", author="Stanislaw Lem", pages=204))
        logger.info(f"Created book with ID: {book_id}")
        logger.info(f"Retrieved: {books.get_by_id(book_id)}")
        logger.info(f"Total books: {books.count()}")

        # Demo 3: raw queries
        logger.info("=== Demo 3: Raw queries ===")
        connection.enable_query_log()
        for row in connection.cursor('SELECT "title", "pages" FROM "books" ORDER BY "pages"'):
            logger.info(f"{row['title']}: {row['pages']} pages")
        for entry in connection.get_query_log():
            logger.info(f"{entry.sql} took {entry.time_ms} ms")

        schema.drop("books")

    logger.info("Demonstration completed")


if __name__ == "__main__":
    main()
