"""Custom exceptions for the tarantool adapter."""

from typing import Any


class TarantoolAdapterError(Exception):
    """Base exception for adapter errors."""

    pass


class ConfigurationError(TarantoolAdapterError):
    """Raised when connection configuration is missing or malformed."""

    pass


class TarantoolConnectionError(TarantoolAdapterError):
    """Raised when the Tarantool client cannot be constructed."""

    def __init__(self, dsn: str, cause: BaseException) -> None:
        self.dsn = dsn
        self.cause = cause
        super().__init__(f"Could not connect to Tarantool at {dsn}: {cause}")


class QueryExecutionError(TarantoolAdapterError):
    """Raised when the Tarantool client fails to run a statement.

    The offending SQL text and its bindings are kept on the exception so the
    failure can be reproduced.
    """

    def __init__(self, sql: str, bindings: list[Any], cause: BaseException) -> None:
        self.sql = sql
        self.bindings = bindings
        self.cause = cause
        super().__init__(f"{cause} (SQL: {sql}) (Bindings: {bindings})")
