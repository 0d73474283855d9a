"""Tarantool SQL adapter for the database abstraction layer."""

from .config import ConnectionConfig, Settings, load_settings
from .exceptions import (
    ConfigurationError,
    QueryExecutionError,
    TarantoolAdapterError,
    TarantoolConnectionError,
)
from .log import (
    get_logger,
    setup_logging,
    setup_production_logging,
    setup_test_logging,
)
from .types import Environment

__all__ = [
    "ConnectionConfig",
    "Environment",
    "Settings",
    "load_settings",
    "ConfigurationError",
    "QueryExecutionError",
    "TarantoolAdapterError",
    "TarantoolConnectionError",
    "get_logger",
    "setup_logging",
    "setup_production_logging",
    "setup_test_logging",
]
