"""Global pytest configuration and fixtures."""

from logging import Logger

import pytest

from tarantool_adapter import setup_test_logging
from tarantool_adapter.database.implementations.tarantool import TarantoolConnection

from tests.utils.fake_client import FakeClient


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from tarantool_adapter import get_logger

    return get_logger("test")


@pytest.fixture
def fake_client() -> FakeClient:
    """Create a recording SQL client."""
    return FakeClient()


@pytest.fixture
def connection(fake_client: FakeClient) -> TarantoolConnection:
    """Create a Tarantool connection backed by the fake client."""
    return TarantoolConnection({"host": "localhost", "port": 3301}, client=fake_client)
