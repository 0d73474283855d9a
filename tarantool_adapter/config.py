"""Configuration management for the tarantool adapter."""

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .types import ConfigMapping, Environment


class ConnectionConfig(BaseModel):
    """Settings for a single Tarantool connection.

    Either ``dsn`` or ``host`` has to be given; a non-empty ``dsn`` wins over
    the host based fields.
    """

    model_config = ConfigDict(extra="ignore")

    driver: str = Field(default="tarantool", description="Connection driver name")
    dsn: str | None = Field(default=None, description="Complete connection URI")
    host: str | None = Field(default=None, description="Server host, may carry a port")
    port: int | str | None = Field(default=None, description="Server port")
    username: str | None = Field(default=None, description="User to authenticate as")
    password: str | None = Field(default=None, description="User password")
    type: str | None = Field(
        default=None, description="Connection scheme (tcp or unix), tcp if unset"
    )
    options: dict[str, Any] = Field(
        default_factory=dict, description="Client options appended as a query string"
    )

    @classmethod
    def from_value(cls, config: "ConnectionConfig | ConfigMapping") -> "ConnectionConfig":
        """Build a private copy of a config given as a model or a mapping."""
        if isinstance(config, ConnectionConfig):
            return config.model_copy(deep=True)
        return cls.model_validate(dict(config))


class Settings(BaseModel):
    """Adapter settings."""

    version: str = Field(default="0.1.0", description="Adapter version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Connection
    dsn: str | None = Field(default=None, description="Complete connection URI")
    host: str = Field(default="127.0.0.1", description="Tarantool host")
    port: int = Field(default=3301, description="Tarantool port")
    username: str | None = Field(default=None, description="Tarantool user")
    password: str | None = Field(default=None, description="Tarantool password")
    connection_type: str = Field(default="tcp", description="tcp or unix")
    connect_timeout: float | None = Field(
        default=None, description="Seconds to wait for the connection"
    )
    socket_timeout: float | None = Field(
        default=None, description="Seconds to wait on socket operations"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING

    def connection_config(self) -> ConnectionConfig:
        """Get the connection configuration described by these settings."""
        options: dict[str, Any] = {}
        if self.connect_timeout is not None:
            options["connect_timeout"] = self.connect_timeout
        if self.socket_timeout is not None:
            options["socket_timeout"] = self.socket_timeout

        return ConnectionConfig(
            dsn=self.dsn,
            host=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
            type=self.connection_type,
            options=options,
        )


def _optional_float(name: str) -> float | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return float(value)


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    return Settings(
        environment=Environment(os.getenv("TARANTOOL_ENV", "development")),
        log_level=os.getenv("TARANTOOL_LOG_LEVEL", "INFO").upper(),
        dsn=os.getenv("TARANTOOL_DSN") or None,
        host=os.getenv("TARANTOOL_HOST", "127.0.0.1"),
        port=int(os.getenv("TARANTOOL_PORT", "3301")),
        username=os.getenv("TARANTOOL_USERNAME") or None,
        password=os.getenv("TARANTOOL_PASSWORD") or None,
        connection_type=os.getenv("TARANTOOL_CONNECTION_TYPE", "tcp"),
        connect_timeout=_optional_float("TARANTOOL_CONNECT_TIMEOUT"),
        socket_timeout=_optional_float("TARANTOOL_SOCKET_TIMEOUT"),
    )
