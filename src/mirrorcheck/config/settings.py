import typing as t
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Runtime environment for the application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels accepted by the logging setup."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings.

    Values come from keyword arguments, then ``MIRRORCHECK_*`` environment
    variables, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="MIRRORCHECK_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    environment: Environment = Field(
        default=Environment.PRODUCTION,
        description="Runtime environment",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Minimum level for emitted log records",
    )
    chunk_size: int = Field(
        default=8192,
        gt=0,
        description="Read buffer size used when digesting files",
    )


def build_settings(**overrides: t.Any) -> Settings:
    """Create Settings, applying only the overrides that are not None.

    CLI options default to None when the user did not pass them, so they
    must not mask environment variables or defaults.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
