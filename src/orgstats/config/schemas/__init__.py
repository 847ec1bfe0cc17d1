"""Configuration schemas."""

from orgstats.config.schemas.app_schema import (
    AppConfig,
    LogFileConfig,
    LoggingConfig,
    RosterConfig,
)

__all__ = ["AppConfig", "LogFileConfig", "LoggingConfig", "RosterConfig"]
