"""Configuration package."""

from orgstats.config.manager import ConfigurationManager
from orgstats.config.schemas import AppConfig, LogFileConfig, LoggingConfig, RosterConfig

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "LogFileConfig",
    "LoggingConfig",
    "RosterConfig",
]
