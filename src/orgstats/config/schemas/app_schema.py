"""Main application configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from orgstats.config.defaults import LogDestination, LogLevel


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/orgstats.log", description="Log file path")
    max_size_mb: int = Field(10, gt=0, description="Maximum size before rotation")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    destination: LogDestination = LogDestination.STDOUT
    file: LogFileConfig = Field(default_factory=LogFileConfig)
    format: str = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        """Accept lower-case level names."""
        return value.upper() if isinstance(value, str) else value


class RosterConfig(BaseModel):
    """Default roster source."""

    path: Optional[str] = Field(None, description="Roster file used when none is given")

    @field_validator("path", mode="before")
    @classmethod
    def empty_path_is_none(cls, value):
        return value or None


class AppConfig(BaseModel):
    """Application configuration."""

    environment: str = Field("development", description="Environment")
    debug: bool = Field(False, description="Debug mode")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    roster: RosterConfig = Field(default_factory=RosterConfig)
