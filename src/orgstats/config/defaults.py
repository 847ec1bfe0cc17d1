# src/orgstats/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration; STDOUT is the console and writes to stderr."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


DEFAULT_CONFIG = {
    "environment": "${ORGSTATS_ENV:development}",
    "debug": False,

    # Logging configuration
    "logging": {
        "level": "${ORGSTATS_LOG_LEVEL:WARNING}",
        "destination": "${ORGSTATS_LOG_DESTINATION:stdout}",
        "file": {
            "path": "${ORGSTATS_LOG_DIR:logs}/orgstats.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
    },

    # Roster configuration
    "roster": {
        "path": "${ORGSTATS_ROSTER_PATH:}",
    },
}

# Environment variables that override individual keys after file loading
ENVIRONMENT_OVERRIDES = {
    "ORGSTATS_LOG_LEVEL": ("logging", "level"),
    "ORGSTATS_LOG_DESTINATION": ("logging", "destination"),
    "ORGSTATS_ROSTER_PATH": ("roster", "path"),
}
