"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError as PydanticValidationError

from orgstats.config.defaults import DEFAULT_CONFIG, ENVIRONMENT_OVERRIDES
from orgstats.config.schemas import AppConfig, LoggingConfig, RosterConfig
from orgstats.config.utils.env_expansion import expand_config_env_vars
from orgstats.domain.core.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled lazily from, in increasing precedence:
    built-in defaults, an optional JSON or YAML file, and ``ORGSTATS_*``
    environment variables. Placeholders such as ``${VAR:default}`` are
    expanded before the result is validated into an ``AppConfig``.
    """

    _type_mapping = {
        'LoggingConfig': 'logging',
        'RosterConfig': 'roster',
    }

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            config_data = _deep_merge(config_data, self._load_file(self._config_file))

        config_data = self._apply_environment_overrides(config_data)
        config_data = expand_config_env_vars(config_data)

        try:
            app_config = AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return app_config

    @staticmethod
    def _load_file(config_file: str) -> Dict[str, Any]:
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix in ('.yml', '.yaml'):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")
        return data

    @staticmethod
    def _apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        for env_var, (section, key) in ENVIRONMENT_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is not None:
                # an empty section in a YAML file loads as None
                section_data = config_data.get(section)
                if not isinstance(section_data, dict):
                    section_data = config_data[section] = {}
                section_data[key] = value
        return config_data

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a configuration section by its schema type."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    config_name = config_type.__name__
                    if config_name not in self._type_mapping:
                        raise ValueError(f"Unknown configuration type: {config_name}")
                    self._config_cache[config_type] = getattr(
                        self.app_config, self._type_mapping[config_name]
                    )
        return self._config_cache[config_type]

    def get_logging_config(self) -> LoggingConfig:
        return self.get_typed(LoggingConfig)

    def get_roster_config(self) -> RosterConfig:
        return self.get_typed(RosterConfig)

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()
