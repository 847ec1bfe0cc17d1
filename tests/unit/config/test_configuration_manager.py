"""Tests for the configuration manager."""

import json
import os
from unittest.mock import patch

import pytest
import yaml

from orgstats.config.defaults import LogDestination, LogLevel
from orgstats.config.manager import ConfigurationManager
from orgstats.config.schemas import LoggingConfig, RosterConfig
from orgstats.domain.core.exceptions import ConfigurationError

CLEAN_ENV = {"PATH": os.environ.get("PATH", "")}


class TestConfigurationManager:
    """Test configuration loading, overrides and validation."""

    def test_defaults(self):
        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            manager = ConfigurationManager()

            assert manager.app_config.environment == "development"
            assert manager.get_logging_config().level == LogLevel.WARNING
            assert manager.get_logging_config().destination == LogDestination.STDOUT
            assert manager.get_logging_config().file.path == "logs/orgstats.log"
            assert manager.get_roster_config().path is None

    def test_json_file_overrides_defaults(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "debug"}, "roster": {"path": "staff.yaml"}}))

        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            manager = ConfigurationManager(str(config_file))

            assert manager.get_logging_config().level == LogLevel.DEBUG
            # untouched nested keys keep their defaults
            assert manager.get_logging_config().file.backup_count == 5
            assert manager.get_roster_config().path == "staff.yaml"

    def test_yaml_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.safe_dump({"environment": "production", "debug": True}))

        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            manager = ConfigurationManager(str(config_file))

            assert manager.app_config.environment == "production"
            assert manager.app_config.debug is True

    def test_environment_overrides_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "INFO"}}))

        with patch.dict(os.environ, {**CLEAN_ENV, "ORGSTATS_LOG_LEVEL": "ERROR",
                                     "ORGSTATS_ROSTER_PATH": "/data/roster.json"}, clear=True):
            manager = ConfigurationManager(str(config_file))

            assert manager.get_logging_config().level == LogLevel.ERROR
            assert manager.get_roster_config().path == "/data/roster.json"

    def test_missing_file_raises(self, tmp_path):
        manager = ConfigurationManager(str(tmp_path / "missing.json"))

        with pytest.raises(ConfigurationError, match="not found"):
            manager.app_config

    def test_malformed_file_raises(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(config_file)).app_config

    def test_invalid_value_raises(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "LOUD"}}))

        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            with pytest.raises(ConfigurationError) as exc_info:
                ConfigurationManager(str(config_file)).app_config

        assert "logging.level" in exc_info.value.missing_fields

    def test_get_typed_and_unknown_type(self):
        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            manager = ConfigurationManager()

            assert isinstance(manager.get_typed(LoggingConfig), LoggingConfig)
            assert isinstance(manager.get_typed(RosterConfig), RosterConfig)
            with pytest.raises(ValueError):
                manager.get_typed(dict)

    def test_reload_picks_up_changes(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"environment": "staging"}))

        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            manager = ConfigurationManager(str(config_file))
            assert manager.app_config.environment == "staging"

            config_file.write_text(json.dumps({"environment": "production"}))
            manager.reload()

            assert manager.app_config.environment == "production"

    def test_environment_override_fills_empty_yaml_section(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\nroster:\n")

        with patch.dict(os.environ, {**CLEAN_ENV, "ORGSTATS_LOG_LEVEL": "DEBUG",
                                     "ORGSTATS_ROSTER_PATH": "/data/roster.yaml"}, clear=True):
            manager = ConfigurationManager(str(config_file))

            assert manager.get_logging_config().level == LogLevel.DEBUG
            assert manager.get_logging_config().destination == LogDestination.STDOUT
            assert manager.get_roster_config().path == "/data/roster.yaml"

    def test_empty_yaml_section_without_override_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n")

        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            with pytest.raises(ConfigurationError) as exc_info:
                ConfigurationManager(str(config_file)).app_config

        assert "logging" in exc_info.value.missing_fields

    def test_utf8_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_bytes("environment: préprod\n".encode("utf-8"))

        with patch.dict(os.environ, CLEAN_ENV, clear=True):
            manager = ConfigurationManager(str(config_file))

            assert manager.app_config.environment == "préprod"
