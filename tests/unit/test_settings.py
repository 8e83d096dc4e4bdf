"""
Unit tests for Pydantic settings: loading from env and YAML,
validation errors for invalid fields.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from value_checks.config.settings import (
    CheckSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reload_settings,
)


# -----------------------------------------------------------------------------
# Pydantic settings loading from env
# -----------------------------------------------------------------------------


class TestSettingsLoadFromEnv:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.checks.tolerate_missing_fraction is False
        assert s.checks.log_evaluations is True
        assert s.logging.log_format in ("json", "console")

    def test_tolerate_missing_fraction_from_env(self) -> None:
        with patch.dict(os.environ, {"VALUE_CHECK_TOLERATE_MISSING_FRACTION": "1"}):
            c = CheckSettings()
        assert c.tolerate_missing_fraction is True

    def test_log_level_from_env_is_upper_cased(self) -> None:
        with patch.dict(os.environ, {"LOG_LOG_LEVEL": "debug"}):
            lg = LoggingSettings()
        assert lg.log_level == "DEBUG"


# -----------------------------------------------------------------------------
# Validation errors
# -----------------------------------------------------------------------------


class TestSettingsValidation:
    def test_invalid_log_format(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(log_format="xml")

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(log_level="LOUD")

    def test_log_format_normalized(self) -> None:
        assert LoggingSettings(log_format="CONSOLE").log_format == "console"

    def test_critical_level_accepted_and_documented(self) -> None:
        assert LoggingSettings(log_level="critical").log_level == "CRITICAL"
        description = LoggingSettings.model_fields["log_level"].description
        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            assert level in description


# -----------------------------------------------------------------------------
# YAML loading
# -----------------------------------------------------------------------------


class TestSettingsFromYaml:
    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "checks:\n  tolerate_missing_fraction: true\nlogging:\n  log_format: console\n",
            encoding="utf-8",
        )
        s = Settings.from_yaml(path)
        assert s.checks.tolerate_missing_fraction is True
        assert s.logging.log_format == "console"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        s = Settings.from_yaml(path)
        assert s.checks.tolerate_missing_fraction is False

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "nope.yaml")


# -----------------------------------------------------------------------------
# Global instance
# -----------------------------------------------------------------------------


class TestGlobalSettings:
    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reload_settings_reads_env_again(self) -> None:
        first = get_settings()
        with patch.dict(os.environ, {"VALUE_CHECK_LOG_EVALUATIONS": "false"}):
            second = reload_settings()
        assert second is not first
        assert second.checks.log_evaluations is False
        assert get_settings() is second
