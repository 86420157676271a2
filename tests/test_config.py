"""Tests for engine configuration."""

import pytest

from schema_forms import config as config_module
from schema_forms.config import FormEngineConfig, get_config, update_config


class TestFromEnv:
    """Tests for FormEngineConfig.from_env."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is set."""
        for name in (
            "SCHEMA_FORMS_HIDDEN_VALUE_POLICY",
            "SCHEMA_FORMS_STRICT_SCHEMA",
            "SCHEMA_FORMS_VALIDATE_ON_CHANGE",
            "SCHEMA_FORMS_SEED_DEFAULTS",
            "SCHEMA_FORMS_FALLBACK_MESSAGE",
            "SCHEMA_FORMS_ENABLE_TRACING",
            "SCHEMA_FORMS_TRACE_FILE",
            "SCHEMA_FORMS_TRACE_VERBOSE",
            "SCHEMA_FORMS_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        config = FormEngineConfig.from_env()
        assert config == FormEngineConfig()
        assert config.hidden_value_policy == "exclude"
        assert config.strict_schema is True

    def test_overrides(self, monkeypatch):
        """Test values read from the environment."""
        monkeypatch.setenv("SCHEMA_FORMS_HIDDEN_VALUE_POLICY", "RETAIN")
        monkeypatch.setenv("SCHEMA_FORMS_STRICT_SCHEMA", "false")
        monkeypatch.setenv("SCHEMA_FORMS_SEED_DEFAULTS", "True")
        monkeypatch.setenv("SCHEMA_FORMS_FALLBACK_MESSAGE", "Check this value")
        monkeypatch.setenv("SCHEMA_FORMS_TRACE_FILE", "/tmp/traces.jsonl")
        monkeypatch.setenv("SCHEMA_FORMS_LOG_LEVEL", "debug")

        config = FormEngineConfig.from_env()
        assert config.hidden_value_policy == "retain"
        assert config.strict_schema is False
        assert config.seed_defaults is True
        assert config.custom_validator_fallback_message == "Check this value"
        assert config.trace_file == "/tmp/traces.jsonl"
        assert config.log_level == "DEBUG"

    def test_invalid_policy(self, monkeypatch):
        """Test unknown hidden value policies are rejected."""
        monkeypatch.setenv("SCHEMA_FORMS_HIDDEN_VALUE_POLICY", "purge")
        with pytest.raises(ValueError):
            FormEngineConfig.from_env()


class TestUpdateConfig:
    """Tests for the module-level configuration."""

    def test_update(self, monkeypatch):
        """Test update_config changes known settings only."""
        monkeypatch.setattr(config_module, "config", FormEngineConfig())
        updated = update_config(seed_defaults=True, unknown_setting=1)
        assert updated is get_config()
        assert updated.seed_defaults is True
        assert not hasattr(updated, "unknown_setting")
