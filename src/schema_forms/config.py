"""
Configuration module for schema-forms.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass
from typing import Literal

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


HiddenValuePolicy = Literal["exclude", "retain"]


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class FormEngineConfig:
    """Configuration settings for schema-forms."""

    # What happens to values of hidden fields on submit
    hidden_value_policy: HiddenValuePolicy = "exclude"

    # Schema loading
    strict_schema: bool = True

    # Session behaviour
    validate_on_change: bool = True
    seed_defaults: bool = False
    custom_validator_fallback_message: str = "Invalid value"

    # Tracing settings
    enable_tracing: bool = False
    trace_file: str | None = None
    trace_verbose: bool = False

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FormEngineConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        policy = os.getenv("SCHEMA_FORMS_HIDDEN_VALUE_POLICY", _defaults.hidden_value_policy).lower()
        if policy not in ("exclude", "retain"):
            raise ValueError(
                f"SCHEMA_FORMS_HIDDEN_VALUE_POLICY must be 'exclude' or 'retain', got {policy!r}"
            )

        return cls(
            hidden_value_policy=policy,  # type: ignore[arg-type]
            strict_schema=_env_flag("SCHEMA_FORMS_STRICT_SCHEMA", _defaults.strict_schema),
            validate_on_change=_env_flag("SCHEMA_FORMS_VALIDATE_ON_CHANGE", _defaults.validate_on_change),
            seed_defaults=_env_flag("SCHEMA_FORMS_SEED_DEFAULTS", _defaults.seed_defaults),
            custom_validator_fallback_message=os.getenv(
                "SCHEMA_FORMS_FALLBACK_MESSAGE", _defaults.custom_validator_fallback_message
            ),
            enable_tracing=_env_flag("SCHEMA_FORMS_ENABLE_TRACING", _defaults.enable_tracing),
            trace_file=os.getenv("SCHEMA_FORMS_TRACE_FILE", _defaults.trace_file),
            trace_verbose=_env_flag("SCHEMA_FORMS_TRACE_VERBOSE", _defaults.trace_verbose),
            log_level=os.getenv("SCHEMA_FORMS_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = FormEngineConfig.from_env()


def get_config() -> FormEngineConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormEngineConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
