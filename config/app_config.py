"""
Main Application Configuration.

Composes domain-specific configuration modules:
    - ConversionConfig (folders, sidecar files, formats)

Exports:
    AppConfig: Main configuration class

Dependencies:
    pydantic: BaseModel for configuration validation
    config.conversion_config: ConversionConfig
    config.defaults: Default value constants

Pattern:
    Composition over inheritance - domain configs are composed, not inherited.
"""

import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from exceptions import ConfigurationError
from .conversion_config import ConversionConfig
from .defaults import AppDefaults


# ============================================================================
# APPLICATION CONFIGURATION
# ============================================================================

class AppConfig(BaseModel):
    """
    Application configuration - composition of domain configs.
    """

    debug_mode: bool = Field(
        default=AppDefaults.DEBUG_MODE,
        description="Verbose diagnostics (per-file timings in logs)"
    )

    environment: str = Field(
        default=AppDefaults.ENVIRONMENT,
        description="Deployment environment name",
        examples=["dev", "prod"]
    )

    log_level: str = Field(
        default=AppDefaults.LOG_LEVEL,
        description="Component logger level"
    )

    conversion: ConversionConfig = Field(
        default_factory=ConversionConfig,
        description="Batch conversion settings"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return level

    @classmethod
    def from_environment(cls):
        """
        Load all configs from environment.

        Raises:
            ConfigurationError: If any value fails validation
        """
        try:
            return cls(
                debug_mode=os.environ.get("DEBUG_MODE", str(AppDefaults.DEBUG_MODE).lower()).lower() == "true",
                environment=os.environ.get("ENVIRONMENT", AppDefaults.ENVIRONMENT),
                log_level=os.environ.get("LOG_LEVEL", AppDefaults.LOG_LEVEL),
                conversion=ConversionConfig.from_environment()
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
