"""
Configuration Package - Domain-Specific Configuration Modules

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── app_config.py            # Main config (composes domain configs)
    ├── conversion_config.py     # Folders, sidecar files, formats
    └── defaults.py              # Default value constants

Usage:
    # Singleton pattern (preferred)
    from config import get_config
    config = get_config()
    ledger = config.conversion.ledger_path

    # Debug output
    from config import debug_config
    info = debug_config()
"""

from typing import Optional

from .conversion_config import ConversionConfig
from .app_config import AppConfig


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration singleton.

    Returns:
        AppConfig instance loaded from environment
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig.from_environment()
    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get configuration as a plain dict for logging.

    Returns:
        Dictionary with configuration values
    """
    try:
        config = get_config()
        return {
            'conversion': {
                'input_folder': config.conversion.input_folder,
                'output_folder': config.conversion.output_folder,
                'workspace_path': config.conversion.workspace_path,
                'ledger_path': config.conversion.ledger_path,
                'output_driver': config.conversion.output_driver,
            },
            'debug_mode': config.debug_mode,
            'environment': config.environment,
            'log_level': config.log_level,
        }
    except Exception as e:
        return {'error': f'Configuration validation failed: {e}'}


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'AppConfig',
    'ConversionConfig',
    'get_config',
    'reset_config',
    'debug_config',
]
