"""
Core Conversion Components.

Structure:
    models/: Pure data structures (no business logic)
    logic/: Business logic separated from models
    conversion_controller.py: Conversion run orchestration

Exports:
    ConversionRunController: Runs one batch conversion
"""

# Make subpackages available first (no circular dependencies)
from . import models
from . import logic

# Lazy import so `import core.models` does not pull in infrastructure/services
_LAZY_IMPORTS = {
    'ConversionRunController': '.conversion_controller',
}


def __getattr__(name):
    """Lazy import core classes to avoid circular dependencies."""
    if name in _LAZY_IMPORTS:
        from importlib import import_module
        module = import_module(_LAZY_IMPORTS[name], package='core')
        return getattr(module, name)
    raise AttributeError(f"module 'core' has no attribute '{name}'")


__all__ = [
    'ConversionRunController',
    'models',
    'logic',
]
