"""
Infrastructure Package - Lazy Loading Implementation.

Persistence of run state and the geospatial library adapter.

The vector I/O adapter imports geopandas/pyogrio, which is slow and needs
GDAL; importing this package does not load it until it is first used.

Exports:
    ConversionLedger: Previously converted archives (sidecar file)
    ErrorCollector: Failed archives of the current run (error report)
    GeoPandasVectorIO: Vector read/write capabilities via geopandas
    register_drivers: One-time GDAL driver check
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .conversion_ledger import ConversionLedger
    from .error_collector import ErrorCollector
    from .vector_io import GeoPandasVectorIO, register_drivers

_LAZY_IMPORTS = {
    'ConversionLedger': '.conversion_ledger',
    'ErrorCollector': '.error_collector',
    'GeoPandasVectorIO': '.vector_io',
    'register_drivers': '.vector_io',
}


def __getattr__(name: str):
    """Import infrastructure classes on first access."""
    if name in _LAZY_IMPORTS:
        from importlib import import_module
        module = import_module(_LAZY_IMPORTS[name], package='infrastructure')
        return getattr(module, name)
    raise AttributeError(f"module 'infrastructure' has no attribute '{name}'")


__all__ = [
    'ConversionLedger',
    'ErrorCollector',
    'GeoPandasVectorIO',
    'register_drivers',
]
