"""
Interfaces Package.

Abstract contracts implemented by infrastructure adapters.
"""

from .vector_io import (
    IVectorLayer,
    IVectorDataSource,
    IVectorReader,
    IVectorDataset,
    IVectorWriter,
)

__all__ = [
    'IVectorLayer',
    'IVectorDataSource',
    'IVectorReader',
    'IVectorDataset',
    'IVectorWriter',
]
