"""
Core Data Models Package.

Contains pure data structures without business logic.
All business logic is in the core.logic package.

Exports:
    ConversionOutcome: Per-file outcome enum
    FileConversionResult, RunSummary: Result types
"""

from .enums import ConversionOutcome
from .results import FileConversionResult, RunSummary

__all__ = [
    'ConversionOutcome',
    'FileConversionResult',
    'RunSummary',
]
