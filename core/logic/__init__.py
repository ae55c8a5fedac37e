"""
Core Business Logic Package.

Contains business logic that operates on pure data models.
Separated from models to maintain clean architecture.

Exports:
    Naming: derive_output_name
    Calculations: calculate_success_rate, count_pending
"""

from .naming import derive_output_name
from .calculations import calculate_success_rate, count_pending

__all__ = [
    'derive_output_name',
    'calculate_success_rate',
    'count_pending',
]
