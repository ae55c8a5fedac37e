"""
Run Calculations.

Pure functions over run counters.

Exports:
    calculate_success_rate: Converted share of attempted archives
    count_pending: Archives not yet in the ledger
"""

from typing import Iterable


def calculate_success_rate(successful: int, total: int) -> float:
    """
    Calculate success rate.

    Args:
        successful: Number of successful items
        total: Total number of items

    Returns:
        Success rate between 0.0 and 1.0
    """
    if total == 0:
        return 0.0
    return successful / total


def count_pending(input_paths: Iterable[str], ledger) -> int:
    """Number of inputs the ledger does not yet contain."""
    return sum(1 for path in input_paths if not ledger.contains(path))
