"""
Pure Enumeration Types for Conversion Runs.

Defines the terminal states of a single archive within a run.
No business logic - pure type definitions only.

Exports:
    ConversionOutcome: Per-file result enumeration
"""

from enum import Enum


class ConversionOutcome(Enum):
    """
    Terminal state of one input archive within one run.

    State transitions (per file, per run):
    - START -> SKIPPED (identifier already in the ledger)
    - START -> CONVERTED (extract, read and write all succeeded)
    - START -> FAILED (any error during extract, read or write)
    """

    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"
