"""
Core datastructures for dualrun.

Immutable value types shared by the execution contexts, the merger and the
reporting layer.
"""

from .level import DEFAULT_LEVEL, Level
from .outcome import (
    OUTCOME_TYPES,
    Error,
    Failure,
    Outcome,
    Skipped,
    Success,
    annotate,
    conjoin,
    is_passing,
    map_expected,
    map_skipped_reason,
)

__all__ = [
    "DEFAULT_LEVEL",
    "Level",
    "OUTCOME_TYPES",
    "Error",
    "Failure",
    "Outcome",
    "Skipped",
    "Success",
    "annotate",
    "conjoin",
    "is_passing",
    "map_expected",
    "map_skipped_reason",
]
