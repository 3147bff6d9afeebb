"""Data models for measurement results and history."""

from .history import HistoryEntry, HistoryEntryDict
from .measurement import (
    FractionResult,
    FractionResultDict,
    is_power_of_two,
    validate_measurement_value,
    validate_max_denominator,
)

__all__ = [
    'HistoryEntry',
    'HistoryEntryDict',
    'FractionResult',
    'FractionResultDict',
    'is_power_of_two',
    'validate_measurement_value',
    'validate_max_denominator',
]
