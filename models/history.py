"""Conversion history models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TypedDict

from .measurement import validate_max_denominator, validate_measurement_value


class HistoryEntryDict(TypedDict):
    """Type definition for HistoryEntry serialization."""

    id: int
    decimal: float
    fraction: str
    precision: int
    timestamp: str


@dataclass(slots=True)
class HistoryEntry:
    """
    Represents a saved conversion.

    Attributes:
        id: Unique identifier (milliseconds since epoch at creation)
        decimal: Input value in inches
        fraction: Formatted fraction, e.g. '5 3/8"'
        precision: Denominator the conversion was made at
        timestamp: When the conversion was saved
    """

    id: int
    decimal: float
    fraction: str
    precision: int
    timestamp: datetime

    def __post_init__(self) -> None:
        validate_measurement_value(self.decimal)
        validate_max_denominator(self.precision)

    def __repr__(self) -> str:
        return f"HistoryEntry({self.decimal} -> {self.fraction!r} @ 1/{self.precision})"

    def to_dict(self) -> HistoryEntryDict:
        """Convert to dictionary for JSON serialization."""
        return HistoryEntryDict(
            id=self.id,
            decimal=self.decimal,
            fraction=self.fraction,
            precision=self.precision,
            timestamp=self.timestamp.isoformat(),
        )

    @classmethod
    def from_dict(cls, data: HistoryEntryDict) -> HistoryEntry:
        """Create HistoryEntry from dictionary.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field holds an invalid value
        """
        return cls(
            id=int(data['id']),
            decimal=float(data['decimal']),
            fraction=str(data['fraction']),
            precision=int(data.get('precision', 16)),
            timestamp=datetime.fromisoformat(data['timestamp']),
        )
