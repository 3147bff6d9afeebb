"""Measurement result models and argument validation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import TypedDict


class FractionResultDict(TypedDict):
    """Type definition for FractionResult serialization."""

    whole: int
    numerator: int
    denominator: int
    decimal: float
    error: float


def is_power_of_two(n: int) -> bool:
    """Check whether a positive integer is a power of two (1 included)."""
    return n >= 1 and n & (n - 1) == 0


def validate_measurement_value(value: float) -> None:
    """Validate a decimal measurement before conversion.

    Args:
        value: Measurement in inches (must be finite and non-negative)

    Raises:
        ValueError: If value is not a real number, NaN, infinite or negative
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"value must be a real number, got {value!r}")
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"value must be finite, got {value}")
    if value < 0:
        raise ValueError(f"value cannot be negative, got {value}")


def validate_max_denominator(max_denominator: int) -> None:
    """Validate a fraction precision.

    Args:
        max_denominator: Largest denominator to try (power of two >= 1)

    Raises:
        ValueError: If max_denominator is not a positive power of two
    """
    if isinstance(max_denominator, bool) or not isinstance(max_denominator, Integral):
        raise ValueError(f"max_denominator must be an integer, got {max_denominator!r}")
    if not is_power_of_two(int(max_denominator)):
        raise ValueError(
            f"max_denominator must be a positive power of two, got {max_denominator}"
        )


@dataclass(frozen=True, slots=True)
class FractionResult:
    """
    Nearest power-of-two fraction for a decimal measurement.

    Attributes:
        whole: Floor of the input value
        numerator: Fraction numerator in lowest terms (0 <= numerator <= denominator)
        denominator: Power-of-two denominator, 1 for whole numbers
        decimal: The original input value
        error: Signed residual (fractional part minus numerator/denominator)
    """

    whole: int
    numerator: int
    denominator: int
    decimal: float
    error: float = 0.0

    def __repr__(self) -> str:
        return (
            f"FractionResult({self.whole} {self.numerator}/{self.denominator}, "
            f"decimal={self.decimal}, error={self.error:+.5f})"
        )

    @property
    def fraction(self) -> float:
        """Fractional part as represented by numerator/denominator."""
        return self.numerator / self.denominator

    @property
    def value(self) -> float:
        """Decimal value of the approximation."""
        return self.whole + self.fraction

    @property
    def is_whole(self) -> bool:
        """True when the result displays as a whole number of inches."""
        return self.numerator == 0 or self.numerator == self.denominator

    def to_dict(self) -> FractionResultDict:
        """Convert to dictionary for JSON serialization."""
        return FractionResultDict(
            whole=self.whole,
            numerator=self.numerator,
            denominator=self.denominator,
            decimal=self.decimal,
            error=self.error,
        )

    @classmethod
    def from_dict(cls, data: FractionResultDict) -> FractionResult:
        """Create FractionResult from dictionary."""
        return cls(
            whole=int(data['whole']),
            numerator=int(data['numerator']),
            denominator=int(data['denominator']),
            decimal=float(data['decimal']),
            error=float(data.get('error', 0.0)),
        )
