"""Nearest power-of-two fraction search for decimal inch measurements."""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from ..lib.tapeutils import log, log_enabled
from ..models.measurement import (
    FractionResult,
    validate_max_denominator,
    validate_measurement_value,
)
from .tolerances import SIMPLICITY_MARGIN, WHOLE_NUMBER_TOLERANCE


def gcd(a: int, b: int) -> int:
    """Calculate greatest common divisor using Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's round() sends halves to the even neighbour, which would turn
    0.25 at a 1/2" precision into 0/2 instead of 1/2.
    """
    return math.floor(value + 0.5)


def round_to_places(value: float, places: int) -> float:
    """Round to a fixed number of decimals, halves away from zero.

    Works on the exact binary value, so 0.03125 becomes 0.0313 where
    round() would give 0.0312.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def candidate_denominators(max_denominator: int) -> tuple[int, ...]:
    """
    List the denominators searched for a given precision.

    Args:
        max_denominator: Largest denominator to try (power of two)

    Returns:
        Powers of two from 2 up to max_denominator, in increasing order.
        Empty for max_denominator == 1.
    """
    return tuple(2 ** exponent for exponent in range(1, max_denominator.bit_length()))


def approximate(value: float, max_denominator: int = 16) -> FractionResult:
    """
    Find the simplest power-of-two fraction closest to a decimal value.

    Denominators are tried from smallest to largest and a finer one only
    wins when it is better by more than SIMPLICITY_MARGIN, so exact halves
    stay 1/2 rather than 8/16.

    Args:
        value: Measurement in inches (finite, non-negative)
        max_denominator: Largest denominator allowed (16, 32, 64, ...)

    Returns:
        FractionResult in lowest terms. Values just below an integer may
        come back as 1/1; formatters roll those over to the next inch.

    Raises:
        ValueError: If value or max_denominator is invalid
    """
    validate_measurement_value(value)
    validate_max_denominator(max_denominator)

    # Fraction and numpy scalars compute in floats from here on
    value = float(value)
    whole: int = math.floor(value)
    fractional_part: float = value - whole

    if abs(fractional_part) < WHOLE_NUMBER_TOLERANCE:
        return FractionResult(whole=whole, numerator=0, denominator=1, decimal=value, error=0.0)

    # Seed with 1/1; the first candidate nearly always replaces it
    best_numerator: int = 1
    best_denominator: int = 1
    best_error: float = fractional_part - 1
    min_error: float = abs(best_error)

    for denominator in candidate_denominators(max_denominator):
        numerator = round_half_up(fractional_part * denominator)
        signed_error = fractional_part - numerator / denominator
        candidate_error = abs(signed_error)

        if candidate_error < min_error - SIMPLICITY_MARGIN:
            best_numerator = numerator
            best_denominator = denominator
            best_error = signed_error
            min_error = candidate_error

    common: int = gcd(best_numerator, best_denominator)
    result = FractionResult(
        whole=whole,
        numerator=best_numerator // common,
        denominator=best_denominator // common,
        decimal=value,
        error=best_error,
    )
    if log_enabled(logging.DEBUG):
        log(f"approximate({value}, {max_denominator}) -> {result!r}", logging.DEBUG)
    return result


def nudge(value: float, precision: int, steps: int = 1) -> float:
    """
    Step a measurement by whole ticks of the current precision.

    Args:
        value: Current measurement in inches
        precision: Tick size denominator (16 steps by 1/16")
        steps: Number of ticks to move, negative to move down

    Returns:
        New value rounded to 4 decimals, never below zero
    """
    validate_measurement_value(value)
    validate_max_denominator(precision)

    current = round_to_places(float(value), 4)
    return max(0.0, round_to_places(current + steps / precision, 4))
