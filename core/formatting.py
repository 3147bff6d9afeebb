"""Formatting utilities for measurements and display."""

from __future__ import annotations

from ..models.measurement import FractionResult, validate_max_denominator
from .fractions import approximate
from .tolerances import ERROR_DISPLAY_DIVISOR

INCH_SYMBOL = '"'


def format_fraction(result: FractionResult) -> str:
    """
    Render a fraction result as a tape-measure reading.

    Args:
        result: Output of approximate()

    Returns:
        Formatted string like '5 3/8"', '1/16"' or '12"'
    """
    if result.numerator == 0:
        return f"{result.whole}{INCH_SYMBOL}"

    # 1/1 means the value sits just under the next inch
    if result.numerator == result.denominator:
        return f"{result.whole + 1}{INCH_SYMBOL}"

    if result.whole == 0:
        return f"{result.numerator}/{result.denominator}{INCH_SYMBOL}"
    return f"{result.whole} {result.numerator}/{result.denominator}{INCH_SYMBOL}"


def format_measurement(value: float, precision: int = 16) -> str:
    """Approximate a decimal value and format it in one step."""
    return format_fraction(approximate(value, precision))


def format_error(result: FractionResult, precision: int) -> str | None:
    """
    Format the rounding residual when it is large enough to matter.

    Args:
        result: Output of approximate()
        precision: Denominator the result was computed at

    Returns:
        Signed string like '+0.00521"', or None when |error| is within
        1/(precision * ERROR_DISPLAY_DIVISOR)
    """
    validate_max_denominator(precision)

    threshold = 1 / (precision * ERROR_DISPLAY_DIVISOR)
    if abs(result.error) <= threshold:
        return None

    sign = '+' if result.error > 0 else '-'
    return f"{sign}{abs(result.error):.5f}{INCH_SYMBOL}"


def get_precision_label(precision: int) -> str:
    """Get human-readable label for precision value."""
    return f"1/{precision}{INCH_SYMBOL}"
