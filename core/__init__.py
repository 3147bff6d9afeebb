"""Core fraction approximation and formatting utilities."""

from .fractions import (
    gcd,
    round_half_up,
    round_to_places,
    candidate_denominators,
    approximate,
    nudge,
)
from .formatting import (
    INCH_SYMBOL,
    format_fraction,
    format_measurement,
    format_error,
    get_precision_label,
)
from .tolerances import (
    WHOLE_NUMBER_TOLERANCE,
    SIMPLICITY_MARGIN,
    ERROR_DISPLAY_DIVISOR,
)

__all__ = [
    # Fractions
    'gcd',
    'round_half_up',
    'round_to_places',
    'candidate_denominators',
    'approximate',
    'nudge',
    # Formatting
    'INCH_SYMBOL',
    'format_fraction',
    'format_measurement',
    'format_error',
    'get_precision_label',
    # Tolerances
    'WHOLE_NUMBER_TOLERANCE',
    'SIMPLICITY_MARGIN',
    'ERROR_DISPLAY_DIVISOR',
]
