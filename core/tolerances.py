"""Tolerance constants for fraction approximation.

Centralizes the thresholds used when matching decimals to fractions so
they can be tuned and tested in one place.
"""

# Whole-number fast path threshold (in inches)
# A fractional part smaller than this is treated as floating-point noise,
# so 5.00001 displays as 5" rather than a tiny fraction
WHOLE_NUMBER_TOLERANCE: float = 1e-4

# Simplicity margin for denominator selection (in inches)
# A larger denominator replaces the current best only when its error is
# smaller by more than this, so 0.5 stays 1/2 instead of 8/16
SIMPLICITY_MARGIN: float = 1e-5

# Error display divisor
# The residual is worth showing when |error| > 1 / (precision * divisor),
# i.e. more than 1/20th of the smallest tick
ERROR_DISPLAY_DIVISOR: int = 20
