"""Configuration constants for steprange.

Numeric limits and defaults shared by the Range type and its helpers.
"""

# Construction defaults
DEFAULT_STEP = 1

# Output rounding for get_fraction() / from_fraction()
DEFAULT_PRECISION = 12
MAX_PRECISION = 100

# Digits kept when slice() derives its effective step
SLICE_STEP_PRECISION = 12

# Largest sequence a range may produce (maximum contiguous array size)
MAX_LENGTH = 4294967295
