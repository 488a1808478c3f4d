"""
Correios Data

Reference configuration for the rate calculator.

Structure:
    - reference/: Static reference data (limits, origin, cubic weight, service curves)
"""

from .reference.billable_weight import (
    CUBIC_FACTOR,
    GRAMS_PER_KG,
    CM3_PER_M3,
)
from .reference.distance import DISTANCE_SCALE
from .reference.limits import (
    POSTAL_CODE_LENGTH,
    POSTAL_CODE_PATTERN,
    WEIGHT_MIN_G,
    WEIGHT_MAX_G,
    LENGTH_MIN_CM,
    LENGTH_MAX_CM,
    WIDTH_MIN_CM,
    WIDTH_MAX_CM,
    HEIGHT_MIN_CM,
    HEIGHT_MAX_CM,
)
from .reference.origin import (
    ORIGIN_POSTAL_CODE,
    DEFAULT_WEIGHT_G,
    DEFAULT_FORMAT,
    DEFAULT_LENGTH_CM,
    DEFAULT_HEIGHT_CM,
    DEFAULT_WIDTH_CM,
)


__all__ = [
    # Billable weight config
    "CUBIC_FACTOR",
    "GRAMS_PER_KG",
    "CM3_PER_M3",
    # Distance config
    "DISTANCE_SCALE",
    # Request limits
    "POSTAL_CODE_LENGTH",
    "POSTAL_CODE_PATTERN",
    "WEIGHT_MIN_G",
    "WEIGHT_MAX_G",
    "LENGTH_MIN_CM",
    "LENGTH_MAX_CM",
    "WIDTH_MIN_CM",
    "WIDTH_MAX_CM",
    "HEIGHT_MIN_CM",
    "HEIGHT_MAX_CM",
    # Origin defaults
    "ORIGIN_POSTAL_CODE",
    "DEFAULT_WEIGHT_G",
    "DEFAULT_FORMAT",
    "DEFAULT_LENGTH_CM",
    "DEFAULT_HEIGHT_CM",
    "DEFAULT_WIDTH_CM",
]
