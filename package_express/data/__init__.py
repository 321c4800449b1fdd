"""
Package Express Data

Static reference data for limits and pricing.

Structure:
    - reference/: Static reference data (limits, pricing)
"""

from .reference.limits import (
    MAX_WEIGHT_LBS,
    MAX_TOTAL_DIMENSIONS_IN,
    DIMENSION_FIELDS,
)
from .reference.pricing import QUOTE_DIVISOR


# Columns a package row must carry before quoting
REQUIRED_COLUMNS = ["weight_lbs", *DIMENSION_FIELDS]


__all__ = [
    "MAX_WEIGHT_LBS",
    "MAX_TOTAL_DIMENSIONS_IN",
    "DIMENSION_FIELDS",
    "QUOTE_DIVISOR",
    "REQUIRED_COLUMNS",
]
