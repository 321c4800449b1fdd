"""
Reference Data

Static configuration for shipping limits and pricing.
"""

from .limits import MAX_WEIGHT_LBS, MAX_TOTAL_DIMENSIONS_IN, DIMENSION_FIELDS
from .pricing import QUOTE_DIVISOR

__all__ = [
    "MAX_WEIGHT_LBS",
    "MAX_TOTAL_DIMENSIONS_IN",
    "DIMENSION_FIELDS",
    "QUOTE_DIVISOR",
]
