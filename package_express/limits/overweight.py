"""
Overweight Limit

Rejects packages heavier than 50 lbs.
"""

from .base import Limit
from ..data import MAX_WEIGHT_LBS


class Overweight(Limit):
    """Package weight over the maximum."""

    name = "OVERWEIGHT"

    field = "weight_lbs"
    max_value = MAX_WEIGHT_LBS

    rejection_message = "Package too heavy to be shipped via Package Express. Have a good day."
