"""
Oversize Limit

Rejects packages whose width + height + length exceeds 50.
Total dimensions is a plain sum, not a volume or length + girth.
"""

from .base import Limit
from ..data import MAX_TOTAL_DIMENSIONS_IN


class Oversize(Limit):
    """Total dimensions over the maximum."""

    name = "OVERSIZE"

    field = "total_dimensions_in"
    max_value = MAX_TOTAL_DIMENSIONS_IN

    rejection_message = "Package too big to be shipped via Package Express."
