"""
Limit Base Class

Shared base class for all Package Express shipping limits.
"""

from abc import ABC
import polars as pl


class Limit(ABC):
    """
    Base class for all shipping limits.

    A limit caps one measured package field. A package whose field exceeds
    max_value is rejected and no quote is produced.

    Attributes:
        IDENTITY
            name              - Short code (e.g., "OVERWEIGHT")

        MEASUREMENT
            field             - Column holding the measured value
            max_value         - Largest accepted value (inclusive)

        REPORTING
            rejection_message - Line shown to the customer when rejected
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # MEASUREMENT
    # -------------------------------------------------------------------------
    field: str
    max_value: float

    # -------------------------------------------------------------------------
    # REPORTING
    # -------------------------------------------------------------------------
    rejection_message: str

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def passes(cls, value: float) -> bool:
        """True if a single measured value is within the limit."""
        return value <= cls.max_value

    @classmethod
    def conditions(cls) -> pl.Expr:
        """Polars expression for when this limit is exceeded."""
        return pl.col(cls.field) > cls.max_value
