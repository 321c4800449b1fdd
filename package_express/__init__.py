"""
Package Express

Shipping quote calculator for single packages under fixed weight and size
limits.
"""

from .calculate_quote import calculate_quote, calculate_quotes
from .package import PackageRecord
from .session import QuoteSession, QuoteState
from .version import VERSION

__all__ = [
    "calculate_quote",
    "calculate_quotes",
    "PackageRecord",
    "QuoteSession",
    "QuoteState",
    "VERSION",
]
