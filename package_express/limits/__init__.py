"""
Limits Package

Exports all limit classes and the validator predicates.

Check Order:
    1. OVERWEIGHT - checked as soon as the weight is entered
    2. OVERSIZE   - checked once all three dimensions are entered

Exceeding any limit ends the session without a quote.
"""

import logging

from .base import Limit
from .overweight import Overweight
from .oversize import Oversize
from ..package import PackageRecord

logger = logging.getLogger(__name__)


# All limits, in check order
ALL = [Overweight, Oversize]


# =============================================================================
# VALIDATOR
# =============================================================================

def validate_weight(weight: float) -> bool:
    """True if the package weight is within the weight limit."""
    passed = Overweight.passes(weight)
    if not passed:
        logger.debug("Weight %s exceeds %s", weight, Overweight.max_value)
    return passed


def validate_dimensions(package: PackageRecord) -> bool:
    """True if the package's total dimensions are within the size limit."""
    total = package.total_dimensions
    passed = Oversize.passes(total)
    if not passed:
        logger.debug("Total dimensions %s exceeds %s", total, Oversize.max_value)
    return passed


# =============================================================================
# VALIDATION
# =============================================================================

def validate_limits() -> None:
    """
    Validate limit configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    seen = set()

    for limit in ALL:
        name = getattr(limit, "name", None)
        if not name:
            errors.append(f"{limit.__name__}: missing name")
            continue

        if name in seen:
            errors.append(f"{name}: duplicate limit name")
        seen.add(name)

        if not getattr(limit, "field", None):
            errors.append(f"{name}: missing field")

        max_value = getattr(limit, "max_value", None)
        if max_value is None or max_value < 0:
            errors.append(f"{name}: max_value must be a non-negative number")

        if not getattr(limit, "rejection_message", None):
            errors.append(f"{name}: missing rejection_message")

    if errors:
        raise ValueError("Limit configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_limits()

__all__ = [
    # Base
    "Limit",
    # Limit classes
    "Overweight",
    "Oversize",
    # Lists
    "ALL",
    # Validator
    "validate_weight",
    "validate_dimensions",
    "validate_limits",
]
