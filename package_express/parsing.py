"""
Numeric Input Parsing

Parse-or-error for console input. Returns a ParseResult instead of raising,
so callers branch on the outcome.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one line of input."""

    ok: bool
    value: float | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: float) -> "ParseResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(ok=False, error=error)


def parse_number(text: str | None) -> ParseResult:
    """
    Parse a non-negative, finite real number.

    Surrounding whitespace is ignored. Empty input, non-numeric text, nan,
    infinities and negative numbers are all failures.
    """
    if text is None:
        return ParseResult.failure("no input")

    stripped = text.strip()
    if not stripped:
        return ParseResult.failure("empty input")

    try:
        value = float(stripped)
    except ValueError:
        return ParseResult.failure(f"not a number: {stripped!r}")

    if not math.isfinite(value):
        return ParseResult.failure(f"not a finite number: {stripped!r}")
    if value < 0:
        return ParseResult.failure(f"negative value: {stripped!r}")

    # -0 passes the sign check; store it as 0.0
    return ParseResult.success(value + 0.0)


__all__ = ["ParseResult", "parse_number"]
