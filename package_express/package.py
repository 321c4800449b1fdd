"""
Package Record

The four measurements describing one package in a quote session.
"""

from dataclasses import dataclass, fields


@dataclass
class PackageRecord:
    """
    Weight and dimensions of one package.

    Fields stay None until the session has read them. Values are
    non-negative real numbers; units are pounds and inches.
    """

    weight: float | None = None
    width: float | None = None
    height: float | None = None
    length: float | None = None

    @property
    def is_complete(self) -> bool:
        """True once all four measurements are set."""
        return all(getattr(self, f.name) is not None for f in fields(self))

    @property
    def total_dimensions(self) -> float:
        """width + height + length."""
        missing = [name for name in ("width", "height", "length") if getattr(self, name) is None]
        if missing:
            raise ValueError(f"Package dimensions not set: {', '.join(missing)}")
        return self.width + self.height + self.length

    def to_row(self) -> dict:
        """Map to the column names used by calculate_quotes."""
        return {
            "weight_lbs": self.weight,
            "width_in": self.width,
            "height_in": self.height,
            "length_in": self.length,
        }
