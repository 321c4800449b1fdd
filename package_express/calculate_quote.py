"""
Package Express Quote Calculator

DataFrame in, DataFrame out. The input can come from any source (manual
creation, a single PackageRecord) as long as it contains the required
columns. The output is the same DataFrame with calculation columns and the
quote appended.

REQUIRED INPUT COLUMNS
----------------------
    weight_lbs          - Package weight in pounds
    width_in            - Package width in inches
    height_in           - Package height in inches
    length_in           - Package length in inches

OUTPUT COLUMNS ADDED
--------------------
    supplement_packages() adds:
        - total_dimensions_in

    calculate() adds:
        - exceeds_* flags (overweight, oversize)
        - is_shippable
        - cost_quote (null when a limit is exceeded)
        - calculator_version

USAGE
-----
    from package_express.calculate_quote import calculate_quotes
    result = calculate_quotes(df)

    from package_express.calculate_quote import calculate_quote
    quote = calculate_quote(package)
"""

import polars as pl

from .version import VERSION
from .data import DIMENSION_FIELDS, QUOTE_DIVISOR, REQUIRED_COLUMNS
from .limits import ALL
from .package import PackageRecord


# =============================================================================
# MAIN ENTRY POINTS
# =============================================================================

def calculate_quotes(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate shipping quotes for a package DataFrame.

    Args:
        df: Package DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with supplemented data, limit flags, and quotes
    """
    _check_required_columns(df)
    df = supplement_packages(df)
    df = calculate(df)
    return df


def calculate_quote(package: PackageRecord) -> float:
    """
    Quote for a single package: width * height * length * weight / 100.

    Unrounded. The limits are not applied here; the session only calls this
    after both validators have passed.

    Raises:
        ValueError: if any of the four measurements is not set
    """
    if not package.is_complete:
        raise ValueError("Cannot quote a package before weight and all dimensions are set")

    return create_package_df(package).select(_quote_expr()).item()


def create_package_df(package: PackageRecord) -> pl.DataFrame:
    """Create a single-row DataFrame from a package record."""
    return pl.DataFrame([package.to_row()], schema={c: pl.Float64 for c in REQUIRED_COLUMNS})


# =============================================================================
# SUPPLEMENT PACKAGES
# =============================================================================

def supplement_packages(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add derived package measurements.

    Returns:
        DataFrame with added column:
            - total_dimensions_in: width + height + length
    """
    return df.with_columns(
        pl.sum_horizontal(DIMENSION_FIELDS).alias("total_dimensions_in")
    )


# =============================================================================
# CALCULATE
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Apply limits and calculate quotes for supplemented packages.

    Processing order:
        1. Limit flags      - one exceeds_* column per limit
        2. Shippable flag   - no limit exceeded
        3. Quote            - only for shippable packages
        4. Version stamp
    """
    df = _apply_limits(df)
    df = _calculate_quote(df)
    df = _stamp_version(df)
    return df


def _apply_limits(df: pl.DataFrame) -> pl.DataFrame:
    """Flag every limit a package exceeds, then derive is_shippable."""
    flag_cols = [f"exceeds_{limit.name.lower()}" for limit in ALL]

    df = df.with_columns([
        limit.conditions().alias(col) for limit, col in zip(ALL, flag_cols)
    ])

    return df.with_columns(
        (~pl.any_horizontal(flag_cols)).alias("is_shippable")
    )


def _quote_expr() -> pl.Expr:
    return (
        pl.col("width_in") * pl.col("height_in") * pl.col("length_in") * pl.col("weight_lbs")
    ) / QUOTE_DIVISOR


def _calculate_quote(df: pl.DataFrame) -> pl.DataFrame:
    """Quote shippable packages; rejected packages get null."""
    return df.with_columns(
        pl.when(pl.col("is_shippable"))
        .then(_quote_expr())
        .otherwise(pl.lit(None, dtype=pl.Float64))
        .alias("cost_quote")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


def _check_required_columns(df: pl.DataFrame) -> None:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(
            f"Package DataFrame is missing required column(s): {', '.join(missing)}"
        )


__all__ = [
    "calculate_quotes",
    "calculate_quote",
    "create_package_df",
    "supplement_packages",
    "calculate",
]
