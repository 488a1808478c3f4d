"""
Correios Shipping Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (HTTP request,
CSV, manual creation) as long as it contains the required columns and every
row has already passed request validation. The output is the same DataFrame
with calculation columns and quotes for every service appended.

REQUIRED INPUT COLUMNS
----------------------
    destination_postal_code - Destination CEP (8-digit string)
    weight_g                - Actual weight in grams
    length_cm               - Package length in cm
    width_cm                - Package width in cm
    height_cm               - Package height in cm
    package_format          - 1=box, 2=roll, 3=envelope (not used for pricing)

OPTIONAL INPUT COLUMNS
----------------------
    diameter_cm             - Roll diameter in cm (not used for pricing)

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - distance_factor
        - weight_kg, volume_m3
        - cubic_weight_kg, uses_cubic_weight, billable_weight_kg

    calculate_express() / calculate_standard() add, per service prefix:
        - {prefix}_surcharge_* flags (own_hand, receipt_notice, declared_value)
        - {prefix}_cost_* amounts (base, surcharges, subtotal, total)
        - {prefix}_days

    calculate_pickup() adds:
        - pickup_cost_total, pickup_days

    calculate_costs() also adds:
        - calculator_version

USAGE
-----
    from carriers.correios.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import logging

import polars as pl

from .version import VERSION
from .data import (
    CUBIC_FACTOR,
    GRAMS_PER_KG,
    CM3_PER_M3,
    DISTANCE_SCALE,
    POSTAL_CODE_PATTERN,
)
from .errors import CalculationError
from .models import DEFAULT_ORIGIN, Origin
from .services import Service
from .surcharges import ALL as OPTIONAL_SERVICES

logger = logging.getLogger(__name__)


# =============================================================================
# INPUT SCHEMA
# =============================================================================

INPUT_SCHEMA = {
    "destination_postal_code": pl.Utf8,
    "weight_g": pl.Float64,
    "length_cm": pl.Float64,
    "width_cm": pl.Float64,
    "height_cm": pl.Float64,
    "package_format": pl.Int64,
    "diameter_cm": pl.Float64,
}

REQUIRED_INPUT_COLS = [
    "destination_postal_code",
    "weight_g",
    "length_cm",
    "width_cm",
    "height_cm",
    "package_format",
]

MEASUREMENT_COLS = ["weight_g", "length_cm", "width_cm", "height_cm"]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    origin: Origin | None = None
) -> pl.DataFrame:
    """
    Calculate Express, Standard and pickup quotes for a shipment DataFrame.

    This is the main entry point. Takes validated shipment data and returns
    the same DataFrame with all calculation columns and quotes appended.

    Args:
        df: Shipment DataFrame with required columns (see module docstring)
        origin: Shipping origin (DEFAULT_ORIGIN if not provided)

    Returns:
        DataFrame with supplemented data, surcharge flags, costs and lead times

    Raises:
        CalculationError: If the input breaks the validated-request contract
    """
    if origin is None:
        origin = DEFAULT_ORIGIN

    check_inputs(df)

    df = supplement_shipments(df, origin)
    df = calculate_express(df)
    df = calculate_standard(df)
    df = calculate_pickup(df)
    df = _stamp_version(df)

    logger.debug("Calculated quotes for %d shipment(s) from %s", len(df), origin.postal_code)
    return df


def check_inputs(df: pl.DataFrame) -> None:
    """
    Fail fast on input that request validation should have rejected.

    Checks for missing columns, nulls, non-finite or non-positive measurements
    and malformed CEPs. Any of these is a programming-contract violation.
    """
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise CalculationError(
            f"Missing required input columns: {missing}",
            details={"missing_columns": missing},
        )

    try:
        bad_rows = df.select(
            pl.any_horizontal(
                [pl.col(c).is_null() for c in REQUIRED_INPUT_COLS] +
                [~pl.col(c).cast(pl.Float64).is_finite() for c in MEASUREMENT_COLS] +
                [pl.col(c).cast(pl.Float64) <= 0 for c in MEASUREMENT_COLS] +
                [~pl.col("destination_postal_code").cast(pl.Utf8).str.contains(POSTAL_CODE_PATTERN)]
            ).sum()
        ).item()
    except pl.exceptions.PolarsError as exc:
        raise CalculationError(f"Unreadable shipment input: {exc}") from exc

    if bad_rows:
        raise CalculationError(
            f"{bad_rows} shipment(s) are not valid requests. "
            f"Validate requests before calculating.",
            details={"invalid_rows": bad_rows},
        )


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(
    df: pl.DataFrame,
    origin: Origin | None = None
) -> pl.DataFrame:
    """
    Supplement shipment data with distance and weight calculations.

    Args:
        df: Validated shipment DataFrame
        origin: Shipping origin (DEFAULT_ORIGIN if not provided)

    Returns:
        DataFrame with added columns:
            - distance_factor
            - weight_kg, volume_m3
            - cubic_weight_kg, uses_cubic_weight, billable_weight_kg
    """
    if origin is None:
        origin = DEFAULT_ORIGIN

    df = _add_distance_factor(df, origin)
    df = _add_calculated_dimensions(df)
    df = _add_billable_weight(df)

    return df


def _add_distance_factor(df: pl.DataFrame, origin: Origin) -> pl.DataFrame:
    """
    Add the distance factor between origin and destination CEP.

    DISTANCE PROXY
    --------------
    abs(destination - origin) / DISTANCE_SCALE, with both CEPs read as
    integers. Coarse and non-geographic, but monotonic enough within a CEP
    range and kept exactly for quote compatibility.
    """
    origin_number = int(origin.postal_code)

    return df.with_columns(
        (
            (pl.col("destination_postal_code").cast(pl.Utf8).cast(pl.Int64) - origin_number)
            .abs() / DISTANCE_SCALE
        ).alias("distance_factor")
    )


def _add_calculated_dimensions(df: pl.DataFrame) -> pl.DataFrame:
    """Add weight in kg and volume in cubic meters."""
    return df.with_columns([
        # Actual weight (kg)
        (pl.col("weight_g") / GRAMS_PER_KG).alias("weight_kg"),

        # Volume (m3), multiplied length * height * width
        (pl.col("length_cm") * pl.col("height_cm") * pl.col("width_cm") / CM3_PER_M3)
        .alias("volume_m3"),
    ])


def _add_billable_weight(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate cubic weight and billable weight.

    Billable weight is the greater of actual weight and cubic weight. There is
    no minimum-volume threshold: cubic weight always competes.
    """
    df = df.with_columns(
        (pl.col("volume_m3") * CUBIC_FACTOR).alias("cubic_weight_kg")
    )

    df = df.with_columns([
        (pl.col("cubic_weight_kg") > pl.col("weight_kg")).alias("uses_cubic_weight"),
        pl.max_horizontal("weight_kg", "cubic_weight_kg").alias("billable_weight_kg"),
    ])

    return df


# =============================================================================
# CALCULATE SERVICES
# =============================================================================

def calculate_express(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate Express (SEDEX) cost and lead time."""
    return _calculate_service(df, Service.EXPRESS)


def calculate_standard(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate Standard (PAC) cost and lead time."""
    return _calculate_service(df, Service.STANDARD)


def calculate_pickup(df: pl.DataFrame) -> pl.DataFrame:
    """Store pickup is free and available the same day for every shipment."""
    return df.with_columns([
        pl.lit(0.0).alias("pickup_cost_total"),
        pl.lit(0, dtype=pl.Int64).alias("pickup_days"),
    ])


def _calculate_service(df: pl.DataFrame, service: Service) -> pl.DataFrame:
    """
    Calculate cost columns and lead time for one carrier service.

    Processing order:
        1. Optional-service surcharges (flags + costs)
        2. Base price from the service curve
        3. Lead time (floored, before any rounding)
        4. Subtotal, then total rounded to cents (ties away from zero)
    """
    prefix = service.prefix

    # Phase 1: Optional services
    for s in OPTIONAL_SERVICES:
        df = _apply_surcharge(df, s, prefix)

    # Phase 2-3: Base price and lead time
    df = df.with_columns([
        service.price_expr().alias(f"{prefix}_cost_base"),
        service.days_expr().alias(f"{prefix}_days"),
    ])

    # Phase 4: Totals
    cost_cols = [f"{prefix}_cost_base"] + [
        f"{prefix}_cost_{s.name.lower()}" for s in OPTIONAL_SERVICES
    ]
    df = df.with_columns(
        pl.sum_horizontal(cost_cols).alias(f"{prefix}_cost_subtotal")
    )
    df = df.with_columns(
        pl.col(f"{prefix}_cost_subtotal")
        .round(2, mode="half_away_from_zero")
        .alias(f"{prefix}_cost_total")
    )

    return df


def _apply_surcharge(df: pl.DataFrame, surcharge, prefix: str) -> pl.DataFrame:
    """Apply a single surcharge to one service (no competition)."""
    flag_col = f"{prefix}_surcharge_{surcharge.name.lower()}"
    cost_col = f"{prefix}_cost_{surcharge.name.lower()}"

    df = df.with_columns(surcharge.conditions().alias(flag_col))
    df = df.with_columns(
        pl.when(pl.col(flag_col))
        .then(pl.lit(surcharge.cost()))
        .otherwise(pl.lit(0.0))
        .alias(cost_col)
    )

    return df


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "INPUT_SCHEMA",
    "REQUIRED_INPUT_COLS",
    "calculate_costs",
    "check_inputs",
    "supplement_shipments",
    "calculate_express",
    "calculate_standard",
    "calculate_pickup",
]
