"""
Correios Services

The closed set of priced carrier services. Each member carries its linear
pricing curve and builds the polars expressions used by the calculator.
Store pickup is not a carrier service and is handled separately.
"""

from enum import Enum
from typing import NamedTuple

import polars as pl

from .data.reference.services import (
    EXPRESS_CODE,
    EXPRESS_NAME,
    EXPRESS_BASE_PRICE,
    EXPRESS_PRICE_PER_KG,
    EXPRESS_PRICE_PER_DISTANCE,
    EXPRESS_BASE_DAYS,
    EXPRESS_DAYS_PER_DISTANCE,
    STANDARD_CODE,
    STANDARD_NAME,
    STANDARD_BASE_PRICE,
    STANDARD_PRICE_PER_KG,
    STANDARD_PRICE_PER_DISTANCE,
    STANDARD_BASE_DAYS,
    STANDARD_DAYS_PER_DISTANCE,
    PICKUP_CODE,
    PICKUP_NAME,
)


class PricingCurve(NamedTuple):
    """Linear price and lead-time curve for one service."""
    code: str
    label: str
    prefix: str                 # column prefix in the calculator output
    base_price: float
    price_per_kg: float
    price_per_distance: float
    base_days: int
    days_per_distance: int


class Service(Enum):
    """Priced carrier services, in quote output order."""

    EXPRESS = PricingCurve(
        code=EXPRESS_CODE,
        label=EXPRESS_NAME,
        prefix="express",
        base_price=EXPRESS_BASE_PRICE,
        price_per_kg=EXPRESS_PRICE_PER_KG,
        price_per_distance=EXPRESS_PRICE_PER_DISTANCE,
        base_days=EXPRESS_BASE_DAYS,
        days_per_distance=EXPRESS_DAYS_PER_DISTANCE,
    )
    STANDARD = PricingCurve(
        code=STANDARD_CODE,
        label=STANDARD_NAME,
        prefix="standard",
        base_price=STANDARD_BASE_PRICE,
        price_per_kg=STANDARD_PRICE_PER_KG,
        price_per_distance=STANDARD_PRICE_PER_DISTANCE,
        base_days=STANDARD_BASE_DAYS,
        days_per_distance=STANDARD_DAYS_PER_DISTANCE,
    )

    @property
    def code(self) -> str:
        return self.value.code

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def prefix(self) -> str:
        return self.value.prefix

    def price_expr(self) -> pl.Expr:
        """Unrounded base price from billable_weight_kg and distance_factor."""
        curve = self.value
        return (
            pl.lit(curve.base_price) +
            pl.col("billable_weight_kg") * curve.price_per_kg +
            pl.col("distance_factor") * curve.price_per_distance
        )

    def days_expr(self) -> pl.Expr:
        """Lead time in days; the distance term is floored before adding."""
        curve = self.value
        return (
            (pl.col("distance_factor") * curve.days_per_distance)
            .floor()
            .cast(pl.Int64)
            + curve.base_days
        )


__all__ = [
    "PricingCurve",
    "Service",
    "PICKUP_CODE",
    "PICKUP_NAME",
]
