"""
Correios Value Types

Origin configuration and quote output. Both are immutable and only live for
the duration of a calculation.
"""

from enum import IntEnum
from typing import NamedTuple

from .data import (
    ORIGIN_POSTAL_CODE,
    DEFAULT_WEIGHT_G,
    DEFAULT_FORMAT,
    DEFAULT_LENGTH_CM,
    DEFAULT_HEIGHT_CM,
    DEFAULT_WIDTH_CM,
)


class PackageFormat(IntEnum):
    """Correios package formats (request field `formato`)."""
    BOX = 1
    ROLL = 2
    ENVELOPE = 3


class Origin(NamedTuple):
    """Shipping origin plus the reference package quoted when measurements are omitted."""
    postal_code: str = ORIGIN_POSTAL_CODE
    default_weight_g: float = DEFAULT_WEIGHT_G
    default_format: int = DEFAULT_FORMAT
    default_length_cm: float = DEFAULT_LENGTH_CM
    default_height_cm: float = DEFAULT_HEIGHT_CM
    default_width_cm: float = DEFAULT_WIDTH_CM


DEFAULT_ORIGIN = Origin()


class ShippingOption(NamedTuple):
    """A single quoted shipping option."""
    service_code: str
    service_name: str
    price: float
    estimated_days: int
    own_hand_fee: float = 0.0
    receipt_notice_fee: float = 0.0
    declared_value_fee: float = 0.0


__all__ = [
    "PackageFormat",
    "Origin",
    "DEFAULT_ORIGIN",
    "ShippingOption",
]
