"""
Surcharge Base Class

Shared base class for optional carrier services billed on top of a base rate
(own-hand delivery, receipt notice, declared value, ...).
"""

from abc import ABC
import polars as pl


# =============================================================================
# BASE CLASS
# =============================================================================

class Surcharge(ABC):
    """
    Base class for all surcharges.

    Attributes:
        IDENTITY
            name            - Short code (e.g., "OWN_HAND", "DECLARED_VALUE")
            option_field    - ShippingOption field the cost is reported in

        PRICING
            list_price      - Published rate before discount
            discount        - Decimal discount (0.70 = 70% off)

        AVAILABILITY
            offered         - False when the store does not sell the service;
                              the surcharge then never triggers
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    option_field: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    list_price: float
    discount: float = 0.0

    # -------------------------------------------------------------------------
    # AVAILABILITY
    # -------------------------------------------------------------------------
    offered: bool = True

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def net_price(cls) -> float:
        """Price after discount."""
        return cls.list_price * (1 - cls.discount)

    @classmethod
    def cost(cls) -> float:
        """Cost per shipment (0.0 when the service is not offered)."""
        if not cls.offered:
            return 0.0
        return cls.net_price()

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when this surcharge triggers.

        Default follows availability: always for offered services, never
        otherwise. Override for request-dependent conditions.
        """
        return pl.lit(cls.offered)
