"""
Own-Hand Delivery (Mao Propria)

Parcel is handed only to the named recipient. Not sold by the store, so the
surcharge never triggers and always reports zero.
"""

from shared.surcharges import Surcharge


class OWN_HAND(Surcharge):
    """Own-hand delivery - recipient-only hand-off."""

    # Identity
    name = "OWN_HAND"
    option_field = "own_hand_fee"

    # Pricing
    list_price = 0.00
    discount = 0.00

    # Not offered
    offered = False
