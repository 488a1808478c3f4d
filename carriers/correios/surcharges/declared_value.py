"""
Declared Value (Valor Declarado)

Insurance on the declared content value. Not sold by the store.
"""

from shared.surcharges import Surcharge


class DECLARED_VALUE(Surcharge):
    """Declared value - insured content."""

    # Identity
    name = "DECLARED_VALUE"
    option_field = "declared_value_fee"

    # Pricing
    list_price = 0.00
    discount = 0.00

    # Not offered
    offered = False
