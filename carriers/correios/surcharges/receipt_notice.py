"""
Receipt Notice (Aviso de Recebimento)

Signed proof of delivery returned to the sender. Not sold by the store.
"""

from shared.surcharges import Surcharge


class RECEIPT_NOTICE(Surcharge):
    """Receipt notice - signature confirmation."""

    # Identity
    name = "RECEIPT_NOTICE"
    option_field = "receipt_notice_fee"

    # Pricing
    list_price = 0.00
    discount = 0.00

    # Not offered
    offered = False
