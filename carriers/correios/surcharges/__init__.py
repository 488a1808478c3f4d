"""
Correios Surcharges Package

Optional services that can be added to Express and Standard:
    - OWN_HAND, RECEIPT_NOTICE, DECLARED_VALUE

None of them are currently offered; their cost columns are always zero but
stay in the output so every quote carries the same fields.
No mutual exclusivity, no dependencies.
"""

from shared.surcharges import Surcharge

from .own_hand import OWN_HAND
from .receipt_notice import RECEIPT_NOTICE
from .declared_value import DECLARED_VALUE


# Applied to every carrier service (not to store pickup)
ALL = [OWN_HAND, RECEIPT_NOTICE, DECLARED_VALUE]


__all__ = [
    "Surcharge",
    "OWN_HAND",
    "RECEIPT_NOTICE",
    "DECLARED_VALUE",
    "ALL",
]
