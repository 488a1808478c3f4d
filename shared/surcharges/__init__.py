"""
Shared Surcharges

Base class for carrier surcharges and optional services.
"""

from .base import Surcharge

__all__ = [
    "Surcharge",
]
