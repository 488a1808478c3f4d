"""
Correios Carrier Module

Expected shipping quotes for Correios services from a single store origin.
Two priced services: Express (SEDEX) and Standard (PAC), plus free store pickup.
"""

from .calculate_costs import calculate_costs
from .errors import CalculationError, FieldError, RequestValidationError, ShippingError
from .models import DEFAULT_ORIGIN, Origin, PackageFormat, ShippingOption
from .quote import RateCalculator, calculate
from .validation import ShippingRequest, validate_request
from .version import VERSION

__all__ = [
    "calculate_costs",
    "calculate",
    "validate_request",
    "RateCalculator",
    "ShippingRequest",
    "ShippingOption",
    "PackageFormat",
    "Origin",
    "DEFAULT_ORIGIN",
    "ShippingError",
    "RequestValidationError",
    "CalculationError",
    "FieldError",
    "VERSION",
]
