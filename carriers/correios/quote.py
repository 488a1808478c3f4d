"""
Single-Request Quotes

Runs one validated request through the DataFrame calculator and returns the
ordered quote list: Express, Standard, Store Pickup.

USAGE
-----
    from carriers.correios.quote import RateCalculator
    calculator = RateCalculator(origin)
    options = calculator.quote({"cepDestino": "01310100", "peso": 500, ...})
"""

import logging
from typing import Any, Mapping

import polars as pl

from .calculate_costs import INPUT_SCHEMA, calculate_costs
from .errors import CalculationError
from .models import DEFAULT_ORIGIN, Origin, ShippingOption
from .services import PICKUP_CODE, PICKUP_NAME, Service
from .surcharges import ALL as OPTIONAL_SERVICES
from .validation import ShippingRequest, apply_default_package, validate_request

logger = logging.getLogger(__name__)


class RateCalculator:
    """Stateless quote calculator bound to one origin."""

    def __init__(self, origin: Origin = DEFAULT_ORIGIN):
        self.origin = origin

    def quote(self, raw: Mapping[str, Any]) -> list[ShippingOption]:
        """
        Validate raw request fields and quote them.

        Raises:
            RequestValidationError: Before any calculation is attempted
            CalculationError: If the validated request cannot be priced
        """
        request = validate_request(apply_default_package(raw, self.origin))
        return self.calculate(request)

    def calculate(self, request: ShippingRequest) -> list[ShippingOption]:
        """Quote a validated request."""
        try:
            result = calculate_costs(request_frame([request]), self.origin)
            row = result.row(0, named=True)
            return options_from_row(row)
        except CalculationError:
            logger.exception("Shipping calculation rejected a validated request: %r", request)
            raise
        except Exception as exc:
            logger.exception("Shipping calculation failed for request: %r", request)
            raise CalculationError(f"Shipping calculation failed: {exc}") from exc


def calculate(request: ShippingRequest, origin: Origin | None = None) -> list[ShippingOption]:
    """Quote a validated request from the given (or default) origin."""
    return RateCalculator(origin or DEFAULT_ORIGIN).calculate(request)


def request_frame(requests: list[ShippingRequest]) -> pl.DataFrame:
    """Build calculator input rows from validated requests."""
    return pl.DataFrame(
        {
            "destination_postal_code": [r.destination_postal_code for r in requests],
            "weight_g": [float(r.weight_g) for r in requests],
            "length_cm": [float(r.length_cm) for r in requests],
            "width_cm": [float(r.width_cm) for r in requests],
            "height_cm": [float(r.height_cm) for r in requests],
            "package_format": [int(r.package_format) for r in requests],
            "diameter_cm": [r.diameter_cm for r in requests],
        },
        schema=INPUT_SCHEMA,
    )


def options_from_row(row: dict[str, Any]) -> list[ShippingOption]:
    """Convert one calculated row into options, in fixed output order."""
    options = []
    for service in Service:
        fees = {
            s.option_field: row[f"{service.prefix}_cost_{s.name.lower()}"]
            for s in OPTIONAL_SERVICES
        }
        options.append(ShippingOption(
            service_code=service.code,
            service_name=service.label,
            price=row[f"{service.prefix}_cost_total"],
            estimated_days=row[f"{service.prefix}_days"],
            **fees,
        ))

    options.append(ShippingOption(
        service_code=PICKUP_CODE,
        service_name=PICKUP_NAME,
        price=row["pickup_cost_total"],
        estimated_days=row["pickup_days"],
    ))
    return options


__all__ = [
    "RateCalculator",
    "calculate",
    "request_frame",
    "options_from_row",
]
