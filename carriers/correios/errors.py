"""
Correios Calculator Exceptions

    ShippingError
    ├── RequestValidationError  - request failed one or more field constraints
    └── CalculationError        - calculation failed on an already-valid request
"""

from typing import Any, NamedTuple


class FieldError(NamedTuple):
    """One violated constraint, keyed by the request field it belongs to."""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ShippingError(Exception):
    """
    Base exception for the rate calculator.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        details: Additional context for logging
    """

    default_code: str = "SHIPPING_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)


class RequestValidationError(ShippingError):
    """Raised with every violated constraint of a quote request."""

    default_code = "VALIDATION_ERROR"

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__(
            f"{len(self.errors)} invalid field(s) in shipping request",
            details={"errors": [str(e) for e in self.errors]},
        )

    @property
    def messages(self) -> list[str]:
        """One "<field>: <message>" string per violation, in field order."""
        return [str(e) for e in self.errors]


class CalculationError(ShippingError):
    """Raised when a validated request cannot be priced (contract violation)."""

    default_code = "CALCULATION_ERROR"


__all__ = [
    "FieldError",
    "ShippingError",
    "RequestValidationError",
    "CalculationError",
]
