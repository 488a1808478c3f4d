"""
Shipping Request Validation

Turns raw request fields (JSON keys as sent by the storefront) into a typed
ShippingRequest, or raises RequestValidationError listing every violated
constraint at once.

    from carriers.correios.validation import validate_request
    request = validate_request({"cepDestino": "01310100", "peso": 500, ...})
"""

import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .data import (
    POSTAL_CODE_LENGTH,
    WEIGHT_MIN_G,
    WEIGHT_MAX_G,
    LENGTH_MIN_CM,
    LENGTH_MAX_CM,
    WIDTH_MIN_CM,
    WIDTH_MAX_CM,
    HEIGHT_MIN_CM,
    HEIGHT_MAX_CM,
)
from .errors import FieldError, RequestValidationError
from .models import DEFAULT_ORIGIN, Origin, PackageFormat


POSTAL_CODE_RE = re.compile(r"[0-9]{%d}" % POSTAL_CODE_LENGTH)

# Request keys describing the package; all omitted means "quote the default package"
PACKAGE_FIELDS = ("peso", "formato", "comprimento", "altura", "largura")


class ShippingRequest(BaseModel):
    """A quote request that passed every field constraint."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        allow_inf_nan=False,
        extra="ignore",
    )

    destination_postal_code: str = Field(..., alias="cepDestino")
    weight_g: float = Field(..., alias="peso", ge=WEIGHT_MIN_G, le=WEIGHT_MAX_G)
    length_cm: float = Field(..., alias="comprimento", ge=LENGTH_MIN_CM, le=LENGTH_MAX_CM)
    height_cm: float = Field(..., alias="altura", ge=HEIGHT_MIN_CM, le=HEIGHT_MAX_CM)
    width_cm: float = Field(..., alias="largura", ge=WIDTH_MIN_CM, le=WIDTH_MAX_CM)
    package_format: PackageFormat = Field(..., alias="formato")
    diameter_cm: Optional[float] = Field(None, alias="diametro", ge=0)

    @field_validator("destination_postal_code", mode="before")
    @classmethod
    def validate_postal_code(cls, v):
        if not isinstance(v, str) or not POSTAL_CODE_RE.fullmatch(v):
            raise ValueError(f"CEP must be exactly {POSTAL_CODE_LENGTH} digits")
        return v

    @field_validator("weight_g", "length_cm", "height_cm", "width_cm", "diameter_cm", mode="before")
    @classmethod
    def validate_number(cls, v):
        # bool is an int subclass and numeric strings would be coerced
        if isinstance(v, (bool, str)):
            raise ValueError("must be a number")
        return v

    @field_validator("package_format", mode="before")
    @classmethod
    def validate_package_format(cls, v):
        if isinstance(v, bool) or not isinstance(v, int) or v not in {f.value for f in PackageFormat}:
            raise ValueError("must be 1 (box), 2 (roll) or 3 (envelope)")
        return v


def validate_request(raw: Mapping[str, Any]) -> ShippingRequest:
    """
    Validate raw request fields.

    Args:
        raw: Mapping keyed by the request JSON names (cepDestino, peso, ...)

    Returns:
        ShippingRequest with every field narrowed to its validated type

    Raises:
        RequestValidationError: With one FieldError per violated constraint,
            in field order
    """
    if not isinstance(raw, Mapping):
        raise RequestValidationError([FieldError("body", "must be an object")])

    try:
        return ShippingRequest.model_validate(dict(raw))
    except ValidationError as exc:
        raise RequestValidationError(_field_errors(exc)) from None


def _field_errors(exc: ValidationError) -> list[FieldError]:
    """Flatten pydantic errors into FieldErrors keyed by request field name."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        message = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append(FieldError(field, message))
    return errors


def apply_default_package(raw: Mapping[str, Any], origin: Origin | None = None) -> dict[str, Any]:
    """
    Fill in the origin's reference package when no measurement was sent.

    Only applies when every package field is absent; a partially described
    package is left as-is so validation reports what is missing. Anything
    that is not a mapping is returned unchanged for the validator to reject.
    """
    if not isinstance(raw, Mapping):
        return raw

    if origin is None:
        origin = DEFAULT_ORIGIN

    request = dict(raw)
    if any(request.get(key) is not None for key in PACKAGE_FIELDS):
        return request

    request.update({
        "peso": origin.default_weight_g,
        "formato": origin.default_format,
        "comprimento": origin.default_length_cm,
        "altura": origin.default_height_cm,
        "largura": origin.default_width_cm,
    })
    return request


def normalize_postal_code(text: str) -> str:
    """Strip formatting from a typed CEP ("78556-100" -> "78556100")."""
    return re.sub(r"[^0-9]", "", text)


__all__ = [
    "ShippingRequest",
    "validate_request",
    "apply_default_package",
    "normalize_postal_code",
    "PACKAGE_FIELDS",
]
