"""
Shipping API Schemas

Response bodies for the calculate-shipping endpoint. Field names are English
in Python and serialized with the storefront's JSON keys.
"""
from typing import List

from pydantic import BaseModel, Field

from carriers.correios.models import ShippingOption


class ShippingOptionResponse(BaseModel):
    """A single quoted shipping option."""
    service_code: str = Field(..., serialization_alias="codigo")
    service_name: str = Field(..., serialization_alias="nome")
    price: float = Field(..., ge=0, serialization_alias="valor")
    estimated_days: int = Field(..., ge=0, serialization_alias="prazoEntrega")
    own_hand_fee: float = Field(0.0, serialization_alias="valorMaoPropria")
    receipt_notice_fee: float = Field(0.0, serialization_alias="valorAvisoRecebimento")
    declared_value_fee: float = Field(0.0, serialization_alias="valorDeclarado")

    @classmethod
    def from_option(cls, option: ShippingOption) -> "ShippingOptionResponse":
        return cls(**option._asdict())


class QuoteResponse(BaseModel):
    """Successful quote: Express, Standard, Store Pickup in that order."""
    success: bool = True
    options: List[ShippingOptionResponse]


class ValidationFailureResponse(BaseModel):
    """Request rejected by validation; one detail per violated constraint."""
    error: str = "Invalid input"
    details: List[str]


class FailureResponse(BaseModel):
    """Malformed request or internal failure."""
    error: str
    success: bool = False
