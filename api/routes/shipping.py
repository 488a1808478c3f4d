"""
Shipping API Routes

Provides endpoints for:
- Rate quoting (POST /calculate-shipping)
- CORS pre-flight (OPTIONS /calculate-shipping)

Validation and calculation failures are raised as ShippingError subclasses
and mapped to responses by the handlers registered in api.main.
"""
import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.schemas import FailureResponse, QuoteResponse, ShippingOptionResponse
from carriers.correios.quote import RateCalculator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shipping"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def get_calculator(request: Request) -> RateCalculator:
    """Calculator built at startup with the configured origin."""
    return request.app.state.calculator


def failure(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=FailureResponse(error=message).model_dump(),
        headers=CORS_HEADERS,
    )


@router.options("/calculate-shipping")
async def calculate_shipping_preflight() -> Response:
    """Empty pre-flight response with permissive CORS headers."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post("/calculate-shipping")
async def calculate_shipping(request: Request) -> JSONResponse:
    """
    Quote Express, Standard and store pickup for a package.

    Body: cepDestino, peso (g), comprimento, altura, largura (cm), formato
    (1-3) and optional diametro (cm). When no package field is sent the
    store's reference package is quoted.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        logger.info(f"Rejected malformed shipping request body: {e}")
        return failure("Request body must be valid JSON")

    if not isinstance(payload, dict):
        return failure("Request body must be a JSON object")

    logger.info(f"Calculating shipping: {payload}")

    options = get_calculator(request).quote(payload)

    logger.info(f"Shipping options calculated: {[(o.service_code, o.price) for o in options]}")

    body = QuoteResponse(options=[ShippingOptionResponse.from_option(o) for o in options])
    return JSONResponse(
        content=body.model_dump(by_alias=True),
        headers=CORS_HEADERS,
    )
