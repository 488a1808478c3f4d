"""
Shipping Rate Calculator
FastAPI application entry point

    uvicorn api.main:app
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import Settings, settings
from api.routes import shipping
from api.schemas import FailureResponse, ValidationFailureResponse
from carriers.correios.errors import CalculationError, RequestValidationError
from carriers.correios.quote import RateCalculator
from carriers.correios.version import VERSION

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Validation failures are safe to return verbatim."""
    logger.info(f"Rejected shipping request: {exc.messages}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationFailureResponse(details=exc.messages).model_dump(),
        headers=shipping.CORS_HEADERS,
    )


async def calculation_error_handler(request: Request, exc: CalculationError) -> JSONResponse:
    """Internal failures are logged where raised; the client gets a generic message."""
    logger.error(f"Shipping calculation failed [{exc.code}] on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=FailureResponse(error="Shipping calculation failed").model_dump(),
        headers=shipping.CORS_HEADERS,
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    app = FastAPI(title=app_settings.APP_NAME, version=VERSION, debug=app_settings.DEBUG)
    app.state.settings = app_settings
    app.state.calculator = RateCalculator(app_settings.origin())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(CalculationError, calculation_error_handler)

    app.include_router(shipping.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": app_settings.APP_NAME, "version": VERSION}

    logger.info(f"Quoting from origin CEP {app_settings.ORIGIN_POSTAL_CODE}")
    return app


app = create_app()
