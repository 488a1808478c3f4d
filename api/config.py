"""
Application configuration

Settings are read from SHIPPING_* environment variables (or a .env file).
The origin CEP and reference package are fixed at startup and injected into
the rate calculator; they are never request parameters.
"""
import logging
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from carriers.correios.data import (
    ORIGIN_POSTAL_CODE,
    DEFAULT_WEIGHT_G,
    DEFAULT_FORMAT,
    DEFAULT_LENGTH_CM,
    DEFAULT_HEIGHT_CM,
    DEFAULT_WIDTH_CM,
)
from carriers.correios.models import Origin, PackageFormat
from carriers.correios.validation import POSTAL_CODE_RE

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SHIPPING_",
        env_file=".env",
        extra="ignore",
    )

    # App
    APP_NAME: str = "Shipping Rate Calculator"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Origin and reference package
    ORIGIN_POSTAL_CODE: str = ORIGIN_POSTAL_CODE
    DEFAULT_WEIGHT_G: float = DEFAULT_WEIGHT_G
    DEFAULT_FORMAT: int = DEFAULT_FORMAT
    DEFAULT_LENGTH_CM: float = DEFAULT_LENGTH_CM
    DEFAULT_HEIGHT_CM: float = DEFAULT_HEIGHT_CM
    DEFAULT_WIDTH_CM: float = DEFAULT_WIDTH_CM

    # CORS - "*" or comma-separated origins
    CORS_ORIGINS: str = "*"

    @field_validator("ORIGIN_POSTAL_CODE")
    @classmethod
    def validate_origin_postal_code(cls, v):
        if not POSTAL_CODE_RE.fullmatch(v):
            raise ValueError("ORIGIN_POSTAL_CODE must be exactly 8 digits")
        return v

    @field_validator("DEFAULT_FORMAT")
    @classmethod
    def validate_default_format(cls, v):
        if v not in {f.value for f in PackageFormat}:
            raise ValueError("DEFAULT_FORMAT must be 1, 2 or 3")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

    def origin(self) -> Origin:
        """Origin value injected into the rate calculator."""
        return Origin(
            postal_code=self.ORIGIN_POSTAL_CODE,
            default_weight_g=self.DEFAULT_WEIGHT_G,
            default_format=self.DEFAULT_FORMAT,
            default_length_cm=self.DEFAULT_LENGTH_CM,
            default_height_cm=self.DEFAULT_HEIGHT_CM,
            default_width_cm=self.DEFAULT_WIDTH_CM,
        )


settings = Settings()
