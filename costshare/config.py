"""Configuration management"""

import logging
from decimal import Decimal
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from costshare.utils.decimal_utils import MONEY_PLACES, SETTLEMENT_EPSILON


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Cost Sharing Ledger"
    debug: bool = False
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Ledger
    settlement_epsilon: Decimal = SETTLEMENT_EPSILON
    decimal_places: int = Field(default=MONEY_PLACES, ge=0, le=6)

    # CORS
    allowed_origins: List[str] = []

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name"""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v}")
        return level

    @field_validator("settlement_epsilon")
    @classmethod
    def validate_settlement_epsilon(cls, v: Decimal) -> Decimal:
        """Validate epsilon is positive"""
        if v <= 0:
            raise ValueError("SETTLEMENT_EPSILON must be greater than zero")
        return v

    @model_validator(mode="after")
    def validate_epsilon_covers_rounding(self) -> "Settings":
        """Validate epsilon is at least one unit of the rounding precision"""
        smallest_unit = Decimal(10) ** -self.decimal_places
        if self.settlement_epsilon < smallest_unit:
            raise ValueError(
                f"SETTLEMENT_EPSILON must be at least {smallest_unit} "
                f"for DECIMAL_PLACES={self.decimal_places}"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
