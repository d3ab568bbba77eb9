"""
Runtime configuration.

Values are read from ``FUEL_TAX_*`` environment variables or a ``.env``
file in the working directory. The engine itself takes every setting as an
argument; only the CLI reads from here.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FUEL_TAX_",
        env_file=".env",
        extra="ignore",
    )

    default_mpg: Decimal = Field(
        default=Decimal("6.5"),
        gt=0,
        description="Fleet MPG used when a quarter has no fuel purchases",
    )
    output_dir: str = Field(
        default="reports",
        description="Directory for JSON and CSV exports",
    )
    log_level: str = Field(default="WARNING")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
