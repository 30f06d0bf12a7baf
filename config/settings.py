"""Pydantic settings for the interest rate engine configuration."""

import logging
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identities
    controller_address: str = Field(default="", description="Only caller allowed to update adaptive rates")
    fixed_rate_admin: str = Field(default="", description="Admin allowed to set the fixed rate once")

    # Adaptive curve parameters (annualized)
    target_utilization: Decimal = Field(default=Decimal("0.9"), gt=0, lt=1, description="Target utilization")
    curve_steepness: Decimal = Field(default=Decimal("4"), gt=1, description="Rate multiplier at full utilization")
    adjustment_speed: Decimal = Field(default=Decimal("50"), gt=0, description="Rate at target adjustment speed per year")
    initial_rate_at_target: Decimal = Field(default=Decimal("0.04"), gt=0, description="Initial rate at target (APR)")
    min_rate_at_target: Decimal = Field(default=Decimal("0.001"), gt=0, description="Lower bound of rate at target (APR)")
    max_rate_at_target: Decimal = Field(default=Decimal("2.0"), gt=0, description="Upper bound of rate at target (APR)")

    # Fixed rate model
    fixed_initial_rate: Decimal = Field(default=Decimal("0.05"), ge=0, le=100, description="Initial fixed rate")

    # Rate at target storage
    store_backend: Literal["memory", "disk"] = Field(default="memory", description="Rate at target store backend")
    store_dir: Path = Field(default=Path(".cache/irm"), description="Disk store directory path")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("store_dir", mode="before")
    @classmethod
    def parse_store_dir(cls, v):
        """Convert string to Path."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        """Normalize and check the log level name."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def check_rate_bounds(self):
        """Initial rate at target must sit inside [min, max]."""
        if not self.min_rate_at_target <= self.initial_rate_at_target <= self.max_rate_at_target:
            raise ValueError(
                "Expected min_rate_at_target <= initial_rate_at_target <= max_rate_at_target, got "
                f"{self.min_rate_at_target}, {self.initial_rate_at_target}, {self.max_rate_at_target}"
            )
        return self

    def ensure_store_dir(self) -> Path:
        """Ensure store directory exists and return it."""
        self.store_dir.mkdir(parents=True, exist_ok=True)
        return self.store_dir


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
