"""Mini README: Centralised configuration models and helpers for Budgeter.

Structure:
    * BudgeterSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``BUDGETER_`` prefixed environment
    variables (or a local ``.env`` file). New ledgers take their saving
    target and low balance threshold from here unless callers pass explicit
    values.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BudgeterSettings(BaseSettings):
    """Runtime configuration for the Budgeter ledger and CLI."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Name of the logging level applied to the root logger by the CLI.",
    )
    default_target_saving: float = Field(
        150.0,
        description="Saving target assigned to ledgers created without an explicit value.",
        ge=0,
    )
    default_low_bank_warning: float = Field(
        80.0,
        description="Bank balance at or below which a ledger reports a low balance.",
        ge=0,
    )

    class Config:
        env_prefix = "BUDGETER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_log_level(cls, value: object) -> str:
        """Accept any casing but only names the logging module knows."""

        level_name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"Unknown log level: {value}")
        return level_name


@lru_cache()
def get_settings() -> BudgeterSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgeterSettings()
