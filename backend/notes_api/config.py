"""
Notes API: Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py and the server entry point.
When:  Loaded once at module import time; tests build their own Settings.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


VALIDATION_STRATEGIES = {"manual", "schema"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    """

    app_name: str = Field(default="Notes API")

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: comma-separated origins, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Validation ────────────────────────────────────────────────────────
    # What: Which NoteValidator backs the create/update endpoints
    # manual = hand-written checks, schema = Pydantic request models
    validation_strategy: str = Field(default="manual")

    @field_validator("validation_strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        lower = v.strip().lower()
        if lower not in VALIDATION_STRATEGIES:
            raise ValueError(
                f"Invalid validation_strategy '{v}'. Must be one of: {sorted(VALIDATION_STRATEGIES)}"
            )
        return lower

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }


# Singleton instance used by the module-level app and the server entry point
settings = Settings()
