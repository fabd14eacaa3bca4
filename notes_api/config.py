"""
Notes API: Application Configuration
======================================

What:  Centralized configuration using Pydantic Settings.
How:   Values come from environment variables (or a .env file), are validated
       on load, and exposed through the module-level `settings` object.
Who:   Imported by main.py, the simulated database and `python -m notes_api`.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a development default; the only thing most deployments
    change is the listening port.
    """

    app_name: str = Field(default="Notes API")

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1024, le=65535)

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

    # ── Simulated Database ────────────────────────────────────────────────
    # Seconds the fake lookup waits before answering. 0 disables the wait.
    fake_db_latency: float = Field(default=1.0, ge=0, le=30)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


settings = Settings()
