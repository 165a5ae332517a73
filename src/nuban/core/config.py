"""Library configuration using pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class NubanSettings(BaseSettings):
    """Root settings for NUBAN check-digit computation."""

    model_config = {"env_prefix": "NUBAN_"}

    log_level: str = "INFO"
    strict_widths: bool = False  # enforce 3-digit bank code + 9-digit serial
