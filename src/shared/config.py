"""Harness settings using pydantic-settings."""
from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings

from src.shared.logging import setup_logging


class HarnessSettings(BaseSettings):
    """Settings for the harness's own logging, read from the environment."""
    log_level: str = Field(default="info", validation_alias="GROKRATOS_LOG_LEVEL")
    log_format: str = Field(
        default="json",
        pattern=r"^(json|text)$",
        validation_alias="GROKRATOS_LOG_FORMAT",
    )

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


def configure_logging(settings: HarnessSettings | None = None) -> logging.Logger:
    """Install the harness log handler for the ``src`` logger tree."""
    settings = settings or HarnessSettings()
    return setup_logging("src", level=settings.log_level, fmt=settings.log_format)
