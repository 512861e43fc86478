"""
Runtime settings — logging setup for applications embedding railcmd.

Uses pydantic-settings so the log level and renderer come from the
environment (12-factor style), falling back to a .env file and defaults:

  RAILCMD_LOG_LEVEL   DEBUG | INFO | WARNING | ERROR | CRITICAL   (default INFO)
  RAILCMD_LOG_FORMAT  console | json                             (default console)

railcmd never configures logging on import; call `configure_structlog`
once from the application's composition root:

    settings = RailcmdSettings()
    configure_structlog(settings.log_level, settings.log_format)
"""

from __future__ import annotations

import logging
from typing import Literal

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogFormat = Literal["console", "json"]

_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class RailcmdSettings(BaseSettings):
    """
    Environment-driven settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILCMD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level emitted by structlog")
    log_format: LogFormat = Field(default="console", description="Renderer: console or json")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise to upper case and reject names the logging module doesn't know."""
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LEVELS)}, got {value!r}")
        return level


def configure_structlog(log_level: str = "INFO", log_format: LogFormat = "console") -> None:
    """
    Configure structlog for the process.

    json: one JSON object per line (machine-readable).
    console: coloured, human-readable output for development.
    """
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
