"""
explainrules Centralized Configuration

Provides validated, type-safe access to environment variables using Pydantic Settings.

Usage:
    from explainrules.core.config import get_settings

    settings = get_settings()
    if settings.trace_evaluation:
        ...

Environment Variables:
    EXPLAINRULES_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    EXPLAINRULES_DEBUG: Legacy debug flag (enables DEBUG level if set)
    EXPLAINRULES_LOG_JSON: Output logs as JSON
    EXPLAINRULES_TRACE_EVALUATION: Log every strategy node result at DEBUG level
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_env_file() -> Path | None:
    """
    Find .env file by searching for the project root.

    Searches upward from this file's location for pyproject.toml,
    then checks for .env in that directory.
    """
    current = Path(__file__).resolve().parent

    for _ in range(10):  # Limit search depth
        if (current / "pyproject.toml").exists():
            env_file = current / ".env"
            if env_file.exists():
                return env_file
            return None
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


_ENV_FILE = _find_project_env_file()


class RulesSettings(BaseSettings):
    """
    explainrules configuration settings.

    Environment variables are loaded with the EXPLAINRULES_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPLAINRULES_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # =========================================================================
    # Logging Configuration
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level for explainrules components",
    )

    debug: bool = Field(
        default=False,
        description="Legacy debug flag (enables DEBUG level if set)",
    )

    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format for machine parsing",
    )

    # =========================================================================
    # Evaluation
    # =========================================================================

    trace_evaluation: bool = Field(
        default=False,
        description="Log the result of every strategy node during evaluation",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """
        Get effective log level, respecting EXPLAINRULES_DEBUG and
        EXPLAINRULES_TRACE_EVALUATION.

        Priority:
        1. Explicit EXPLAINRULES_LOG_LEVEL
        2. EXPLAINRULES_DEBUG=1 or EXPLAINRULES_TRACE_EVALUATION=1 -> DEBUG
        3. Default: WARNING
        """
        if (self.debug or self.trace_evaluation) and self.log_level == "WARNING":
            return "DEBUG"
        return self.log_level

    @property
    def log_level_int(self) -> int:
        """Get effective log level as logging constant."""
        return getattr(logging, self.effective_log_level)


@lru_cache(maxsize=1)
def get_settings() -> RulesSettings:
    """
    Get the singleton settings instance.

    Settings are loaded and validated on first access.
    """
    return RulesSettings()


def reset_settings() -> None:
    """
    Reset the settings cache (for testing).

    The next get_settings() call reloads from environment variables.
    """
    get_settings.cache_clear()


def is_json_logging() -> bool:
    """Check if JSON logging is enabled."""
    return get_settings().log_json


def is_trace_enabled() -> bool:
    """Check if per-node evaluation tracing is enabled."""
    return get_settings().trace_evaluation
