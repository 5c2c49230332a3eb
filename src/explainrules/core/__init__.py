"""
Shared infrastructure for explainrules: configuration and logging.
"""

from .config import RulesSettings, get_settings, reset_settings
from .logging import get_logger, reset_logging

__all__ = [
    "RulesSettings",
    "get_logger",
    "get_settings",
    "reset_logging",
    "reset_settings",
]
