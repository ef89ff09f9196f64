"""Configuration and logging setup."""

from readit_core.config.logging_config import configure_logging
from readit_core.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
