"""Public API for shared errkit configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    Base64Settings,
    EngineName,
    ErrkitSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "Base64Settings",
    "EngineName",
    "ErrkitSettings",
    "LoggingSettings",
    "load_settings",
]
