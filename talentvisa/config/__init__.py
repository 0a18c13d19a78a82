"""
Configuration module for the Global Talent Visa assistant.
"""

from .settings import DEFAULT_MODELS, Settings, get_settings, reload_settings

__all__ = [
    "DEFAULT_MODELS",
    "Settings",
    "get_settings",
    "reload_settings",
]
