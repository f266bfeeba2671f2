"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    get_settings: Cached accessor for the process-wide Settings
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class
"""

from i18next_resolver.configuration.i18n import I18nSettings
from i18next_resolver.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
