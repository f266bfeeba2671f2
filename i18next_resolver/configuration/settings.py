"""Configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from i18next_resolver.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Configuration settings - main aggregator.

    Aggregates component settings into a single configuration object.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from i18next_resolver.configuration import get_settings

        settings = get_settings()

        language = settings.i18n.language

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings, read from the environment on first use.

    Nothing is read at import time. Call ``get_settings.cache_clear()`` to
    pick up environment changes.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
