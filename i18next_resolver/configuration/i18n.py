"""Translation engine settings."""

from typing import Optional

from pydantic import Field

from i18next_resolver.configuration.base import ComponentSettings


class I18nSettings(ComponentSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_LANGUAGE: Default language code (default: "en")
        I18N_FALLBACK_LANGUAGE: Language consulted when a default-language
            lookup fails (default: "dev"). Empty string disables fallback.
        I18N_PATH_TEMPLATE: Resource path template, may contain __lng__ and
            __ns__ placeholders (e.g. "locales/__lng__/__ns__.json")
        I18N_PRELOAD: Load resources when the translator is created
            (default: True)

    Example:
        ```python
        from i18next_resolver.configuration import Settings

        settings = Settings()
        if settings.i18n.path_template:
            # Load resources...
        ```
    """

    language: str = Field(
        default="en",
        alias="I18N_LANGUAGE",
        description="Default language code",
    )
    fallback_language: str = Field(
        default="dev",
        alias="I18N_FALLBACK_LANGUAGE",
        description="Fallback language for default-language lookups",
    )
    path_template: Optional[str] = Field(
        default=None,
        alias="I18N_PATH_TEMPLATE",
        description="Resource path template with optional __lng__/__ns__ placeholders",
    )
    preload: bool = Field(
        default=True,
        alias="I18N_PRELOAD",
        description="Load resources when the translator is created",
    )
