"""Runtime translation resolution with nested keys, namespaces and fallbacks."""

from i18next_resolver.i18n import (
    DecodeError,
    I18nError,
    ResourceNotFoundError,
    Translator,
    create_translator,
)

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "I18nError",
    "ResourceNotFoundError",
    "Translator",
    "create_translator",
]
