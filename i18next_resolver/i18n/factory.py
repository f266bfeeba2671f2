"""Factory functions for creating i18n components.

Builds a Translator from application settings.
"""

from typing import Optional

from i18next_resolver.configuration import Settings, get_settings
from i18next_resolver.i18n.postprocess import PostProcessorRegistry
from i18next_resolver.i18n.providers import ResourceProvider
from i18next_resolver.i18n.translator import Translator
from i18next_resolver.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    settings: Optional[Settings] = None,
    provider: Optional[ResourceProvider] = None,
    preload: Optional[bool] = None,
    post_processors: Optional[PostProcessorRegistry] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        settings: Settings to read i18n configuration from (default: the
            cached process-wide settings).
        provider: Resource provider (default: filesystem).
        preload: Whether to load resources immediately (default:
            settings.i18n.preload). Ignored when no path template is set.
        post_processors: Post-processor registry (default: sprintf only).

    Returns:
        Translator: Configured translator instance

    Raises:
        ResourceNotFoundError: If preloading and no resource matches.
        DecodeError: If preloading and a resource cannot be decoded.

    Usage:
        # Configure from environment (I18N_LANGUAGE, I18N_PATH_TEMPLATE, ...)
        translator = create_translator()

        # Lazy loading
        translator = create_translator(preload=False)
        translator.load()
    """
    i18n_settings = (settings or get_settings()).i18n
    should_preload = i18n_settings.preload if preload is None else preload

    translator = Translator(
        provider=provider,
        language=i18n_settings.language,
        fallback_language=i18n_settings.fallback_language,
        path_template=i18n_settings.path_template,
        post_processors=post_processors,
    )

    if should_preload and i18n_settings.path_template:
        translator.load()
        logger.info(
            "translator_created_with_preload",
            path_template=i18n_settings.path_template,
            language_count=len(translator.get_available_languages()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            path_template=i18n_settings.path_template,
        )

    return translator
