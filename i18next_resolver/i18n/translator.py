"""Translation service: configuration, lookup, fallback and interpolation.

The Translator owns its configuration, its TranslationStore and its
missing-translation log. Instances are independent of each other.
"""

import re
import threading
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from i18next_resolver.i18n.decoders import Decoder
from i18next_resolver.i18n.loader import ResourceLoader
from i18next_resolver.i18n.models import (
    MissingTranslation,
    TranslationOptions,
    TranslationStore,
    render,
    stringify,
)
from i18next_resolver.i18n.postprocess import PostProcessorRegistry
from i18next_resolver.i18n.providers import (
    FileSystemResourceProvider,
    ResourceProvider,
)
from i18next_resolver.i18n.resolver import Resolver
from i18next_resolver.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LANGUAGE = "en"
DEFAULT_FALLBACK_LANGUAGE = "dev"


class Translator:
    """Service for translating dotted keys with fallback and interpolation.

    ``translate()`` never raises for a missing key: it falls back to the
    fallback language, then to ``defaultValue``, then to the key itself, and
    records the miss in the missing-translation log.

    Attributes:
        loader: ResourceLoader used by ``load()``.
        language: Default language for lookups.
        fallback_language: Language retried when a default-language lookup
            fails. Empty string disables fallback.
        path_template: Resource path template used by ``load()``.
        store: Loaded TranslationStore.
        post_processors: Registry consulted for the ``postProcess`` variable.
    """

    def __init__(
        self,
        provider: Optional[ResourceProvider] = None,
        decoder: Optional[Decoder] = None,
        language: str = DEFAULT_LANGUAGE,
        fallback_language: str = DEFAULT_FALLBACK_LANGUAGE,
        path_template: Optional[str] = None,
        post_processors: Optional[PostProcessorRegistry] = None,
        store: Optional[TranslationStore] = None,
    ):
        """Initialize Translator.

        Args:
            provider: Resource provider (default: filesystem).
            decoder: Decoder for every resource (default: chosen by extension).
            language: Default language (default: "en").
            fallback_language: Fallback language (default: "dev").
            path_template: Resource path template for ``load()``.
            post_processors: Post-processor registry (default: sprintf only).
            store: Pre-populated store (default: empty).
        """
        self.loader = ResourceLoader(provider or FileSystemResourceProvider(), decoder)
        self.language = language
        self.fallback_language = fallback_language
        self.path_template = path_template
        self.post_processors = post_processors or PostProcessorRegistry()
        self.store = store if store is not None else TranslationStore()
        self._resolver = Resolver(self.store)
        self._missing: List[MissingTranslation] = []
        self._lock = threading.RLock()
        logger.info(
            "initialized_translator",
            language=language,
            fallback_language=fallback_language,
        )

    def init(
        self,
        language: str = DEFAULT_LANGUAGE,
        path_template: Optional[str] = None,
        fallback_language: Optional[str] = None,
    ) -> None:
        """Configure languages and path template, then load resources.

        Args:
            language: Default language.
            path_template: Resource path template. Without one, the default
                resource filename in the working directory is loaded.
            fallback_language: New fallback language, unchanged if None.

        Raises:
            ResourceNotFoundError: If no resource matches the template.
            DecodeError: If a resource cannot be decoded.
        """
        self.language = language
        self.path_template = path_template
        if fallback_language is not None:
            self.fallback_language = fallback_language
        self.load()

    def load(self) -> None:
        """Load resources for the configured path template.

        The new store replaces the current one only when every resource
        loaded successfully.
        """
        with self._lock:
            store = self.loader.load(self.path_template or "", self.language)
            self.store = store
            self._resolver = Resolver(store)
        logger.info("loaded_all_translations", languages=store.languages)

    def set_language(self, language: str, fallback_language: Optional[str] = None) -> None:
        """Change the default language and, if given, the fallback language."""
        self.language = language
        if fallback_language is not None:
            self.fallback_language = fallback_language
        logger.debug(
            "language_changed",
            language=language,
            fallback_language=self.fallback_language,
        )

    def add_resources(
        self,
        language: str,
        translations: Mapping[str, Any],
        namespace: Optional[str] = None,
    ) -> None:
        """Merge translations into the store without going through a provider.

        Args:
            language: Language the translations belong to.
            translations: Nested key tree.
            namespace: Optional namespace to merge under.
        """
        with self._lock:
            if namespace is None:
                self.store.merge_language(language, translations)
            else:
                self.store.merge_namespace(language, namespace, translations)

    def translate(self, key: str, variables: Optional[Dict[str, Any]] = None, **kwargs):
        """Translate a key.

        Keyword arguments are merged over ``variables``, so both
        ``translate("k", {"name": "Ada"})`` and ``translate("k", name="Ada")``
        work.

        Args:
            key: Dotted lookup key.
            variables: Variable bag, including reserved names (lng, context,
                count, defaultValue, postProcess, sprintf, returnObjectTrees).

        Returns:
            The translated string; a list of lines or a mapping when
            ``returnObjectTrees`` is True and the key names a structure; the
            ``defaultValue`` or the key itself when nothing resolved.
        """
        variables = {**(variables or {}), **kwargs}
        options = TranslationOptions.from_variables(variables)

        resolved = self._resolver.resolve(key, options, self.language)

        if resolved is None:
            missing_language = (
                options.language if options.language is not None else self.language
            )
            self._record_missing(missing_language, key)

            if options.language is None and self.fallback_language:
                resolved = self._resolver.resolve(
                    key, replace(options, language=self.fallback_language), self.language
                )
                if resolved is not None:
                    logger.debug(
                        "used_fallback_translation",
                        key=key,
                        language=self.language,
                        fallback_language=self.fallback_language,
                    )

        if resolved is not None:
            result = render(resolved)
        elif options.has_default_value:
            result = options.default_value
        else:
            return interpolate(key, variables)

        if isinstance(result, str) and options.post_process:
            result = self.post_processors.apply(result, options, variables)

        if isinstance(result, str):
            result = interpolate(result, variables)
        return result

    def t(self, key: str, variables: Optional[Dict[str, Any]] = None, **kwargs):
        """Shorthand for ``translate()``."""
        return self.translate(key, variables, **kwargs)

    def exists(self, key: str) -> bool:
        """Check if a key resolves in the default language.

        No fallback language, no variables, nothing logged.
        """
        return self._resolver.resolve(key, TranslationOptions(), self.language) is not None

    def get_missing_translations(self) -> List[MissingTranslation]:
        """Get missed lookups, oldest first."""
        with self._lock:
            return list(self._missing)

    def reset_missing_translations(self) -> None:
        with self._lock:
            self._missing.clear()

    def get_available_languages(self) -> List[str]:
        return self.store.languages

    def _record_missing(self, language: Optional[str], key: str) -> None:
        with self._lock:
            self._missing.append(MissingTranslation(language=language, key=key))
        logger.debug("translation_missing", key=key, language=language)


def interpolate(text: str, variables: Mapping[str, Any]) -> str:
    """Replace ``__name__`` and ``{{name}}`` placeholders with variable values.

    Only string and numeric values are substituted. The text is scanned once,
    so substituted values are never themselves interpolated. Placeholders
    naming absent variables are left as-is.
    """
    values = {
        name: stringify(value)
        for name, value in variables.items()
        if name
        and isinstance(value, (str, int, float))
        and not isinstance(value, bool)
    }
    if not values:
        return text

    names = "|".join(re.escape(name) for name in sorted(values, key=len, reverse=True))
    pattern = re.compile(rf"__({names})__|\{{\{{({names})\}}\}}")
    return pattern.sub(lambda match: values[match.group(1) or match.group(2)], text)
