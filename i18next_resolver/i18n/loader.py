"""Translation resource loading.

Discovers resources matching a path template, decodes them and merges them
into a TranslationStore.
"""

from typing import Optional

from i18next_resolver.i18n.decoders import Decoder, decoder_for
from i18next_resolver.i18n.exceptions import DecodeError, ResourceNotFoundError
from i18next_resolver.i18n.models import TranslationStore
from i18next_resolver.i18n.providers import ResourceProvider
from i18next_resolver.i18n.template import (
    LANGUAGE_PLACEHOLDER,
    NAMESPACE_PLACEHOLDER,
    PathTemplate,
)
from i18next_resolver.logging import get_module_logger

logger = get_module_logger()


class ResourceLoader:
    """Loader merging discovered resources into a TranslationStore.

    Two layouts are supported:

    - Templates with ``__lng__``/``__ns__`` placeholders: one resource per
      language (and namespace). The language and namespace are recovered
      from each resource identifier and the resource is merged into
      ``store[lng]`` or ``store[lng][ns]``.
    - Templates without placeholders: a single resource that is either
      already keyed by language (it replaces the store) or a tree merged at
      the top level of the store.

    Resources are processed in sorted identifier order, so later resources
    win conflicts deterministically. Loading is not atomic: when a resource
    fails to decode, earlier resources stay merged.

    Attributes:
        provider: ResourceProvider used to enumerate and read resources.
        decoder: Decoder applied to every resource, or None to pick one per
            resource from its extension.
    """

    def __init__(self, provider: ResourceProvider, decoder: Optional[Decoder] = None):
        self.provider = provider
        self.decoder = decoder

    def load(
        self,
        path_template: str,
        current_language: str,
        store: Optional[TranslationStore] = None,
    ) -> TranslationStore:
        """Load all resources matching a path template.

        Args:
            path_template: Template with optional __lng__/__ns__ placeholders.
            current_language: Language assumed when the template has no
                language placeholder.
            store: Store to merge into (default: a new empty store).

        Returns:
            The populated TranslationStore.

        Raises:
            PathTemplateError: If the template is malformed.
            ResourceNotFoundError: If no resource matches the template.
            DecodeError: If a resource cannot be decoded into a mapping.
        """
        template = PathTemplate.parse(path_template)
        store = store if store is not None else TranslationStore()

        pattern = template.discovery_pattern
        identifiers = sorted(self.provider.list_files(pattern))
        if not identifiers:
            logger.error("translation_resources_not_found", pattern=pattern)
            raise ResourceNotFoundError(pattern)

        for identifier in identifiers:
            translations = self._decode(identifier)

            if template.has_placeholders:
                self._merge_templated(
                    store, template, identifier, translations, current_language
                )
            elif current_language in translations:
                store.replace(translations)
            else:
                store.merge_top_level(translations)

        logger.info(
            "loaded_translations",
            template=template.template,
            file_count=len(identifiers),
            languages=store.languages,
        )
        return store

    def _decode(self, identifier: str) -> dict:
        decoder = self.decoder or decoder_for(identifier)
        try:
            text = self.provider.read_file(identifier)
        except UnicodeDecodeError as e:
            logger.error("translation_decode_error", file=identifier, error=str(e))
            raise DecodeError(str(e), identifier=identifier) from e

        try:
            return decoder.decode(text)
        except DecodeError as e:
            logger.error("translation_decode_error", file=identifier, error=e.reason)
            raise DecodeError(e.reason, identifier=identifier) from e

    def _merge_templated(
        self,
        store: TranslationStore,
        template: PathTemplate,
        identifier: str,
        translations: dict,
        current_language: str,
    ) -> None:
        captured = template.extract(identifier)
        if captured is None:
            logger.warning(
                "resource_does_not_match_template",
                file=identifier,
                template=template.template,
            )
            captured = {}

        language = captured.get(LANGUAGE_PLACEHOLDER, current_language)
        namespace = captured.get(NAMESPACE_PLACEHOLDER)

        if namespace is not None:
            store.merge_namespace(language, namespace, translations)
        else:
            store.merge_language(language, translations)

        logger.debug(
            "merged_translation_resource",
            file=identifier,
            language=language,
            namespace=namespace,
        )
