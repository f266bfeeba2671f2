"""i18n system - runtime translation resolution.

Loads nested translation resources (optionally per language and namespace)
into one store and resolves dotted keys with context/plural suffixes,
language fallback, post-processing and variable interpolation.

Main components:
- models: TranslationStore, TranslationOptions, Scalar/Lines/Tree, MissingTranslation
- template: PathTemplate tokenizer for __lng__/__ns__ resource paths
- providers/decoders: resource access and JSON/YAML decoding
- loader: ResourceLoader merging resources into a store
- resolver: Resolver walking the store
- translator: Translator service (translate, exists, missing log)
- factory: create_translator() from settings
"""

from i18next_resolver.i18n.decoders import Decoder, JsonDecoder, YamlDecoder
from i18next_resolver.i18n.exceptions import (
    DecodeError,
    I18nError,
    PathTemplateError,
    ResourceNotFoundError,
)
from i18next_resolver.i18n.factory import create_translator
from i18next_resolver.i18n.loader import ResourceLoader
from i18next_resolver.i18n.models import (
    Lines,
    MissingTranslation,
    ReservedVariable,
    Scalar,
    TranslationOptions,
    TranslationStore,
    Tree,
)
from i18next_resolver.i18n.postprocess import PostProcessorRegistry
from i18next_resolver.i18n.providers import (
    FileSystemResourceProvider,
    InMemoryResourceProvider,
    ResourceProvider,
)
from i18next_resolver.i18n.resolver import Resolver
from i18next_resolver.i18n.template import PathTemplate
from i18next_resolver.i18n.translator import Translator

__all__ = [
    "Decoder",
    "JsonDecoder",
    "YamlDecoder",
    "I18nError",
    "DecodeError",
    "PathTemplateError",
    "ResourceNotFoundError",
    "create_translator",
    "ResourceLoader",
    "Lines",
    "MissingTranslation",
    "ReservedVariable",
    "Scalar",
    "TranslationOptions",
    "TranslationStore",
    "Tree",
    "PostProcessorRegistry",
    "ResourceProvider",
    "FileSystemResourceProvider",
    "InMemoryResourceProvider",
    "Resolver",
    "PathTemplate",
    "Translator",
]
