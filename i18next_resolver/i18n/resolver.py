"""Key resolution against a TranslationStore.

The resolver locates the most specific value for a dotted key. It reads the
store and never mutates it; it neither logs misses nor applies fallbacks,
which is the Translator's job.
"""

import copy
from typing import Any, Mapping, Optional

from i18next_resolver.i18n.models import (
    Lines,
    ResolvedValue,
    Scalar,
    TranslationOptions,
    TranslationStore,
    Tree,
    is_scalar_sequence,
    stringify,
)

KEY_SEPARATOR = "."
CONTEXT_SEPARATOR = "_"
PLURAL_SUFFIX = "_plural"


class Resolver:
    """Resolves dotted keys to ResolvedValue variants.

    Resolution steps:
    1. Pick the language tree: explicit ``lng`` if loaded, else the default
       language if loaded, else an empty tree.
    2. Walk the key segments. Every segment but the last must name a nested
       mapping.
    3. At the last segment, apply the context suffix, then the plural suffix.
    4. Coerce the value: scalars become Scalar, scalar sequences are joined
       with newlines (or kept as Lines when object trees are requested),
       other structures are returned as Tree (a copy) only when requested.

    Attributes:
        store: TranslationStore to read from.
    """

    def __init__(self, store: TranslationStore):
        self.store = store

    def resolve(
        self,
        key: str,
        options: TranslationOptions,
        default_language: Optional[str],
    ) -> Optional[ResolvedValue]:
        """Resolve a key.

        Args:
            key: Dotted lookup key (e.g. "common.buttons.save").
            options: Parsed variable bag.
            default_language: Language used when no loaded ``lng`` is given.

        Returns:
            The resolved value, or None when the key does not resolve.
        """
        tree = self._language_tree(options.language, default_language)
        value = self._lookup(tree, key.split(KEY_SEPARATOR), options)
        if value is None:
            return None
        return self._coerce(value, options)

    def _language_tree(
        self, language: Optional[str], default_language: Optional[str]
    ) -> Mapping[str, Any]:
        if self.store.has_language(language):
            return self.store.language_tree(language)
        if self.store.has_language(default_language):
            return self.store.language_tree(default_language)
        return {}

    def _lookup(
        self, tree: Mapping[str, Any], segments: list, options: TranslationOptions
    ) -> Any:
        position = tree
        for index, segment in enumerate(segments):
            if not segment or segment not in position:
                return None

            if index < len(segments) - 1:
                position = position[segment]
                if not isinstance(position, Mapping):
                    return None
                continue

            name = self._suffixed_name(position, segment, options)
            return position[name]
        return None

    @staticmethod
    def _suffixed_name(
        position: Mapping[str, Any], name: str, options: TranslationOptions
    ) -> str:
        if options.context is not None:
            candidate = f"{name}{CONTEXT_SEPARATOR}{options.context}"
            if candidate in position:
                name = candidate

        if options.is_plural:
            counted = f"{name}{PLURAL_SUFFIX}_{_count_label(options.count)}"
            if counted in position:
                return counted
            generic = f"{name}{PLURAL_SUFFIX}"
            if generic in position:
                return generic

        return name

    @staticmethod
    def _coerce(value: Any, options: TranslationOptions) -> Optional[ResolvedValue]:
        if isinstance(value, (Mapping, list, tuple)):
            if options.return_object_trees:
                if is_scalar_sequence(value):
                    return Lines(tuple(stringify(item) for item in value))
                return Tree(copy.deepcopy(value))
            if is_scalar_sequence(value):
                return Scalar("\n".join(stringify(item) for item in value))
            return None
        return Scalar(stringify(value))


def _count_label(count: Any) -> str:
    """Render a count for a ``_plural_<count>`` key; whole floats drop ``.0``."""
    if isinstance(count, float) and count.is_integer():
        return str(int(count))
    return str(count)
