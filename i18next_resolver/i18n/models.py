"""Translation models for the resolution engine.

Defines the translation store, the parsed view of a variable bag, the
resolved-value variants returned by the resolver and missing-translation
records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


class ReservedVariable(str, Enum):
    """Variable names with special meaning during translation.

    Every other entry of a variable bag is a plain interpolation variable.
    Reserved entries are still interpolated when their value is a string or
    number (so ``{{count}}`` renders the count).
    """

    LANGUAGE = "lng"
    CONTEXT = "context"
    COUNT = "count"
    DEFAULT_VALUE = "defaultValue"
    POST_PROCESS = "postProcess"
    SPRINTF = "sprintf"
    RETURN_OBJECT_TREES = "returnObjectTrees"


@dataclass(frozen=True)
class Scalar:
    """A single displayable string."""

    text: str


@dataclass(frozen=True)
class Lines:
    """An ordered sequence of strings, returned only when object trees are requested."""

    lines: Tuple[str, ...]


@dataclass(frozen=True)
class Tree:
    """A structured subtree (nested mapping or mixed sequence)."""

    value: Any


ResolvedValue = Union[Scalar, Lines, Tree]


@dataclass(frozen=True)
class MissingTranslation:
    """A lookup that resolved to nothing.

    Attributes:
        language: Language the lookup was made in (explicit ``lng`` or the
            default language).
        key: The dotted lookup key.
    """

    language: Optional[str]
    key: str

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"language": self.language, "key": self.key}


@dataclass(frozen=True)
class TranslationOptions:
    """Parsed view of the reserved entries of a variable bag.

    Attributes:
        language: Explicit language override (``lng``), None if absent.
        context: Context suffix selector, None if absent.
        count: Plural selector, None if absent.
        has_default_value: Whether ``defaultValue`` was supplied.
        default_value: The supplied ``defaultValue``.
        post_process: Post-processor names, in application order.
        sprintf: Arguments for the ``sprintf`` post-processor.
        return_object_trees: Whether structured results were requested.
    """

    language: Optional[str] = None
    context: Optional[str] = None
    count: Any = None
    has_default_value: bool = False
    default_value: Any = None
    post_process: Tuple[str, ...] = ()
    sprintf: Any = None
    return_object_trees: bool = False

    @classmethod
    def from_variables(cls, variables: Mapping[str, Any]) -> "TranslationOptions":
        """Build options from a variable bag.

        Args:
            variables: Variable bag as passed to ``translate``.

        Returns:
            TranslationOptions instance.
        """
        post_process = variables.get(ReservedVariable.POST_PROCESS.value)
        if post_process is None:
            names: Tuple[str, ...] = ()
        elif isinstance(post_process, str):
            names = (post_process,)
        else:
            names = tuple(str(name) for name in post_process)

        context = variables.get(ReservedVariable.CONTEXT.value)
        return cls(
            language=variables.get(ReservedVariable.LANGUAGE.value),
            context=None if context is None else str(context),
            count=variables.get(ReservedVariable.COUNT.value),
            has_default_value=ReservedVariable.DEFAULT_VALUE.value in variables,
            default_value=variables.get(ReservedVariable.DEFAULT_VALUE.value),
            post_process=names,
            sprintf=variables.get(ReservedVariable.SPRINTF.value),
            return_object_trees=variables.get(
                ReservedVariable.RETURN_OBJECT_TREES.value
            )
            is True,
        )

    @property
    def is_plural(self) -> bool:
        """True when a count is given and it is not 1."""
        if self.count is None:
            return False
        try:
            return float(self.count) != 1
        except (TypeError, ValueError):
            return True


def deep_merge(target: Dict[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``incoming`` into ``target`` in place.

    Nested mappings present on both sides are merged recursively; any other
    conflict is won by ``incoming``.

    Returns:
        The updated ``target``.
    """
    for key, value in incoming.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            deep_merge(existing, value)
        elif isinstance(value, Mapping):
            target[key] = deep_merge({}, value)
        else:
            target[key] = value
    return target


@dataclass
class TranslationStore:
    """In-memory store of loaded translations.

    Shaped ``language -> nested key tree`` or, with namespaces,
    ``language -> namespace -> nested key tree``. Merges happen only while
    loading; the resolver treats the store as read-only.

    Attributes:
        data: The raw nested mapping.
    """

    data: Dict[str, Any] = field(default_factory=dict)

    def language_tree(self, language: Optional[str]) -> Optional[Mapping[str, Any]]:
        """Get the key tree for a language.

        Args:
            language: Language code.

        Returns:
            The language's mapping, or None if the language is not loaded.
        """
        if language is None:
            return None
        tree = self.data.get(language)
        return tree if isinstance(tree, Mapping) else None

    def has_language(self, language: Optional[str]) -> bool:
        return self.language_tree(language) is not None

    @property
    def languages(self) -> List[str]:
        return [lng for lng, tree in self.data.items() if isinstance(tree, Mapping)]

    def merge_language(self, language: str, translations: Mapping[str, Any]) -> None:
        """Merge a decoded resource into ``store[language]``."""
        slot = self.data.get(language)
        if not isinstance(slot, dict):
            slot = self.data[language] = {}
        deep_merge(slot, translations)

    def merge_namespace(
        self, language: str, namespace: str, translations: Mapping[str, Any]
    ) -> None:
        """Merge a decoded resource into ``store[language][namespace]``."""
        self.merge_language(language, {namespace: translations})

    def merge_top_level(self, translations: Mapping[str, Any]) -> None:
        """Merge a decoded resource at the top level (no language keying)."""
        deep_merge(self.data, translations)

    def replace(self, translations: Mapping[str, Any]) -> None:
        """Replace the whole store with an already language-keyed resource."""
        self.data = deep_merge({}, translations)

    def clear(self) -> None:
        self.data.clear()


def is_scalar_sequence(value: Any) -> bool:
    """True for a list/tuple whose items are all non-container scalars."""
    if not isinstance(value, (list, tuple)):
        return False
    return all(
        not isinstance(item, (Mapping, list, tuple)) and item is not None
        for item in value
    )


def stringify(value: Any) -> str:
    """Render a scalar translation value as display text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render(value: ResolvedValue) -> Union[str, List[str], Any]:
    """Convert a resolved value into what ``translate`` returns to callers."""
    if isinstance(value, Scalar):
        return value.text
    if isinstance(value, Lines):
        return list(value.lines)
    return value.value

