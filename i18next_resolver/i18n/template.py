"""Resource path templates.

A path template names where translation resources live and may embed a
language placeholder (``__lng__``) and a namespace placeholder (``__ns__``)::

    locales/__lng__/__ns__.json
    locales/__lng__/            # -> locales/__lng__/translation.json

The template is tokenized once into literal and placeholder segments. The
segments give both the discovery glob (placeholders become ``*``) and the
matcher that recovers ``lng``/``ns`` from a discovered file identifier.
"""

import fnmatch
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from i18next_resolver.i18n.exceptions import PathTemplateError

LANGUAGE_PLACEHOLDER = "lng"
NAMESPACE_PLACEHOLDER = "ns"
DEFAULT_RESOURCE_FILENAME = "translation.json"
RESOURCE_EXTENSIONS = (".json", ".yaml", ".yml")

_PLACEHOLDER_PATTERN = re.compile(
    rf"__({LANGUAGE_PLACEHOLDER}|{NAMESPACE_PLACEHOLDER})__"
)
_GLOB_WILDCARD = "*"
_GLOB_MAGIC = re.compile(r"[*?[]")
# A placeholder value never spans directories, same as the glob wildcard.
_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    name: str


Segment = Union[Literal, Placeholder]


@dataclass(frozen=True)
class PathTemplate:
    """A tokenized resource path template.

    Attributes:
        template: The template string, with the default resource filename
            appended when it had no recognized extension.
        segments: Literal and placeholder segments, in order.
    """

    template: str
    segments: Tuple[Segment, ...]

    @classmethod
    def parse(cls, template: str) -> "PathTemplate":
        """Tokenize a template string.

        Args:
            template: Path template (e.g. "locales/__lng__/__ns__.json").

        Returns:
            PathTemplate instance.

        Raises:
            PathTemplateError: If the template repeats a placeholder.
        """
        if not template.lower().endswith(RESOURCE_EXTENSIONS):
            template += DEFAULT_RESOURCE_FILENAME

        segments: List[Segment] = []
        seen = set()
        position = 0
        for match in _PLACEHOLDER_PATTERN.finditer(template):
            name = match.group(1)
            if name in seen:
                raise PathTemplateError(
                    f"Placeholder __{name}__ appears more than once in {template}"
                )
            seen.add(name)
            if match.start() > position:
                segments.append(Literal(template[position : match.start()]))
            segments.append(Placeholder(name))
            position = match.end()
        if position < len(template):
            segments.append(Literal(template[position:]))

        return cls(template=template, segments=tuple(segments))

    @property
    def has_placeholders(self) -> bool:
        return any(isinstance(segment, Placeholder) for segment in self.segments)

    @property
    def placeholders(self) -> List[str]:
        return [s.name for s in self.segments if isinstance(s, Placeholder)]

    @property
    def has_language(self) -> bool:
        return LANGUAGE_PLACEHOLDER in self.placeholders

    @property
    def has_namespace(self) -> bool:
        return NAMESPACE_PLACEHOLDER in self.placeholders

    @property
    def discovery_pattern(self) -> str:
        """Glob pattern matching every resource the template can name."""
        return "".join(
            segment.text if isinstance(segment, Literal) else _GLOB_WILDCARD
            for segment in self.segments
        )

    def extract(self, identifier: str) -> Optional[Dict[str, str]]:
        """Recover placeholder values from a concrete resource identifier.

        Placeholders match greedily; each value is non-empty and contains no
        path separator.

        Args:
            identifier: File identifier returned by the resource provider.

        Returns:
            Mapping of placeholder name to value, or None when the identifier
            does not fit the template.
        """
        return _match(self.segments, identifier, {})

    def __str__(self) -> str:
        return self.template


def _match(
    segments: Tuple[Segment, ...], text: str, captured: Dict[str, str]
) -> Optional[Dict[str, str]]:
    if not segments:
        return captured if not text else None

    head, rest = segments[0], segments[1:]
    if isinstance(head, Literal):
        if not _GLOB_MAGIC.search(head.text):
            if not text.startswith(head.text):
                return None
            return _match(rest, text[len(head.text) :], captured)

        # Literal containing glob wildcards of its own (e.g. "*/__lng__.json")
        for end in range(len(text), -1, -1):
            if fnmatch.fnmatchcase(text[:end], head.text):
                result = _match(rest, text[end:], captured)
                if result is not None:
                    return result
        return None

    limit = len(text)
    for separator in _SEPARATORS:
        index = text.find(separator)
        if index != -1:
            limit = min(limit, index)

    for end in range(limit, 0, -1):
        result = _match(rest, text[end:], {**captured, head.name: text[:end]})
        if result is not None:
            return result
    return None
