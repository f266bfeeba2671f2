"""Decoders turning raw resource text into nested mappings."""

import json
from typing import Any, Dict, Protocol, runtime_checkable

import yaml

from i18next_resolver.i18n.exceptions import DecodeError


@runtime_checkable
class Decoder(Protocol):
    """Protocol for resource decoders."""

    def decode(self, text: str) -> Dict[str, Any]:
        """Decode text into a nested mapping.

        Raises:
            DecodeError: If the text is malformed or not a mapping.
        """
        ...


class JsonDecoder:
    """Decoder for JSON resources."""

    def decode(self, text: str) -> Dict[str, Any]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(str(e)) from e
        return _require_mapping(data)


class YamlDecoder:
    """Decoder for YAML resources (safe loader only)."""

    def decode(self, text: str) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DecodeError(str(e)) from e
        return _require_mapping(data)


def _require_mapping(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"expected a mapping, got {type(data).__name__}")
    return data


_DECODERS_BY_EXTENSION = {
    ".json": JsonDecoder,
    ".yaml": YamlDecoder,
    ".yml": YamlDecoder,
}


def decoder_for(identifier: str) -> Decoder:
    """Pick a decoder from a resource identifier's extension.

    Unknown extensions decode as JSON.
    """
    lowered = identifier.lower()
    for extension, decoder_class in _DECODERS_BY_EXTENSION.items():
        if lowered.endswith(extension):
            return decoder_class()
    return JsonDecoder()
