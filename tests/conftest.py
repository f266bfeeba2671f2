"""Shared fixtures for translation engine tests.

Provides sample resource trees written to temporary directories and
in-memory providers for loader and translator scenarios.
"""

import json

import pytest

from i18next_resolver.i18n import InMemoryResourceProvider, Translator
from tests.factories.i18n import make_translation_tree


@pytest.fixture
def translation_tree():
    """Sample English translation tree."""
    return make_translation_tree()


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create a temporary locales directory with namespaced JSON resources.

    Returns a directory structure like:
    - locales/en/common.json
    - locales/en/errors.json
    - locales/fr/common.json
    - locales/dev/common.json
    """
    locales = tmp_path / "locales"
    resources = {
        ("en", "common"): {
            "greeting": "Hello",
            "farewell": "Goodbye {{name}}",
            "buttons": {"save": "Save", "cancel": "Cancel"},
        },
        ("en", "errors"): {"not_found": "Not found"},
        ("fr", "common"): {
            "greeting": "Bonjour",
            "buttons": {"save": "Enregistrer"},
        },
        ("dev", "common"): {"only_in_dev": "Dev only"},
    }
    for (language, namespace), data in resources.items():
        directory = locales / language
        directory.mkdir(parents=True, exist_ok=True)
        with open(directory / f"{namespace}.json", "w", encoding="utf-8") as f:
            json.dump(data, f)
    return locales


@pytest.fixture
def single_file_dir(tmp_path):
    """Create a directory holding one language-keyed translation.json."""
    data = {
        "en": {"a": {"b": "x"}, "title": "Title"},
        "fr": {"a": {"b": "y"}},
    }
    with open(tmp_path / "translation.json", "w", encoding="utf-8") as f:
        json.dump(data, f)
    return tmp_path


@pytest.fixture
def memory_provider():
    """In-memory provider with per-language translation.json resources."""
    return InMemoryResourceProvider(
        {
            "locales/en/translation.json": json.dumps(
                {"greeting": "Hello", "only_in_en": "English only"}
            ),
            "locales/dev/translation.json": json.dumps(
                {"greeting": "Hi (dev)", "only_in_dev": "Dev only"}
            ),
            "locales/fr/translation.json": json.dumps({"greeting": "Bonjour"}),
        }
    )


@pytest.fixture
def translator(translation_tree):
    """Translator with an English tree and a small dev fallback tree."""
    translator = Translator(language="en", fallback_language="dev")
    translator.add_resources("en", translation_tree)
    translator.add_resources("dev", {"fallback_only": "From dev"})
    return translator
