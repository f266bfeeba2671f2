"""Tests for i18next_resolver.i18n.loader module."""

import json

import pytest
import yaml

from i18next_resolver.i18n import (
    DecodeError,
    FileSystemResourceProvider,
    InMemoryResourceProvider,
    PathTemplateError,
    ResourceLoader,
    ResourceNotFoundError,
    TranslationStore,
    YamlDecoder,
)


class TestResourceLoaderTemplated:
    """Tests for templates with __lng__/__ns__ placeholders."""

    def test_load_languages_and_namespaces(self, temp_locales_dir):
        """Each resource lands in store[lng][ns]."""
        loader = ResourceLoader(FileSystemResourceProvider())
        store = loader.load(str(temp_locales_dir / "__lng__" / "__ns__.json"), "en")

        assert sorted(store.languages) == ["dev", "en", "fr"]
        assert store.data["en"]["common"]["greeting"] == "Hello"
        assert store.data["en"]["errors"]["not_found"] == "Not found"
        assert store.data["fr"]["common"]["buttons"]["save"] == "Enregistrer"

    def test_load_language_only(self, memory_provider):
        """Without __ns__ resources merge directly into store[lng]."""
        loader = ResourceLoader(memory_provider)
        store = loader.load("locales/__lng__/", "en")

        assert store.data["en"] == {"greeting": "Hello", "only_in_en": "English only"}
        assert store.data["fr"] == {"greeting": "Bonjour"}

    def test_load_namespace_only_uses_current_language(self):
        """Without __lng__ the current language is assumed."""
        provider = InMemoryResourceProvider(
            {
                "ns/common.json": json.dumps({"a": "1"}),
                "ns/errors.json": json.dumps({"b": "2"}),
            }
        )
        store = ResourceLoader(provider).load("ns/__ns__.json", "de")

        assert store.data == {"de": {"common": {"a": "1"}, "errors": {"b": "2"}}}

    def test_same_slot_merges_in_sorted_order(self):
        """Resources for the same language merge; later identifiers win."""
        provider = InMemoryResourceProvider(
            {
                "b/en.json": json.dumps({"shared": "from b", "only_b": "b"}),
                "a/en.json": json.dumps({"shared": "from a", "only_a": "a"}),
            }
        )
        loader = ResourceLoader(provider)
        store = loader.load("*/__lng__.json", "en")

        assert store.data["en"] == {
            "shared": "from b",
            "only_a": "a",
            "only_b": "b",
        }

    def test_same_namespace_merges_nested_siblings(self):
        """Nested siblings from separate resources coexist."""
        provider = InMemoryResourceProvider(
            {
                "one/en/app.json": json.dumps({"buttons": {"save": "Save"}}),
                "two/en/app.json": json.dumps({"buttons": {"cancel": "Cancel"}}),
            }
        )
        store = ResourceLoader(provider).load("*/__lng__/__ns__.json", "en")

        assert store.data["en"]["app"]["buttons"] == {
            "save": "Save",
            "cancel": "Cancel",
        }

    def test_merges_into_existing_store(self, memory_provider):
        """An existing store is extended rather than replaced."""
        store = TranslationStore(data={"en": {"kept": "yes"}})
        ResourceLoader(memory_provider).load("locales/__lng__/", "en", store=store)

        assert store.data["en"]["kept"] == "yes"
        assert store.data["en"]["greeting"] == "Hello"

    def test_yaml_resources(self, tmp_path):
        """YAML resources are decoded by extension."""
        with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
            yaml.dump({"greeting": "Hello"}, f)

        store = ResourceLoader(FileSystemResourceProvider()).load(
            str(tmp_path / "__lng__.yml"), "en"
        )
        assert store.data == {"en": {"greeting": "Hello"}}

    def test_injected_decoder(self):
        """An injected decoder is used for every resource."""
        provider = InMemoryResourceProvider({"en.json": "greeting: Hello\n"})
        store = ResourceLoader(provider, decoder=YamlDecoder()).load("__lng__.json", "en")
        assert store.data == {"en": {"greeting": "Hello"}}


class TestResourceLoaderSingleFile:
    """Tests for templates without placeholders."""

    def test_language_keyed_file_replaces_store(self, single_file_dir):
        """A resource keyed by the current language becomes the store."""
        store = TranslationStore(data={"old": {"a": "b"}})
        ResourceLoader(FileSystemResourceProvider()).load(
            str(single_file_dir) + "/", "en", store=store
        )

        assert store.data == {
            "en": {"a": {"b": "x"}, "title": "Title"},
            "fr": {"a": {"b": "y"}},
        }

    def test_flat_file_merges_at_top_level(self):
        """A resource without the current language merges at the top level."""
        provider = InMemoryResourceProvider({"all.json": json.dumps({"fr": {"a": "b"}})})
        store = TranslationStore(data={"de": {"c": "d"}})
        ResourceLoader(provider).load("all.json", "en", store=store)

        assert store.data == {"de": {"c": "d"}, "fr": {"a": "b"}}


class TestResourceLoaderErrors:
    """Tests for loader failures."""

    def test_no_match_raises(self, tmp_path):
        """ResourceNotFoundError names the discovery pattern."""
        loader = ResourceLoader(FileSystemResourceProvider())
        with pytest.raises(ResourceNotFoundError) as exc_info:
            loader.load(str(tmp_path) + "/__lng__/", "en")
        assert exc_info.value.pattern == str(tmp_path / "*/translation.json")

    def test_invalid_json_names_file(self):
        """DecodeError carries the offending identifier."""
        provider = InMemoryResourceProvider(
            {"en.json": json.dumps({"a": "b"}), "fr.json": '{"broken": '}
        )
        with pytest.raises(DecodeError) as exc_info:
            ResourceLoader(provider).load("__lng__.json", "en")
        assert exc_info.value.identifier == "fr.json"
        assert "fr.json" in str(exc_info.value)

    def test_earlier_files_stay_merged(self):
        """Resources merged before a failure remain in the store."""
        provider = InMemoryResourceProvider(
            {"en.json": json.dumps({"a": "b"}), "fr.json": "not json"}
        )
        store = TranslationStore()
        with pytest.raises(DecodeError):
            ResourceLoader(provider).load("__lng__.json", "en", store=store)
        assert store.data == {"en": {"a": "b"}}

    def test_non_mapping_resource(self):
        """A resource that is not a mapping fails to decode."""
        provider = InMemoryResourceProvider({"en.json": '"just a string"'})
        with pytest.raises(DecodeError):
            ResourceLoader(provider).load("__lng__.json", "en")

    def test_bad_template(self):
        """Repeated placeholders are rejected before discovery."""
        with pytest.raises(PathTemplateError):
            ResourceLoader(InMemoryResourceProvider()).load("__ns__/__ns__.json", "en")

    def test_undecodable_bytes_name_file(self, tmp_path):
        """Bytes that are not valid in the provider's encoding raise DecodeError."""
        (tmp_path / "translation.json").write_bytes(b'{"a": "\xff\xfe"}')

        with pytest.raises(DecodeError) as exc_info:
            ResourceLoader(FileSystemResourceProvider()).load(str(tmp_path) + "/", "en")
        assert exc_info.value.identifier == str(tmp_path / "translation.json")

    def test_unknown_placeholder_matches_nothing(self, memory_provider):
        """__lang__ is not a wildcard, so per-language resources are not found."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            ResourceLoader(memory_provider).load("locales/__lang__/", "en")
        assert exc_info.value.pattern == "locales/__lang__/translation.json"
