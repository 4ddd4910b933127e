"""Tests for nostrkinds.catalog.registry."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from nostrkinds.catalog.registry import (
    DEFAULT_CATALOG_PATH,
    Registry,
    default_registry,
    load_registry,
)
from nostrkinds.core.exceptions import CatalogError
from nostrkinds.models.constants import ContentType, EventCategory
from nostrkinds.models.kind_spec import EventKindSpec


# ============================================================================
# Packaged catalog
# ============================================================================


class TestPackagedCatalog:
    def test_file_is_shipped(self) -> None:
        assert DEFAULT_CATALOG_PATH.is_file()

    def test_all_base_kinds_loaded(self, registry: Registry) -> None:
        assert len(registry) == 71

    def test_catalog_order_kept(self, registry: Registry) -> None:
        assert registry.kinds()[:10] == (0, 1, 3, 4, 5, 6, 7, 8, 9, 2)
        assert registry.kinds()[-1] == 39002

    def test_default_registry_is_shared(self) -> None:
        assert default_registry() is default_registry()

    def test_category_breakdown(self, registry: Registry) -> None:
        assert registry.category_breakdown() == {
            "regular": 40,
            "replaceable": 13,
            "ephemeral": 0,
            "addressable": 18,
        }

    def test_declared_categories_match_kind_ranges(self, registry: Registry) -> None:
        for spec in registry:
            assert spec.category is EventCategory.for_kind(spec.kind), spec.kind

    def test_profile_reference(self, registry: Registry) -> None:
        spec = registry.lookup(0)
        assert spec is not None
        assert spec.required_tags == ()
        assert spec.content_schema is not None
        assert spec.content_schema.type is ContentType.JSON
        assert spec.related_kinds == (3, 10002)

    def test_reaction_reference(self, registry: Registry) -> None:
        spec = registry.lookup(7)
        assert spec is not None
        assert spec.required_tag_names == ("e", "p")
        assert "k" in spec.optional_tag_names

    def test_contacts_content_is_empty(self, registry: Registry) -> None:
        spec = registry.lookup(3)
        assert spec is not None
        assert spec.required_tag_names == ("p",)
        assert spec.content_schema is not None
        assert spec.content_schema.type is ContentType.EMPTY

    def test_long_form_requires_d(self, registry: Registry) -> None:
        spec = registry.lookup(30023)
        assert spec is not None
        assert spec.required_tag_names == ("d",)

    def test_every_spec_fully_populated(self, registry: Registry) -> None:
        for spec in registry:
            assert spec.summary
            assert spec.use_cases
            assert spec.implementation_notes
            assert spec.common_gotchas
            assert spec.content_schema is not None
            assert spec.basic_example is not None
            assert spec.kind not in spec.related_kinds


# ============================================================================
# Lookup and search
# ============================================================================


class TestLookup:
    def test_known(self, registry: Registry) -> None:
        spec = registry.lookup(7)
        assert spec is not None
        assert spec.name == "Reaction"

    def test_unknown_returns_none(self, registry: Registry) -> None:
        assert registry.lookup(42424) is None

    def test_contains(self, registry: Registry) -> None:
        assert 30023 in registry
        assert 42424 not in registry
        assert "7" not in registry

    def test_iter_yields_specs(self, registry: Registry) -> None:
        assert all(isinstance(spec, EventKindSpec) for spec in registry)

    def test_repr(self, registry: Registry) -> None:
        assert repr(registry) == "Registry(kinds=71)"


class TestSearch:
    def test_by_name(self, registry: Registry) -> None:
        assert [s.kind for s in registry.search("zap")] == [9734, 9735]

    def test_case_insensitive(self, registry: Registry) -> None:
        assert registry.search("REACTION") == registry.search("reaction")

    def test_by_kind_number(self, registry: Registry) -> None:
        assert 30023 in [s.kind for s in registry.search("30023")]

    def test_by_nip(self, registry: Registry) -> None:
        kinds = [s.kind for s in registry.search("nip-25")]
        assert 7 in kinds
        assert 17 in kinds

    def test_blank_query_returns_all(self, registry: Registry) -> None:
        assert len(registry.search("   ")) == len(registry)

    def test_no_match(self, registry: Registry) -> None:
        assert registry.search("no-such-kind-anywhere") == []


class TestSearchByUsage:
    def test_use_case(self, registry: Registry) -> None:
        assert 0 in [s.kind for s in registry.search_by_usage("profile")]

    def test_summary(self, mini_registry: Registry) -> None:
        assert [s.kind for s in mini_registry.search_by_usage("basic text")] == [1]

    def test_no_match(self, registry: Registry) -> None:
        assert registry.search_by_usage("quantum teleportation") == []


class TestByCategory:
    def test_addressable(self, registry: Registry) -> None:
        kinds = [s.kind for s in registry.by_category(EventCategory.ADDRESSABLE)]
        assert len(kinds) == 18
        assert all(30000 <= k < 40000 for k in kinds)

    def test_string_category(self, registry: Registry) -> None:
        assert registry.by_category("replaceable") == registry.by_category(
            EventCategory.REPLACEABLE
        )

    def test_empty_category(self, registry: Registry) -> None:
        assert registry.by_category("ephemeral") == []

    def test_invalid_category(self, registry: Registry) -> None:
        with pytest.raises(ValueError):
            registry.by_category("permanent")


class TestRelated:
    def test_related_in_catalog_order(self, registry: Registry) -> None:
        assert [s.kind for s in registry.related(0)] == [3, 10002]

    def test_unknown_kind(self, registry: Registry) -> None:
        assert registry.related(42424) == []

    def test_uncatalogued_targets_skipped(self) -> None:
        spec = EventKindSpec(kind=1, name="Note", category="regular", related_kinds=(7, 99))
        assert Registry([spec]).related(1) == []


class TestAggregates:
    def test_implementation_notes(self, registry: Registry) -> None:
        notes = registry.implementation_notes()
        assert len(notes) == 71
        assert notes[0]["kind"] == 0
        assert "Content must be valid JSON" in notes[0]["notes"]

    def test_common_gotchas(self, registry: Registry) -> None:
        gotchas = registry.common_gotchas()
        assert gotchas[0]["name"] == "User Metadata"
        assert gotchas[0]["gotchas"]


# ============================================================================
# Construction and loading
# ============================================================================


class TestRegistryInit:
    def test_duplicate_kind_rejected(self) -> None:
        spec = EventKindSpec(kind=1, name="Note", category="regular")
        with pytest.raises(ValueError, match="duplicate kind 1"):
            Registry([spec, spec])

    def test_empty_registry(self) -> None:
        registry = Registry([])
        assert len(registry) == 0
        assert registry.category_breakdown() == {
            "regular": 0,
            "replaceable": 0,
            "ephemeral": 0,
            "addressable": 0,
        }

    def test_no_attribute_assignment(self) -> None:
        registry = Registry([])
        with pytest.raises(AttributeError):
            registry.extra = 1  # type: ignore[attr-defined]


class TestLoadRegistry:
    def test_custom_catalog(self, mini_registry: Registry) -> None:
        assert mini_registry.kinds() == (1, 7, 10000)
        note = mini_registry.lookup(1)
        assert note is not None
        assert note.summary == "Basic text post"
        assert note.related_kinds == (7,)

    def test_derived_schemas(self, mini_registry: Registry) -> None:
        mute = mini_registry.lookup(10000)
        assert mute is not None
        assert mute.content_schema is not None
        assert mute.content_schema.type is ContentType.EMPTY

    def test_str_path(self, mini_catalog_path: Path) -> None:
        assert len(load_registry(str(mini_catalog_path))) == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="cannot read catalog"):
            load_registry(tmp_path / "missing.yaml")

    def test_bad_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("kinds: [unclosed\n", encoding="utf-8")
        with pytest.raises(CatalogError, match="cannot read catalog"):
            load_registry(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("kinds:\n- kind: 1\n  name: Note\n", encoding="utf-8")
        with pytest.raises(CatalogError, match="invalid catalog"):
            load_registry(path)

    def test_orphan_reference(self, tmp_path: Path) -> None:
        path = tmp_path / "orphan.yaml"
        path.write_text(
            "kinds:\n- {kind: 1, name: Note, category: regular}\nreferences:\n- {kind: 2}\n",
            encoding="utf-8",
        )
        with pytest.raises(CatalogError, match="has no base entry"):
            load_registry(path)

    def test_category_mismatch_logged(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "mismatch.yaml"
        path.write_text("kinds:\n- {kind: 10000, name: Mutes, category: regular}\n", "utf-8")
        with caplog.at_level(logging.WARNING, logger="nostrkinds.catalog.registry"):
            registry = load_registry(path)

        assert len(registry) == 1
        assert "catalog_category_mismatch kind=10000" in caplog.text
