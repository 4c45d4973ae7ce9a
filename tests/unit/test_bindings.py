"""Tests for TypeCatalog — alias, qualified-name and member lookup."""

import json

import pytest
from pydantic import ValidationError

from markup_compiler.bindings import TypeCatalog


class TestTypeResolution:
    def test_resolve_alias(self, catalog):
        assert catalog.resolve_type("Panel").name == "ui.controls.Panel"

    def test_multiple_aliases_for_one_type(self, catalog):
        assert catalog.resolve_type("Text") is catalog.resolve_type("Label")

    def test_unknown_alias(self, catalog):
        assert catalog.resolve_type("Nope") is None

    def test_resolve_qualified(self, catalog):
        binding = catalog.resolve_qualified("ui.layout.FlexLayout")
        assert binding.module == "ui.layout"
        assert binding.short_name == "FlexLayout"

    def test_unqualified_type_rejects_catalog(self):
        with pytest.raises(ValidationError, match="module-qualified"):
            TypeCatalog.from_dict({"types": [{"name": "Spacer", "aliases": ["Spacer"]}]})

    def test_unqualified_enum_rejects_catalog(self):
        with pytest.raises(ValidationError, match="module-qualified"):
            TypeCatalog.from_dict({"enums": [{"name": "Align", "members": ["Start"]}]})

    def test_duplicate_alias_rejects_catalog(self):
        with pytest.raises(ValidationError, match="Alias 'Box'"):
            TypeCatalog.from_dict(
                {
                    "types": [
                        {"name": "a.Box", "aliases": ["Box"]},
                        {"name": "b.Box", "aliases": ["Box"]},
                    ]
                }
            )

    def test_blank_aliases_ignored(self):
        catalog = TypeCatalog.from_dict(
            {"types": [{"name": "a.A", "aliases": [" "]}, {"name": "b.B", "aliases": [" "]}]}
        )
        assert catalog.resolve_type(" ") is None

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"types": [{"name": "x.Y", "aliases": ["Y"]}]}))
        assert TypeCatalog.from_json_file(path).resolve_type("Y").name == "x.Y"


class TestMemberLookup:
    def test_inherited_member(self, catalog):
        panel = catalog.resolve_type("Panel")
        lookup = catalog.lookup_member(panel, "Width")
        assert lookup.found
        assert lookup.declaring_type == "ui.core.Element"

    def test_most_derived_member_wins(self, catalog):
        button = catalog.resolve_type("Button")
        assert catalog.resolve_member(button, "Width").value_type == "float"

    def test_missing_member(self, catalog):
        assert not catalog.lookup_member(catalog.resolve_type("Box"), "Nope").found

    def test_settable_property_filters_kind_and_setter(self, catalog):
        box = catalog.resolve_type("Box")
        assert catalog.resolve_settable_property(box, "Id") is None
        assert catalog.resolve_settable_property(box, "Refresh") is None
        assert catalog.resolve_settable_property(box, "Size").value_type == "int"

    def test_ancestry_most_derived_first(self, catalog):
        names = [b.name for b in catalog.ancestry(catalog.resolve_type("Panel"))]
        assert names == ["ui.controls.Panel", "ui.core.Group", "ui.core.Element"]

    def test_ancestry_stops_on_unknown_base_and_cycles(self):
        catalog = TypeCatalog.from_dict(
            {
                "types": [
                    {"name": "a.A", "base": "a.B"},
                    {"name": "a.B", "base": "a.A"},
                    {"name": "a.C", "base": "ext.Missing"},
                ]
            }
        )
        assert [b.name for b in catalog.ancestry(catalog.resolve_qualified("a.A"))] == [
            "a.A",
            "a.B",
        ]
        assert len(catalog.ancestry(catalog.resolve_qualified("a.C"))) == 1
