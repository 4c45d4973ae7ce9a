"""Shared fixtures: a small UI object model catalog."""

import pytest

from markup_compiler.bindings import TypeCatalog
from markup_compiler.scope import NameScope
from markup_compiler.styles import StyleRegistry
from markup_compiler.values import LiteralValueCompiler

CATALOG_DATA = {
    "types": [
        {
            "name": "ui.core.Element",
            "members": [
                {"name": "Width", "value_type": "int"},
                {"name": "Height", "value_type": "int"},
                {"name": "Visible", "value_type": "bool"},
                {"name": "Tag", "value_type": "str"},
                {"name": "Id", "value_type": "str", "settable": False},
                {"name": "Refresh", "kind": "method"},
            ],
        },
        {
            "name": "ui.core.Group",
            "base": "ui.core.Element",
            "members": [
                {"name": "Layout", "value_type": "ui.layout.FlexLayout"},
                {"name": "Padding", "value_type": "int"},
                {"name": "Theme", "value_type": "ui.core.Theme", "settable": False},
                {"name": "Children", "kind": "field", "value_type": "list"},
            ],
        },
        {
            "name": "ui.layout.FlexLayout",
            "members": [
                {"name": "Gap", "value_type": "int"},
                {"name": "Direction", "value_type": "ui.Align"},
                {"name": "Margin", "value_type": "ui.layout.Spacing"},
            ],
        },
        {
            "name": "ui.layout.Spacing",
            "members": [{"name": "Left", "value_type": "int"}],
        },
        {
            "name": "ui.core.Theme",
            "members": [{"name": "Accent", "value_type": "str"}],
        },
        {
            "name": "ui.controls.Panel",
            "aliases": ["Panel"],
            "base": "ui.core.Group",
            "members": [
                {"name": "Size", "value_type": "int"},
                {"name": "Title", "value_type": "str"},
                {"name": "Align", "value_type": "ui.Align"},
            ],
        },
        {
            "name": "ui.controls.Group",
            "aliases": ["Group"],
            "base": "ui.core.Group",
        },
        {
            "name": "ui.controls.Box",
            "aliases": ["Box"],
            "base": "ui.core.Element",
            "members": [{"name": "Size", "value_type": "int"}],
        },
        {
            "name": "ui.controls.Item",
            "aliases": ["Item"],
            "base": "ui.core.Element",
        },
        {
            "name": "ui.controls.Label",
            "aliases": ["Label", "Text"],
            "base": "ui.core.Element",
            "members": [
                {"name": "Text", "value_type": "str"},
                {"name": "Tag", "value_type": "str", "settable": False},
            ],
        },
        {
            "name": "ui.controls.Button",
            "aliases": ["Button"],
            "base": "ui.core.Element",
            "members": [
                {"name": "Width", "value_type": "float"},
                {"name": "Label", "value_type": "str"},
            ],
        },
        {
            "name": "ui.misc.Spacer",
            "aliases": ["Spacer"],
        },
        {
            "name": "app.views.MainView",
            "base": "ui.core.Group",
            "members": [{"name": "Title", "value_type": "str"}],
        },
        {
            "name": "app.views.SettingsView",
            "visibility": "internal",
            "base": "ui.core.Group",
        },
    ],
    "enums": [{"name": "ui.Align", "members": ["Start", "Center", "End"]}],
}


@pytest.fixture
def catalog() -> TypeCatalog:
    return TypeCatalog.from_dict(CATALOG_DATA)


@pytest.fixture
def values(catalog) -> LiteralValueCompiler:
    return LiteralValueCompiler(catalog)


@pytest.fixture
def scope() -> NameScope:
    return NameScope()


@pytest.fixture
def styles() -> StyleRegistry:
    return StyleRegistry()


@pytest.fixture
def catalog_data() -> dict:
    return CATALOG_DATA
