"""Tests for the composable API functions in markup_compiler.api."""

from markup_compiler.api import (
    compile_markup,
    compile_tree,
    dump_statements,
    render_component,
    resolve_owner,
    statement_stats,
)
from markup_compiler.markup import element
from markup_compiler.statements import GeneratedUnit

SOURCE = """\
<Root Class="app.views.MainView" Title="Main">
    <Style Name="Big" Size="20"/>
    <Box Style="Big" Size="10"/>
    <Panel>
        <M.Layout><Column Gap="5"/></M.Layout>
        <Label Name="title" Text="Hi"/>
    </Panel>
    <Unknown><Box Name="hidden"/></Unknown>
</Root>
"""


class TestCompileMarkup:
    def test_returns_generated_unit(self, catalog):
        unit = compile_markup(SOURCE, catalog)
        assert isinstance(unit, GeneratedUnit)
        assert unit.owner == "app.views.MainView"

    def test_declarations(self, catalog):
        unit = compile_markup(SOURCE, catalog)
        assert [(d.name, d.type_name) for d in unit.declarations] == [
            ("title", "ui.controls.Label"),
            ("hidden", "ui.controls.Box"),
        ]

    def test_statement_order(self, catalog):
        unit = compile_markup(SOURCE, catalog)
        lines = [str(s).split("  #")[0] for s in unit.statements]
        assert lines == [
            "assign self Title 'Main'",
            "element1 = construct ui.controls.Box",
            "assign element1 Size 20",
            "assign element1 Size 10",
            "attach self element1",
            "element2 = construct ui.controls.Panel",
            "assign element2.Layout Gap 5",
            "element3 = construct ui.controls.Label",
            "assign element3 Text 'Hi'",
            "assign_field title element3",
            "attach element2 element3",
            "attach self element2",
        ]

    def test_statements_carry_source_locations(self, catalog):
        unit = compile_markup(SOURCE, catalog)
        construct_box = unit.statements[1]
        assert construct_box.source_location.start_line == 3

    def test_explicit_owner_overrides_class(self, catalog):
        unit = compile_markup(SOURCE, catalog, owner="app.views.SettingsView")
        assert unit.owner == "app.views.SettingsView"

    def test_malformed_markup_yields_empty_unit(self, catalog):
        assert compile_markup("<Root><Box></Root>", catalog).is_empty()

    def test_unknown_owner_yields_empty_unit(self, catalog):
        assert compile_markup('<Root Class="app.Nope"/>', catalog).is_empty()

    def test_missing_class_yields_empty_unit(self, catalog):
        assert compile_markup("<Root/>", catalog).is_empty()


class TestHelpers:
    def test_resolve_owner_from_class_attribute(self, catalog):
        tree = element("Root", Class=" app.views.MainView ")
        assert resolve_owner(tree, catalog).name == "app.views.MainView"

    def test_compile_tree_none(self, catalog):
        assert compile_tree(None, catalog).is_empty()

    def test_dump_statements(self, catalog):
        dump = dump_statements(SOURCE, catalog)
        assert dump.splitlines()[0] == "  decl title: ui.controls.Label"
        assert "construct ui.controls.Panel" in dump

    def test_render_component(self, catalog):
        code = render_component(SOURCE, catalog)
        assert "class MainViewComponent:" in code
        assert "        self.add(element2)" in code

    def test_render_component_failure_is_empty_string(self, catalog):
        assert render_component("<Root", catalog) == ""

    def test_statement_stats(self, catalog):
        assert statement_stats(SOURCE, catalog) == {
            "ASSIGN": 5,
            "CONSTRUCT": 3,
            "ATTACH": 3,
            "ASSIGN_FIELD": 1,
        }
