"""Demo: compile a small markup document and show statements and generated source."""

import sys

from markup_compiler.api import compile_markup, statement_stats
from markup_compiler.bindings import TypeCatalog
from markup_compiler.writer import SourceWriter

CATALOG = TypeCatalog.from_dict(
    {
        "types": [
            {
                "name": "ui.core.Element",
                "members": [
                    {"name": "Width", "value_type": "int"},
                    {"name": "Visible", "value_type": "bool"},
                ],
            },
            {
                "name": "ui.core.Group",
                "base": "ui.core.Element",
                "members": [{"name": "Layout", "value_type": "ui.layout.FlexLayout"}],
            },
            {
                "name": "ui.layout.FlexLayout",
                "members": [{"name": "Gap", "value_type": "int"}],
            },
            {
                "name": "ui.controls.Panel",
                "aliases": ["Panel"],
                "base": "ui.core.Group",
            },
            {
                "name": "ui.controls.Label",
                "aliases": ["Label"],
                "base": "ui.core.Element",
                "members": [{"name": "Text", "value_type": "str"}],
            },
            {"name": "app.views.MainView", "base": "ui.core.Group"},
        ]
    }
)

SOURCE = """\
<Root Class="app.views.MainView" Width="640">
    <Style Name="Wide" Width="300"/>
    <Panel Style="Wide">
        <M.Layout><Column Gap="8"/></M.Layout>
        <Label Name="title" Text="Hello" Width="120"/>
        <Label Text="World" Visible="false"/>
    </Panel>
</Root>
"""


def main():
    print("=" * 60)
    print("SOURCE:")
    print(SOURCE)

    unit = compile_markup(SOURCE, CATALOG)
    if unit.is_empty():
        print("Compilation produced no output", file=sys.stderr)
        sys.exit(1)

    print("=" * 60)
    print("STATEMENTS:")
    print("=" * 60)
    for decl in unit.declarations:
        print(f"  decl {decl.name}: {decl.type_name}")
    for stmt in unit.statements:
        print(f"  {stmt}")

    print("=" * 60)
    print("GENERATED SOURCE:")
    print("=" * 60)
    print(SourceWriter().render(unit))

    print("Stats:", statement_stats(SOURCE, CATALOG))


if __name__ == "__main__":
    main()
