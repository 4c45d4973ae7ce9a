"""Markup component compiler package."""

from .api import (  # noqa: F401
    compile_markup,
    compile_tree,
    dump_statements,
    parse_markup,
    render_component,
    statement_stats,
)
