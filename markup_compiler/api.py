"""Composable API functions for the markup compiler pipeline.

Each function corresponds to a CLI workflow (--statements-only, --stats,
default source output) but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging

from .assembler import UnitAssembler
from .bindings import TypeBinding, TypeCatalog
from .config import CompilerConfig
from .markup import Element
from .parser import MarkupParser, TreeSitterParserFactory
from .statements import GeneratedUnit
from .stats import count_kinds
from .values import ValueCompiler
from .writer import SourceWriter
from . import constants

logger = logging.getLogger(__name__)


def parse_markup(source: str) -> Element | None:
    """Parse markup text into an Element tree, or ``None`` when malformed."""
    return MarkupParser(TreeSitterParserFactory()).try_parse(source)


def resolve_owner(
    tree: Element, catalog: TypeCatalog, owner: str = ""
) -> TypeBinding | None:
    """Resolve the owning type from *owner* or the root ``Class`` attribute."""
    name = owner or tree.attribute_value(constants.CLASS_ATTRIBUTE).strip()
    if not name:
        logger.warning("Root <%s> has no %s attribute", tree.tag, constants.CLASS_ATTRIBUTE)
        return None
    binding = catalog.resolve_qualified(name)
    if binding is None:
        logger.warning("Owner type '%s' is not in the catalog", name)
    return binding


def compile_tree(
    tree: Element | None,
    catalog: TypeCatalog,
    owner: str = "",
    values: ValueCompiler | None = None,
    config: CompilerConfig = CompilerConfig(),
) -> GeneratedUnit:
    """Compile an already-parsed tree; empty unit on any document-level failure."""
    if tree is None:
        return GeneratedUnit.empty()
    binding = resolve_owner(tree, catalog, owner)
    return UnitAssembler(catalog, values, config).compile(tree, binding)


def compile_markup(
    source: str,
    catalog: TypeCatalog,
    owner: str = "",
    values: ValueCompiler | None = None,
    config: CompilerConfig = CompilerConfig(),
) -> GeneratedUnit:
    """Parse and compile markup text to a GeneratedUnit.

    Args:
        source: The markup document text.
        catalog: Type catalog used to resolve tags, members and the owner.
        owner: Qualified owner type name; defaults to the root ``Class``.
        values: Value compiler; defaults to ``LiteralValueCompiler``.
        config: Code-shape settings.

    Returns:
        The generated unit, empty when the document cannot be compiled.
    """
    logger.info("Compiling markup (%d chars)", len(source))
    return compile_tree(parse_markup(source), catalog, owner, values, config)


def dump_statements(source: str, catalog: TypeCatalog, owner: str = "") -> str:
    """Compile markup and return a human-readable statement listing."""
    unit = compile_markup(source, catalog, owner)
    lines = [f"  decl {d.name}: {d.type_name}" for d in unit.declarations]
    lines.extend(f"  {stmt}" for stmt in unit.statements)
    return "\n".join(lines)


def render_component(
    source: str,
    catalog: TypeCatalog,
    owner: str = "",
    config: CompilerConfig = CompilerConfig(),
) -> str:
    """Compile markup and render the component module; "" on failure."""
    unit = compile_markup(source, catalog, owner, config=config)
    return SourceWriter(config).render(unit)


def statement_stats(source: str, catalog: TypeCatalog, owner: str = "") -> dict[str, int]:
    """Compile markup and return statement kind frequency counts."""
    return count_kinds(compile_markup(source, catalog, owner).statements)
