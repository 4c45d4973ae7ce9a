"""UnitAssembler — one markup document + owner type → GeneratedUnit."""

from __future__ import annotations

import logging

from .bindings import TypeBinding, TypeCatalog
from .config import CompilerConfig
from .declarations import DeclarationEmitter
from .emitter import InitializationEmitter
from .markup import Element
from .scope import NameScope
from .statements import GeneratedUnit
from .styles import StyleRegistry
from .values import LiteralValueCompiler, ValueCompiler

logger = logging.getLogger(__name__)


class UnitAssembler:
    """Runs styles → declarations → initialization over one tree.

    The assembler itself is stateless between calls: every ``compile``
    builds its own ``NameScope`` and ``StyleRegistry``, so one instance can
    serve concurrent compilations of independent documents.
    """

    def __init__(
        self,
        catalog: TypeCatalog,
        values: ValueCompiler | None = None,
        config: CompilerConfig = CompilerConfig(),
    ):
        self._catalog = catalog
        self._values = values or LiteralValueCompiler(catalog)
        self._config = config

    def compile(self, tree: Element | None, owner: TypeBinding | None) -> GeneratedUnit:
        if tree is None or owner is None:
            logger.warning(
                "Nothing to compile: missing %s", "tree" if tree is None else "owner type"
            )
            return GeneratedUnit.empty()
        try:
            return self._assemble(tree, owner)
        except Exception:
            logger.exception("Compilation of %s aborted", owner.name)
            return GeneratedUnit.empty()

    def _assemble(self, tree: Element, owner: TypeBinding) -> GeneratedUnit:
        scope = NameScope(
            variable_prefix=self._config.variable_prefix,
            reserved=frozenset(
                {self._config.initializer_name, self._config.latch_name}
            ),
        )
        styles = StyleRegistry()
        styles.collect(tree)

        declarations = DeclarationEmitter(self._catalog, scope).emit(tree)
        emitter = InitializationEmitter(self._catalog, self._values, styles, scope)
        statements = emitter.emit(owner, tree, self._config.owner_target)

        logger.info(
            "Compiled %s: %d declaration(s), %d statement(s)",
            owner.name,
            len(declarations),
            len(statements),
        )
        return GeneratedUnit(
            owner=owner.name,
            visibility=owner.visibility,
            declarations=tuple(declarations),
            statements=tuple(statements),
        )
