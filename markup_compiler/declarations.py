"""Field declarations for named markup nodes."""

from __future__ import annotations

import logging

from .bindings import TypeCatalog
from .markup import Element, is_common_element
from .scope import NameScope
from .statements import FieldDeclaration

logger = logging.getLogger(__name__)


class DeclarationEmitter:
    """Walks the tree pre-order and declares one field per first-seen ``Name``.

    Style blocks and member blocks are skipped with their subtrees.  Nodes
    whose tag does not resolve declare nothing themselves, but their
    descendants are still visited.
    """

    def __init__(self, catalog: TypeCatalog, scope: NameScope):
        self._catalog = catalog
        self._scope = scope

    def emit(self, tree: Element) -> list[FieldDeclaration]:
        declarations: list[FieldDeclaration] = []
        self._declare_children(tree, declarations)
        return declarations

    def _declare_children(self, node: Element, out: list[FieldDeclaration]) -> None:
        for child in node.children:
            if not is_common_element(child):
                continue
            self._declare(child, out)
            self._declare_children(child, out)

    def _declare(self, node: Element, out: list[FieldDeclaration]) -> None:
        name = node.name
        if not name or not self._scope.accepts(name):
            return
        binding = self._catalog.resolve_type(node.tag)
        if binding is None:
            logger.debug("No declaration for '%s': unknown tag <%s>", name, node.tag)
            return
        if not self._scope.claim(name):
            logger.debug("Duplicate Name '%s' on <%s>; keeping first", name, node.tag)
            return
        out.append(FieldDeclaration(name=name, type_name=binding.name))
