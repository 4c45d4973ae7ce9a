"""InitializationEmitter — markup element tree → ordered initialization statements.

For each element the emitter produces, in order:

1. statements for ``M.<member>`` blocks, which configure an existing
   sub-object of the target in place;
2. one ``ASSIGN`` per representable attribute, style-derived attributes
   first so the element's own literals override them;
3. for every constructible child: ``CONSTRUCT``, the child's own
   statements, ``ASSIGN_FIELD`` when its ``Name`` was declared, and finally
   ``ATTACH`` into the target.
"""

from __future__ import annotations

import logging

from .bindings import TypeBinding, TypeCatalog
from .markup import (
    Attribute,
    Element,
    is_common_attribute,
    is_common_element,
    is_member_block,
    member_block_name,
)
from .scope import NameScope
from .statements import Statement, assign, assign_field, attach, construct
from .styles import StyleRegistry
from .values import ValueCompiler
from . import constants

logger = logging.getLogger(__name__)


class InitializationEmitter:
    def __init__(
        self,
        catalog: TypeCatalog,
        values: ValueCompiler,
        styles: StyleRegistry,
        scope: NameScope,
    ):
        self._catalog = catalog
        self._values = values
        self._styles = styles
        self._scope = scope

    # ── entry point ──────────────────────────────────────────────

    def emit(self, binding: TypeBinding, node: Element, target: str) -> list[Statement]:
        return (
            self._emit_member_blocks(binding, node, target)
            + self._emit_assignments(binding, node, target)
            + self._emit_children(node, target)
        )

    # ── member blocks ────────────────────────────────────────────

    def _emit_member_blocks(
        self, binding: TypeBinding, node: Element, target: str
    ) -> list[Statement]:
        statements: list[Statement] = []
        for block in node.children:
            if is_member_block(block):
                statements.extend(self._emit_member_block(binding, block, target))
        return statements

    def _emit_member_block(
        self, binding: TypeBinding, block: Element, target: str
    ) -> list[Statement]:
        member_name = member_block_name(block)
        if not member_name:
            return []
        member = self._catalog.resolve_settable_property(binding, member_name)
        if member is None:
            logger.debug("Skipping <%s>: no settable property on %s", block.tag, binding.name)
            return []
        member_binding = self._catalog.resolve_qualified(member.value_type)
        if member_binding is None:
            logger.debug(
                "Skipping <%s>: %s is not a bound type", block.tag, member.value_type
            )
            return []

        nested_target = f"{target}.{member_name}"
        statements = self._emit_member_blocks(member_binding, block, nested_target)
        statements.extend(self._emit_assignments(member_binding, block, nested_target))
        for child in block.children:
            if is_common_element(child):
                statements.extend(self.emit(member_binding, child, nested_target))
        return statements

    # ── attribute assignment ─────────────────────────────────────

    def _merged_attributes(self, node: Element) -> list[Attribute]:
        style_value = node.attribute_value(constants.STYLE_ATTRIBUTE)
        return self._styles.resolve_style_attribute(style_value) + list(node.attributes)

    def _emit_assignments(
        self, binding: TypeBinding, node: Element, target: str
    ) -> list[Statement]:
        statements: list[Statement] = []
        for attr in self._merged_attributes(node):
            if not is_common_attribute(attr):
                continue
            stmt = self._emit_assignment(binding, attr, target, node)
            if stmt is not None:
                statements.append(stmt)
        return statements

    def _emit_assignment(
        self, binding: TypeBinding, attr: Attribute, target: str, node: Element
    ) -> Statement | None:
        member = self._catalog.resolve_settable_property(binding, attr.name)
        if member is None:
            logger.debug("No settable property %s.%s", binding.name, attr.name)
            return None
        result = self._values.compile(member, attr.value)
        if not result.matched:
            logger.debug(
                "Value %r not representable for %s.%s (%s)",
                attr.value,
                binding.name,
                attr.name,
                member.value_type,
            )
            return None
        return assign(
            target,
            attr.name,
            result.expression,
            node.source_location,
            requires=(result.module,) if result.module else (),
        )

    # ── child elements ───────────────────────────────────────────

    def _emit_children(self, node: Element, target: str) -> list[Statement]:
        statements: list[Statement] = []
        for child in node.children:
            if is_common_element(child):
                statements.extend(self._emit_child(child, target))
        return statements

    def _emit_child(self, child: Element, target: str) -> list[Statement]:
        binding = self._catalog.resolve_type(child.tag)
        if binding is None:
            logger.debug("Skipping unknown tag <%s> and its subtree", child.tag)
            return []
        loc = child.source_location
        var = self._scope.fresh_variable()
        statements = [construct(var, binding.name, loc)]
        statements.extend(self.emit(binding, child, var))
        name = child.name
        if name and self._scope.is_claimed(name):
            statements.append(assign_field(name, var, loc))
        statements.append(attach(target, var, loc))
        return statements
