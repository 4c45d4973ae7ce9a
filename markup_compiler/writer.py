"""Source writer — GeneratedUnit → Python component module text."""

from __future__ import annotations

import logging
from typing import Callable

from .config import CompilerConfig
from .statements import GeneratedUnit, Statement, StatementKind
from . import constants

logger = logging.getLogger(__name__)


class SourceWriter:
    """Renders a unit as a mixin class with a latch-guarded initializer.

    The mixin is named ``<Owner>Component``; the owning class inherits it
    and calls ``initialize_component()`` from its constructor.
    """

    def __init__(self, config: CompilerConfig = CompilerConfig()):
        self._config = config
        self._RENDER: dict[StatementKind, Callable[[Statement], str]] = {
            StatementKind.CONSTRUCT: self._render_construct,
            StatementKind.ASSIGN: self._render_assign,
            StatementKind.ASSIGN_FIELD: self._render_assign_field,
            StatementKind.ATTACH: self._render_attach,
        }

    def class_name(self, unit: GeneratedUnit) -> str:
        short = unit.owner.rpartition(".")[2]
        prefix = "_" if unit.visibility == constants.VISIBILITY_INTERNAL else ""
        return f"{prefix}{short}{self._config.class_suffix}"

    def render(self, unit: GeneratedUnit) -> str:
        if unit.is_empty():
            return ""
        pad = " " * self._config.indent
        latch = f"{self._config.owner_target}.{self._config.latch_name}"
        class_name = self.class_name(unit)

        lines = [
            f"# Generated from markup for {unit.owner}. Do not edit.",
            "from __future__ import annotations",
            "",
        ]
        imports = self._imports(unit)
        lines.extend(f"import {module}" for module in imports)
        if imports:
            lines.append("")
        if unit.visibility != constants.VISIBILITY_INTERNAL:
            lines.append(f'__all__ = ["{class_name}"]')
            lines.append("")
        lines.extend(["", f"class {class_name}:"])
        lines.extend(f"{pad}{d.name}: {d.type_name}" for d in unit.declarations)
        if unit.declarations:
            lines.append("")
        lines.extend(
            [
                f"{pad}{self._config.latch_name} = False",
                "",
                f"{pad}def {self._config.initializer_name}("
                f"{self._config.owner_target}) -> None:",
                f"{pad * 2}if {latch}:",
                f"{pad * 3}return",
                f"{pad * 2}{latch} = True",
            ]
        )
        if unit.statements:
            lines.append("")
        lines.extend(f"{pad * 2}{self.render_statement(s)}" for s in unit.statements)
        logger.debug("Rendered %s (%d lines)", class_name, len(lines))
        return "\n".join(lines) + "\n"

    def render_statement(self, stmt: Statement) -> str:
        return self._RENDER[stmt.kind](stmt)

    def _imports(self, unit: GeneratedUnit) -> list[str]:
        modules = {d.type_name.rpartition(".")[0] for d in unit.declarations}
        for stmt in unit.statements:
            modules.update(stmt.requires)
        return sorted(m for m in modules if m)

    # ── per-kind renderers ───────────────────────────────────────

    def _render_construct(self, stmt: Statement) -> str:
        return f"{stmt.result_var} = {stmt.operands[0]}()"

    def _render_assign(self, stmt: Statement) -> str:
        target, member, value = stmt.operands
        return f"{target}.{member} = {value}"

    def _render_assign_field(self, stmt: Statement) -> str:
        field_name, var = stmt.operands
        return f"{self._config.owner_target}.{field_name} = {var}"

    def _render_attach(self, stmt: Statement) -> str:
        target, var = stmt.operands
        return f"{target}.{self._config.add_child_method}({var})"
