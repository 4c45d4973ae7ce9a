"""Value compilers — literal attribute text → typed value expression."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .bindings import MemberDescriptor, TypeCatalog

logger = logging.getLogger(__name__)

_TRUE_LITERALS: frozenset[str] = frozenset({"true", "yes", "on", "1"})
_FALSE_LITERALS: frozenset[str] = frozenset({"false", "no", "off", "0"})


@dataclass
class ValueParseResult:
    """Result of compiling a raw literal for a property."""

    matched: bool
    expression: str = ""
    module: str = ""


UNREPRESENTABLE = ValueParseResult(matched=False)


class ValueCompiler(ABC):
    @abstractmethod
    def compile(self, member: MemberDescriptor, raw: str) -> ValueParseResult: ...


def _compile_int(raw: str) -> ValueParseResult:
    text = raw.strip()
    try:
        value = int(text)
    except ValueError:
        try:
            value = int(text, 0)
        except ValueError:
            return UNREPRESENTABLE
    return ValueParseResult(matched=True, expression=repr(value))


def _compile_float(raw: str) -> ValueParseResult:
    text = raw.strip().rstrip("fF")
    try:
        value = float(text)
    except ValueError:
        return UNREPRESENTABLE
    if value != value or value in (float("inf"), float("-inf")):
        return UNREPRESENTABLE
    return ValueParseResult(matched=True, expression=repr(value))


def _compile_bool(raw: str) -> ValueParseResult:
    text = raw.strip().lower()
    if text in _TRUE_LITERALS:
        return ValueParseResult(matched=True, expression="True")
    if text in _FALSE_LITERALS:
        return ValueParseResult(matched=True, expression="False")
    return UNREPRESENTABLE


def _compile_str(raw: str) -> ValueParseResult:
    return ValueParseResult(matched=True, expression=repr(raw))


class LiteralValueCompiler(ValueCompiler):
    """Compiles builtin scalars and catalog enums to Python expressions."""

    def __init__(self, catalog: TypeCatalog):
        self._catalog = catalog
        self._SCALARS = {
            "int": _compile_int,
            "float": _compile_float,
            "bool": _compile_bool,
            "str": _compile_str,
        }

    def compile(self, member: MemberDescriptor, raw: str) -> ValueParseResult:
        scalar = self._SCALARS.get(member.value_type)
        if scalar is not None:
            return scalar(raw)
        enum = self._catalog.resolve_enum(member.value_type)
        if enum is not None:
            return self._compile_enum(enum.name, enum.members, raw)
        logger.debug(
            "No literal form for %s (type %s)", member.name, member.value_type
        )
        return UNREPRESENTABLE

    def _compile_enum(
        self, enum_name: str, members: tuple[str, ...], raw: str
    ) -> ValueParseResult:
        text = raw.strip()
        if text.startswith(enum_name.rpartition(".")[2] + "."):
            text = text.split(".", 1)[1]
        match = next((m for m in members if m == text), None)
        if match is None:
            match = next((m for m in members if m.lower() == text.lower()), None)
        if match is None:
            return UNREPRESENTABLE
        return ValueParseResult(
            matched=True,
            expression=f"{enum_name}.{match}",
            module=enum_name.rpartition(".")[0],
        )
