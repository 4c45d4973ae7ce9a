"""Generated-unit IR — ordered construction / assignment / attachment statements."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from .markup import NO_SOURCE_LOCATION, SourceLocation


class StatementKind(str, Enum):
    # result_var = new <type>
    CONSTRUCT = "CONSTRUCT"
    # <target>.<member> = <value>
    ASSIGN = "ASSIGN"
    # <owner>.<field> = <var>
    ASSIGN_FIELD = "ASSIGN_FIELD"
    # <target>.add(<var>)
    ATTACH = "ATTACH"


class Statement(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: StatementKind
    result_var: str | None = None
    operands: tuple[Any, ...] = ()
    requires: tuple[str, ...] = ()  # modules the rendered statement imports
    source_location: SourceLocation = NO_SOURCE_LOCATION

    def __str__(self) -> str:
        parts: list[str] = []
        if self.result_var:
            parts.append(f"{self.result_var} =")
        parts.append(self.kind.value.lower())
        for op in self.operands:
            parts.append(str(op))
        base = " ".join(parts)
        if not self.source_location.is_unknown():
            return f"{base}  # {self.source_location}"
        return base


def construct(var: str, type_name: str, loc: SourceLocation = NO_SOURCE_LOCATION) -> Statement:
    module = type_name.rpartition(".")[0]
    return Statement(
        kind=StatementKind.CONSTRUCT,
        result_var=var,
        operands=(type_name,),
        requires=(module,) if module else (),
        source_location=loc,
    )


def assign(
    target: str,
    member: str,
    value: str,
    loc: SourceLocation = NO_SOURCE_LOCATION,
    requires: tuple[str, ...] = (),
) -> Statement:
    return Statement(
        kind=StatementKind.ASSIGN,
        operands=(target, member, value),
        requires=requires,
        source_location=loc,
    )


def assign_field(field: str, var: str, loc: SourceLocation = NO_SOURCE_LOCATION) -> Statement:
    return Statement(
        kind=StatementKind.ASSIGN_FIELD,
        operands=(field, var),
        source_location=loc,
    )


def attach(target: str, var: str, loc: SourceLocation = NO_SOURCE_LOCATION) -> Statement:
    return Statement(
        kind=StatementKind.ATTACH,
        operands=(target, var),
        source_location=loc,
    )


class FieldDeclaration(BaseModel):
    """A named node exposed as a field on the owning type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_name: str


class GeneratedUnit(BaseModel):
    """Declarations plus ordered initialization statements for one owner type.

    An empty unit (no owner) is the uniform failure signal: callers skip
    source emission for it.
    """

    model_config = ConfigDict(frozen=True)

    owner: str = ""
    visibility: str = ""
    declarations: tuple[FieldDeclaration, ...] = ()
    statements: tuple[Statement, ...] = ()

    @classmethod
    def empty(cls) -> GeneratedUnit:
        return cls()

    def is_empty(self) -> bool:
        return not self.owner
