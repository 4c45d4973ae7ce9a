"""Type catalog — alias → type binding resolution and member lookup.

The catalog is plain data (usually loaded from JSON) describing the host
object model: which markup tags map to which types, what each type's base
is, and which members it declares.  It is read-only after construction and
safe to share across concurrent compilations.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator

from . import constants

logger = logging.getLogger(__name__)


class MemberDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: str = constants.MEMBER_KIND_PROPERTY
    value_type: str = ""
    settable: bool = True

    def is_settable_property(self) -> bool:
        return self.kind == constants.MEMBER_KIND_PROPERTY and self.settable


class TypeBinding(BaseModel):
    """A resolved host type: qualified name, visibility, declared members."""

    model_config = ConfigDict(frozen=True)

    name: str
    aliases: tuple[str, ...] = ()
    visibility: str = constants.VISIBILITY_PUBLIC
    base: str = ""
    members: tuple[MemberDescriptor, ...] = ()

    @property
    def module(self) -> str:
        return self.name.rpartition(".")[0]

    @property
    def short_name(self) -> str:
        return self.name.rpartition(".")[2]

    def declared_member(self, name: str) -> MemberDescriptor | None:
        return next((m for m in self.members if m.name == name), None)


class EnumBinding(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    members: tuple[str, ...] = ()


@dataclass
class MemberLookup:
    """Result of looking a member up along a type's ancestry."""

    found: bool
    member: MemberDescriptor | None = None
    declaring_type: str = ""


class TypeCatalog(BaseModel):
    """Alias resolver backed by a static description of the object model."""

    model_config = ConfigDict(frozen=True)

    types: tuple[TypeBinding, ...] = ()
    enums: tuple[EnumBinding, ...] = ()

    _by_alias: dict[str, TypeBinding] = PrivateAttr(default_factory=dict)
    _by_name: dict[str, TypeBinding] = PrivateAttr(default_factory=dict)
    _enums: dict[str, EnumBinding] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _index(self) -> TypeCatalog:
        unqualified = [
            name
            for name in [b.name for b in self.types] + [e.name for e in self.enums]
            if not name.rpartition(".")[0]
        ]
        if unqualified:
            raise ValueError(f"Types must be module-qualified: {unqualified}")
        by_alias: dict[str, TypeBinding] = {}
        for binding in self.types:
            for alias in binding.aliases:
                if not alias.strip():
                    continue
                if alias in by_alias:
                    raise ValueError(
                        f"Alias '{alias}' is mapped by both "
                        f"'{by_alias[alias].name}' and '{binding.name}'"
                    )
                by_alias[alias] = binding
        self._by_alias = by_alias
        self._by_name = {binding.name: binding for binding in self.types}
        self._enums = {enum.name: enum for enum in self.enums}
        return self

    # ── loading ──────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TypeCatalog:
        return cls.model_validate(data)

    @classmethod
    def from_json_file(cls, path: str | Path) -> TypeCatalog:
        logger.info("Loading type catalog from %s", path)
        with open(path) as f:
            return cls.from_dict(json.load(f))

    # ── lookups ──────────────────────────────────────────────────

    def resolve_type(self, alias: str) -> TypeBinding | None:
        return self._by_alias.get(alias)

    def resolve_qualified(self, name: str) -> TypeBinding | None:
        return self._by_name.get(name)

    def resolve_enum(self, name: str) -> EnumBinding | None:
        return self._enums.get(name)

    def ancestry(self, binding: TypeBinding) -> list[TypeBinding]:
        """Return *binding* followed by its known base types, most-derived first."""
        chain: list[TypeBinding] = []
        seen: set[str] = set()
        current: TypeBinding | None = binding
        while current is not None and current.name not in seen:
            chain.append(current)
            seen.add(current.name)
            current = self._by_name.get(current.base) if current.base else None
        return chain

    def lookup_member(self, binding: TypeBinding, name: str) -> MemberLookup:
        """Find *name* along the ancestry; an override shadows its base member."""
        for level in self.ancestry(binding):
            member = level.declared_member(name)
            if member is not None:
                return MemberLookup(found=True, member=member, declaring_type=level.name)
        return MemberLookup(found=False)

    def resolve_member(self, binding: TypeBinding, name: str) -> MemberDescriptor | None:
        return self.lookup_member(binding, name).member

    def resolve_settable_property(
        self, binding: TypeBinding, name: str
    ) -> MemberDescriptor | None:
        member = self.resolve_member(binding, name)
        if member is None or not member.is_settable_property():
            return None
        return member
