"""Markup tree — read-only Element / Attribute model fed to the compiler."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from . import constants


class SourceLocation(BaseModel):
    """Structured source span of a markup node."""

    model_config = ConfigDict(frozen=True)

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def is_unknown(self) -> bool:
        return (
            self.start_line == 0
            and self.start_col == 0
            and self.end_line == 0
            and self.end_col == 0
        )

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


NO_SOURCE_LOCATION = SourceLocation(start_line=0, start_col=0, end_line=0, end_col=0)


class Attribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class Element(BaseModel):
    """One markup node: tag, attributes in document order, children in order."""

    model_config = ConfigDict(frozen=True)

    tag: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple["Element", ...] = ()
    source_location: SourceLocation = NO_SOURCE_LOCATION

    def attribute(self, name: str) -> Attribute | None:
        return next((a for a in self.attributes if a.name == name), None)

    def attribute_value(self, name: str) -> str:
        attr = self.attribute(name)
        return attr.value if attr is not None else ""

    @property
    def name(self) -> str:
        return self.attribute_value(constants.NAME_ATTRIBUTE)

    def has_children(self) -> bool:
        return len(self.children) > 0


Element.model_rebuild()


def element(tag: str, *children: Element, **attributes: str) -> Element:
    """Convenience builder: ``element("Panel", element("Label"), Size="10")``."""
    return Element(
        tag=tag,
        attributes=tuple(Attribute(name=k, value=v) for k, v in attributes.items()),
        children=children,
    )


def is_style_block(node: Element) -> bool:
    return node.tag == constants.STYLE_GROUP_TAG or node.tag.startswith(
        constants.STYLE_BLOCK_PREFIX
    )


def is_member_block(node: Element) -> bool:
    return node.tag.startswith(constants.MEMBER_BLOCK_PREFIX)


def is_common_element(node: Element) -> bool:
    """Style blocks and ``M.`` member blocks are never constructed."""
    return not (is_style_block(node) or is_member_block(node))


def is_common_attribute(attr: Attribute) -> bool:
    return attr.name not in constants.RESERVED_ATTRIBUTES


def member_block_name(node: Element) -> str:
    return node.tag[len(constants.MEMBER_BLOCK_PREFIX) :].strip()


def tag_suffix(tag: str) -> str:
    return tag.rsplit(".", 1)[-1]
