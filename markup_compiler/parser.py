"""Tree-Sitter parsing layer — markup text → read-only Element tree."""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod

from . import constants
from .markup import Attribute, Element, SourceLocation

logger = logging.getLogger(__name__)

_TAG_NODE_TYPES: frozenset[str] = frozenset({"STag", "EmptyElemTag"})
_NAMESPACE_DECLARATION = "xmlns"


class MarkupParseError(Exception):
    pass


def local_name(qualified: str) -> str:
    """Drop a namespace prefix: ``ui:Box`` → ``Box``."""
    return qualified.rpartition(":")[2]


def is_namespace_declaration(name: str) -> bool:
    return name == _NAMESPACE_DECLARATION or name.startswith(_NAMESPACE_DECLARATION + ":")


def _find_root_element(node):
    if node.type == "element":
        return node
    return next(
        (
            found
            for child in node.children
            if (found := _find_root_element(child)) is not None
        ),
        None,
    )


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(language)


class MarkupParser:
    """Parses markup with tree-sitter and converts it to ``Element`` nodes."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory
        self._source: bytes = b""

    def parse(self, source: str) -> Element:
        """Parse *source*; raises ``MarkupParseError`` on malformed markup."""
        parser = self._factory.get_parser(constants.MARKUP_LANGUAGE)
        try:
            self._source = source.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise MarkupParseError(f"Markup is not encodable: {exc.reason}") from exc
        tree = parser.parse(self._source)
        root = tree.root_node
        if root.has_error:
            raise MarkupParseError(f"Malformed markup near {self._first_error(root)}")
        element_node = _find_root_element(root)
        if element_node is None:
            raise MarkupParseError("Document has no root element")
        try:
            return self._convert(element_node)
        except (StopIteration, RuntimeError, ValueError) as exc:
            raise MarkupParseError(f"Unexpected markup structure: {exc}") from exc

    def try_parse(self, source: str) -> Element | None:
        """Parse *source*, returning ``None`` ("no tree") on any parse failure."""
        if not source.strip():
            return None
        try:
            return self.parse(source)
        except MarkupParseError as exc:
            logger.warning("Markup parse failed: %s", exc)
            return None

    # ── conversion ───────────────────────────────────────────────

    def _convert(self, node) -> Element:
        tag_node = next(c for c in node.children if c.type in _TAG_NODE_TYPES)
        name_node = next(c for c in tag_node.children if c.type == "Name")
        return Element(
            tag=local_name(self._node_text(name_node)),
            attributes=self._attributes(tag_node),
            children=tuple(self._convert(c) for c in self._child_elements(node)),
            source_location=self._source_loc(node),
        )

    def _child_elements(self, node) -> list:
        elements = []
        for child in node.children:
            if child.type == "element":
                elements.append(child)
            elif child.type == "content":
                elements.extend(self._child_elements(child))
        return elements

    def _attributes(self, tag_node) -> tuple[Attribute, ...]:
        attributes = []
        for child in tag_node.children:
            if child.type != "Attribute":
                continue
            attribute = self._convert_attribute(child)
            if not is_namespace_declaration(attribute.name):
                attributes.append(
                    attribute.model_copy(update={"name": local_name(attribute.name)})
                )
        return tuple(attributes)

    def _convert_attribute(self, node) -> Attribute:
        name_node = next(c for c in node.children if c.type == "Name")
        value_node = next((c for c in node.children if c.type == "AttValue"), None)
        raw = self._node_text(value_node) if value_node is not None else ""
        if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ("'", '"'):
            raw = raw[1:-1]
        return Attribute(name=self._node_text(name_node), value=html.unescape(raw))

    # ── helpers ──────────────────────────────────────────────────

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _source_loc(self, node) -> SourceLocation:
        s, e = node.start_point, node.end_point
        return SourceLocation(
            start_line=s[0] + 1,
            start_col=s[1],
            end_line=e[0] + 1,
            end_col=e[1],
        )

    def _first_error(self, node) -> str:
        if node.type == "ERROR" or node.is_missing:
            return str(self._source_loc(node))
        for child in node.children:
            if child.has_error:
                return self._first_error(child)
        return str(self._source_loc(node))
