"""Style registry — named attribute bundles collected from the markup tree."""

from __future__ import annotations

import logging
from typing import Iterable

from . import constants
from .markup import Attribute, Element, tag_suffix

logger = logging.getLogger(__name__)


def _without_name(attributes: Iterable[Attribute]) -> tuple[Attribute, ...]:
    return tuple(a for a in attributes if a.name != constants.NAME_ATTRIBUTE)


class StyleRegistry:
    """Collects style bundles in one pre-order pass; first registration wins."""

    def __init__(self):
        self._styles: dict[str, tuple[Attribute, ...]] = {}

    @property
    def styles(self) -> dict[str, tuple[Attribute, ...]]:
        return dict(self._styles)

    def register(self, key: str, attributes: Iterable[Attribute]) -> bool:
        if not key or key in self._styles:
            return False
        self._styles[key] = _without_name(attributes)
        return True

    def collect(self, tree: Element) -> dict[str, tuple[Attribute, ...]]:
        self._visit(tree)
        logger.debug("Collected %d style(s): %s", len(self._styles), list(self._styles))
        return self.styles

    def _visit(self, node: Element) -> None:
        if node.tag == constants.STYLE_GROUP_TAG:
            self.register(node.name, node.attributes)
            for child in node.children:
                self.register(tag_suffix(child.tag), child.attributes)
            return
        if node.tag.startswith(constants.STYLE_BLOCK_PREFIX):
            key = node.tag[len(constants.STYLE_BLOCK_PREFIX) :]
            self.register(key, node.attributes)
            return
        for child in node.children:
            self._visit(child)

    def resolve(self, names: Iterable[str]) -> list[Attribute]:
        """Flatten the bundles for *names* in order; unknown names are dropped."""
        resolved: list[Attribute] = []
        for name in names:
            bundle = self._styles.get(name)
            if bundle is None:
                logger.debug("Unknown style '%s' ignored", name)
                continue
            resolved.extend(bundle)
        return resolved

    def resolve_style_attribute(self, value: str) -> list[Attribute]:
        if not value.strip():
            return []
        return self.resolve(value.split())
