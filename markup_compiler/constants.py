"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

NAME_ATTRIBUTE = "Name"
CLASS_ATTRIBUTE = "Class"
STYLE_ATTRIBUTE = "Style"

RESERVED_ATTRIBUTES: frozenset[str] = frozenset(
    {NAME_ATTRIBUTE, CLASS_ATTRIBUTE, STYLE_ATTRIBUTE}
)

STYLE_GROUP_TAG = "Style"
STYLE_BLOCK_PREFIX = "Style."
MEMBER_BLOCK_PREFIX = "M."

OWNER_TARGET = "self"
VARIABLE_PREFIX = "element"
CONTENT_LOADED_LATCH = "_content_loaded"
INITIALIZER_NAME = "initialize_component"
ADD_CHILD_METHOD = "add"
COMPONENT_CLASS_SUFFIX = "Component"

MARKUP_LANGUAGE = "xml"

VISIBILITY_PUBLIC = "public"
VISIBILITY_INTERNAL = "internal"

MEMBER_KIND_PROPERTY = "property"
