"""Compiler configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class CompilerConfig:
    """Groups code-shape settings shared by the emitters and the source writer."""

    owner_target: str = constants.OWNER_TARGET
    variable_prefix: str = constants.VARIABLE_PREFIX
    latch_name: str = constants.CONTENT_LOADED_LATCH
    initializer_name: str = constants.INITIALIZER_NAME
    add_child_method: str = constants.ADD_CHILD_METHOD
    class_suffix: str = constants.COMPONENT_CLASS_SUFFIX
    indent: int = 4
