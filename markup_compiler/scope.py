"""Per-compilation name bookkeeping."""

from __future__ import annotations

import keyword
from dataclasses import dataclass, field

from . import constants


def is_valid_member_name(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


@dataclass
class NameScope:
    """Claimed field names and the fresh-variable counter for one compilation.

    Never shared between documents: the assembler creates one per call.
    """

    variable_prefix: str = constants.VARIABLE_PREFIX
    reserved: frozenset[str] = frozenset(
        {constants.INITIALIZER_NAME, constants.CONTENT_LOADED_LATCH}
    )
    claimed: set[str] = field(default_factory=set)
    _var_counter: int = 0

    def accepts(self, name: str) -> bool:
        """True when *name* may become a field on the generated class."""
        return is_valid_member_name(name) and name not in self.reserved

    def claim(self, name: str) -> bool:
        """Claim *name*; False when it was already claimed."""
        if name in self.claimed:
            return False
        self.claimed.add(name)
        return True

    def is_claimed(self, name: str) -> bool:
        return name in self.claimed

    def fresh_variable(self) -> str:
        self._var_counter += 1
        return f"{self.variable_prefix}{self._var_counter}"
