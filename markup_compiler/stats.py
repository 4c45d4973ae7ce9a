"""Pure functions for computing statistics over generated statement lists."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .statements import Statement


def count_kinds(statements: Iterable[Statement]) -> dict[str, int]:
    """Return a frequency map of statement kind names.

    Args:
        statements: Generated statements, in any order.

    Returns:
        A dict mapping kind name strings to their occurrence counts.
        Empty dict for an empty input.
    """
    return dict(Counter(stmt.kind.value for stmt in statements))
