"""Name normalization for user-facing method and philosophy strings."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TypeVar

__all__ = ["normalize_name", "lookup_name"]

T = TypeVar("T")


def normalize_name(s: str) -> str:
    """Normalize a name for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.

    Examples:
        >>> normalize_name("Newton-Cotes")
        'newtoncotes'
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


def lookup_name(name: str, table: Mapping[str, T], kind: str) -> T:
    """Resolve ``name`` through a table keyed by normalized names.

    Args:
        name: User-provided name or alias.
        table: Mapping from normalized names to values.
        kind: What is being looked up, used in the error message.

    Returns:
        The matching value.

    Raises:
        ValueError: If ``name`` is not a string or matches no entry.
    """
    if not isinstance(name, str):
        raise ValueError(f"Unknown {kind} {name!r}.")
    try:
        return table[normalize_name(name)]
    except KeyError:
        opts = ", ".join(sorted(table))
        raise ValueError(f"Unknown {kind} '{name}'. Choose one of {{{opts}}}.") from None
