"""Dotted key lookup against a nested locale document."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional

KEY_SEPARATOR = "."


def key_exists(key: str, document: Optional[Mapping[str, Any]]) -> bool:
    """Return True if every segment of ``key`` resolves to a nested mapping key.

    Presence is tested, not truthiness: ``None``, ``""`` and ``0`` leaves count
    as present.
    """
    node: Any = document if document is not None else {}
    for segment in key.split(KEY_SEPARATOR):
        if not isinstance(node, Mapping) or segment not in node:
            return False
        node = node[segment]
    return True


def find_missing_keys(
    keys: Iterable[str], document: Optional[Mapping[str, Any]]
) -> tuple[str, ...]:
    """Keys absent from ``document``, deduplicated and sorted."""
    return tuple(sorted({key for key in keys if not key_exists(key, document)}))
