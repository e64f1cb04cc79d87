"""Project tree walker collecting translation keys."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from intl_lint.core.logging_config import get_logger
from intl_lint.domain.entities import KeyCollection
from intl_lint.domain.extractor import FileKind, extract_keys

logger = get_logger(__name__)


def collect_keys(root: Union[str, Path]) -> KeyCollection:
    """Walk ``root`` depth first and gather keys from every ``.hbs``/``.js`` file.

    Traversal order is not guaranteed. Undecodable bytes are replaced with
    U+FFFD; other read errors propagate to the caller.
    """
    collection = KeyCollection()
    stack = [Path(root)]

    while stack:
        current = stack.pop()
        for entry in current.iterdir():
            if entry.is_dir():
                stack.append(entry)
                continue

            kind = FileKind.from_path(entry)
            if kind is None:
                continue

            keys = extract_keys(entry.read_text(encoding="utf-8", errors="replace"), kind)
            collection.add_file(keys)
            logger.debug("file_scanned", path=str(entry), kind=kind.value, keys=len(keys))

    return collection
