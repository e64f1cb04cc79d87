"""Translation key extraction from Ember source files.

Extraction is regex based and only recognises literal keys:

    {{t "orders.new"}}            (t 'orders.new' count=2)
    this.intl.t('orders.new')     intl.t("orders.new", { count: 2 })

Dynamic keys (``intl.t('orders.' + status)``, ``intl.t(key)``), options
passed as a variable and nested braces inside the options literal are not
matched, and neither are literals that span lines.
"""
from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePath
from typing import Optional, Union

_QUOTED_KEY = r"(?P<q>[\"'`])(?P<key>[^\"'`\r\n]+?)(?P=q)"

# {{t "key" ...}} and (t "key" ...)
_MARKUP_PATTERNS = (
    re.compile(r"\{\{\s*t\s+" + _QUOTED_KEY + r"(?:\s+[^}]*?)?\s*\}\}"),
    re.compile(r"\(t\s+" + _QUOTED_KEY + r"(?:\s+[^()]*?)?\s*\)"),
)

# this.intl.t('key') / intl.t('key', { ... })
_SCRIPT_PATTERNS = (
    re.compile(
        r"(?:this\.)?intl\.t\s*\(\s*" + _QUOTED_KEY + r"\s*(?:,\s*\{[^{}]*\}\s*)?\)"
    ),
)


class FileKind(str, Enum):
    MARKUP = "markup"
    SCRIPT = "script"

    @classmethod
    def from_path(cls, path: Union[str, PurePath]) -> Optional["FileKind"]:
        """Kind of an eligible file, ``None`` for anything else."""
        name = PurePath(path).name
        for extension, kind in _EXTENSIONS.items():
            if name.endswith(extension):
                return kind
        return None


_EXTENSIONS = {
    ".hbs": FileKind.MARKUP,
    ".js": FileKind.SCRIPT,
}

_PATTERNS = {
    FileKind.MARKUP: _MARKUP_PATTERNS,
    FileKind.SCRIPT: _SCRIPT_PATTERNS,
}


def extract_keys(content: str, kind: Optional[FileKind]) -> list[str]:
    """Return every translation key literal referenced in ``content``.

    Keys are stripped; blank literals are dropped. Duplicates within one
    file are kept, callers deduplicate.
    """
    keys: list[str] = []
    for pattern in _PATTERNS.get(kind, ()):
        for match in pattern.finditer(content):
            key = match.group("key").strip()
            if key:
                keys.append(key)
    return keys
