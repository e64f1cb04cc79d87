"""YAML locale document loader."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Union

import yaml

from intl_lint.core.exceptions import TranslationParseError
from intl_lint.core.logging_config import get_logger

logger = get_logger(__name__)


class LocaleLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans.

    ``yes``/``no``/``on``/``off`` stay strings so keys such as
    ``common.yes`` resolve.
    """


LocaleLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:bool"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
LocaleLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _stringify_keys(node: Any) -> Any:
    if isinstance(node, dict):
        return {_key_to_str(k): _stringify_keys(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_stringify_keys(item) for item in node]
    return node


def _key_to_str(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def parse_translations(text: str, source: str = "<string>") -> Any:
    """Parse locale YAML text. Blank documents parse to ``{}``."""
    try:
        data = yaml.load(text, Loader=LocaleLoader)
    except yaml.YAMLError as exc:
        raise TranslationParseError(source, str(exc)) from exc
    if data is None:
        return {}
    return _stringify_keys(data)


def load_translations(path: Union[str, Path]) -> Any:
    """Read and parse the locale document at ``path``."""
    path = Path(path)
    document = parse_translations(path.read_text(encoding="utf-8", errors="replace"), source=str(path))
    logger.info(
        "translations_loaded",
        path=str(path),
        top_level_keys=len(document) if isinstance(document, dict) else 0,
    )
    return document
