"""Pytest fixtures.

``make_project`` writes a small Ember-like tree under ``tmp_path``:

    make_project({"components/a.hbs": '{{t "a.b"}}'}, translations="a:\n  b: B\n")
"""
from pathlib import Path
from typing import Callable, Optional

import pytest

from intl_lint.core.config import Settings


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(relative: str, content: str) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def make_project(tmp_path: Path, write_file):
    def _make(files: dict[str, str], translations: Optional[str] = None) -> Path:
        (tmp_path / "app").mkdir(exist_ok=True)
        for relative, content in files.items():
            write_file(f"app/{relative}", content)
        if translations is not None:
            write_file("translations/en-us.yaml", translations)
        return tmp_path

    return _make


@pytest.fixture
def lint_settings() -> Settings:
    return Settings(_env_file=None, REPORT_PREFIX="[Fleetbase]", RULE_WIDTH=80)
