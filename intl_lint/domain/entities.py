"""Value objects produced while scanning a project."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from intl_lint.shared.codes import ExitCode, LintOutcome


@dataclass
class FileStats:
    """Counters for eligible files visited during a walk."""

    total: int = 0
    with_keys: int = 0

    def record(self, key_count: int) -> None:
        self.total += 1
        if key_count > 0:
            self.with_keys += 1


@dataclass
class KeyCollection:
    keys: set[str] = field(default_factory=set)
    stats: FileStats = field(default_factory=FileStats)

    def add_file(self, keys: list[str]) -> None:
        self.stats.record(len(keys))
        self.keys.update(keys)


@dataclass(frozen=True)
class LintResult:
    """Structured outcome of one lint run."""

    outcome: LintOutcome
    keys: frozenset[str]
    missing_keys: tuple[str, ...]
    stats: FileStats
    translation_name: str
    report: str = ""
    summary: Optional[str] = None

    @property
    def exit_code(self) -> ExitCode:
        return self.outcome.exit_code

    @property
    def passed(self) -> bool:
        return self.outcome is LintOutcome.PASS
