"""Human readable lint report."""
from __future__ import annotations

from typing import Sequence

from intl_lint.core.config import Settings
from intl_lint.domain.entities import FileStats
from intl_lint.shared.codes import LintOutcome


class ReportRenderer:
    """Renders report text; every line carries the configured prefix."""

    def __init__(self, settings: Settings):
        self.prefix = settings.REPORT_PREFIX
        self.rule = "=" * settings.RULE_WIDTH

    def line(self, text: str = "") -> str:
        return f"{self.prefix} {text}" if text else ""

    def error(self, message: str) -> str:
        return self.line(f"Error: {message}")

    def render(
        self,
        stats: FileStats,
        unique_keys: int,
        translation_name: str,
        missing_keys: Sequence[str],
    ) -> str:
        lines = [
            "",
            self.rule,
            self.line("Translation Linter"),
            self.rule,
            self.line(f"Scanned {stats.total} file(s), found {unique_keys} unique translation key(s)"),
            "",
            self.line(f"{translation_name}:"),
        ]
        if missing_keys:
            lines.append(self.line(f"  ⚠️  {len(missing_keys)} missing translation(s)"))
            lines.append("")
            lines.extend(self.line(f"     - {key}") for key in missing_keys)
        else:
            lines.append(self.line("  ✓ All translations present"))
        lines.extend(["", self.rule, ""])
        return "\n".join(lines)

    def summary(self, outcome: LintOutcome) -> str:
        if outcome is LintOutcome.PASS:
            return self.line("✓ Translation validation passed!")
        if outcome is LintOutcome.WARN:
            return self.line("⚠️  Translation validation completed with warnings (silent mode)")
        return self.line("❌ Translation validation failed!")
