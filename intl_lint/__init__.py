"""Translation key linter for Ember projects."""
from intl_lint.application.lint_service import LintService, run_lint
from intl_lint.core.config import LintOptions
from intl_lint.domain.entities import FileStats, LintResult
from intl_lint.domain.extractor import FileKind, extract_keys
from intl_lint.domain.resolver import find_missing_keys, key_exists
from intl_lint.shared.codes import ExitCode, LintOutcome

__version__ = "1.0.0"

__all__ = [
    "ExitCode",
    "FileKind",
    "FileStats",
    "LintOptions",
    "LintOutcome",
    "LintResult",
    "LintService",
    "extract_keys",
    "find_missing_keys",
    "key_exists",
    "run_lint",
]
