"""
Shared status codes used across layers (Domain/Application/CLI).

This module is the single source of truth for process exit codes and
lint outcomes so the CLI and the library surface never drift apart.
"""
from enum import Enum, IntEnum


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    FAILURE = 1


class LintOutcome(str, Enum):
    """Terminal state of a lint run."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"

    @property
    def exit_code(self) -> ExitCode:
        if self is LintOutcome.FAIL:
            return ExitCode.FAILURE
        return ExitCode.SUCCESS


__all__ = ["ExitCode", "LintOutcome"]
