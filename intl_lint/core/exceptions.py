"""Lint exception hierarchy.

Exceptions carry an exit code, a message and optional details; the CLI
maps them to stderr output and the process status.
"""
from __future__ import annotations

from typing import Optional

from intl_lint.shared.codes import ExitCode


class LintError(Exception):
    """Base class for fatal lint errors."""

    def __init__(
        self,
        message: str,
        code: int = ExitCode.FAILURE,
        error_type: str = "LintError",
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ProjectPathNotFoundError(LintError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(
            message=f"Project path not found: {path}",
            error_type="ProjectPathNotFound",
            details={"path": path},
        )


class TranslationFileNotFoundError(LintError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(
            message=f"Translation file not found: {path}",
            error_type="TranslationFileNotFound",
            details={"path": path},
        )


class TranslationParseError(LintError):
    """The locale document is not valid YAML."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            message=f"Failed to parse translation file {path}: {reason}",
            error_type="TranslationParseError",
            details={"path": path, "reason": reason},
        )
