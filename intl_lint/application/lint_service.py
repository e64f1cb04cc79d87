"""Lint orchestration: validate paths, scan, resolve, report."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

from intl_lint.application.report import ReportRenderer
from intl_lint.core.config import LintOptions, Settings, settings as default_settings
from intl_lint.core.exceptions import ProjectPathNotFoundError, TranslationFileNotFoundError
from intl_lint.core.logging_config import get_logger
from intl_lint.domain.entities import KeyCollection, LintResult
from intl_lint.domain.resolver import find_missing_keys
from intl_lint.infrastructure.loader import load_translations
from intl_lint.infrastructure.walker import collect_keys
from intl_lint.shared.codes import LintOutcome

logger = get_logger(__name__)


def decide_outcome(missing_count: int, silent: bool) -> LintOutcome:
    if missing_count == 0:
        return LintOutcome.PASS
    return LintOutcome.WARN if silent else LintOutcome.FAIL


class LintService:
    """Runs one lint pass and returns a LintResult.

    Never prints and never exits; the CLI decides what to do with the result.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        walker: Callable[[Path], KeyCollection] = collect_keys,
        loader: Callable[[Path], Any] = load_translations,
        cwd: Optional[Path] = None,
    ):
        self._settings = settings or default_settings
        self._walker = walker
        self._loader = loader
        self._cwd = cwd
        self.renderer = ReportRenderer(self._settings)

    def validate_paths(self, options: LintOptions) -> tuple[Path, Path]:
        """Resolve both paths and fail on the first one that does not exist.

        Raises:
            ProjectPathNotFoundError: project root missing
            TranslationFileNotFoundError: locale document missing
        """
        project_root = options.project_root(self._cwd)
        translation_file = options.translation_file(self._cwd)
        if not project_root.exists():
            raise ProjectPathNotFoundError(str(project_root))
        if not translation_file.exists():
            raise TranslationFileNotFoundError(str(translation_file))
        logger.debug(
            "paths_validated",
            project_root=str(project_root),
            translation_file=str(translation_file),
        )
        return project_root, translation_file

    def run(self, options: LintOptions) -> LintResult:
        logger.info("lint_started", path=options.path, translation_path=options.translation_path, silent=options.silent)
        project_root, translation_file = self.validate_paths(options)

        collection = self._walker(project_root)
        logger.info(
            "keys_collected",
            files=collection.stats.total,
            files_with_keys=collection.stats.with_keys,
            unique_keys=len(collection.keys),
        )

        document = self._loader(translation_file)
        missing_keys = find_missing_keys(collection.keys, document)
        logger.info("missing_keys_resolved", missing=len(missing_keys))

        outcome = decide_outcome(len(missing_keys), options.silent)
        translation_name = translation_file.stem
        result = LintResult(
            outcome=outcome,
            keys=frozenset(collection.keys),
            missing_keys=missing_keys,
            stats=collection.stats,
            translation_name=translation_name,
            report=self.renderer.render(
                collection.stats, len(collection.keys), translation_name, missing_keys
            ),
            summary=self.renderer.summary(outcome),
        )
        logger.info("lint_finished", outcome=outcome.value, missing=len(missing_keys))
        return result


def run_lint(options: Optional[LintOptions] = None, **overrides: Any) -> LintResult:
    """Library entry point.

    Example:
        run_lint(path="./app", silent=True).missing_keys -> ("orders.cancel",)
    """
    if options is None:
        options = LintOptions(**overrides)
    elif overrides:
        options = options.model_copy(update=overrides)
    return LintService().run(options)
