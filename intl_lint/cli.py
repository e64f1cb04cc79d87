"""
Command line entry point: ``intl-lint`` / ``python -m intl_lint``.
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from intl_lint.application.lint_service import LintService
from intl_lint.core.config import (
    DEFAULT_PROJECT_PATH,
    DEFAULT_TRANSLATION_PATH,
    LintOptions,
    settings,
)
from intl_lint.core.exceptions import LintError
from intl_lint.core.logging_config import configure_logging, get_logger
from intl_lint.shared.codes import LintOutcome

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intl-lint",
        description="Validate translation keys used in Ember templates and scripts against a YAML translation file.",
    )
    parser.add_argument(
        "-s", "--silent",
        action="store_true",
        default=False,
        help="Run in silent mode: report missing keys as warnings and exit 0",
    )
    parser.add_argument(
        "-p", "--path",
        default=DEFAULT_PROJECT_PATH,
        help=f"Path to the Ember project (default: {DEFAULT_PROJECT_PATH})",
    )
    parser.add_argument(
        "--translation-path",
        dest="translation_path",
        default=DEFAULT_TRANSLATION_PATH,
        help=f"Path to the translation YAML file (default: {DEFAULT_TRANSLATION_PATH})",
    )
    return parser


def parse_options(argv: Optional[Sequence[str]] = None) -> LintOptions:
    args = build_parser().parse_args(argv)
    return LintOptions(silent=args.silent, path=args.path, translation_path=args.translation_path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    options = parse_options(argv)
    service = LintService(settings)

    try:
        result = service.run(options)
    except LintError as exc:
        logger.info("lint_aborted", error_type=exc.error_type, **(exc.details or {}))
        print(service.renderer.error(exc.message), file=sys.stderr)
        return int(exc.code)

    print(result.report)
    if result.outcome is LintOutcome.FAIL:
        print(result.summary, file=sys.stderr)
    else:
        print(result.summary)
    return int(result.exit_code)


if __name__ == "__main__":
    raise SystemExit(main())
