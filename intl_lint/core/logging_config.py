"""
Structlog logging configuration.
"""
import json
import logging
from typing import Any, List, Optional

import structlog
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter

from intl_lint.core.config import Settings, settings as default_settings


def _shared_pre_chain() -> List[Any]:
    return [
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _configure_structlog(pre_chain: List[Any]) -> None:
    structlog.configure(
        processors=[
            *pre_chain,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_renderer(settings: Settings) -> Any:
    """Console output unless JSON lines were asked for."""
    if settings.LOG_JSON:
        def _dumps(obj, default=None, **kwargs):
            return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)
        return JSONRenderer(serializer=_dumps)
    return ConsoleRenderer(colors=settings.DEBUG)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog and bridge stdlib logging into the same chain.

    Logs go to stderr so they never interleave with the report on stdout.
    """
    settings = settings or default_settings
    shared_pre_chain = _shared_pre_chain()
    _configure_structlog(shared_pre_chain)

    formatter = ProcessorFormatter(
        foreign_pre_chain=shared_pre_chain,
        processors=[
            ProcessorFormatter.remove_processors_meta,
            get_renderer(settings),
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger."""
    return structlog.get_logger(name)


# Route structlog through stdlib logging on import; handlers are only
# installed by configure_logging() at the CLI entry point.
_configure_structlog(_shared_pre_chain())
