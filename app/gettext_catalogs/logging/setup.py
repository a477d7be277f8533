"""Structlog configuration and logger setup.

Configures structlog once for the package: console rendering in
development, JSON in production, silenced while running under pytest.

Usage:
    from gettext_catalogs.logging import get_module_logger

    logger = get_module_logger()
    logger.info("catalog_loaded", locale="es_AR", domain="messages")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from gettext_catalogs.configuration import settings

# Records below this level never reach a handler
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(json_output: bool) -> List[Processor]:
    """Return the processor chain; the renderer is always last."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(),
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the package.

    Args:
        log_level: Level name overriding ``LOG_LEVEL``.
        is_production: Overrides ``settings.is_production``; selects JSON
            output instead of the console renderer.

    Returns:
        Root structlog logger.
    """
    if _is_test_environment():
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
    else:
        json_output = settings.is_production if is_production is None else is_production
        processors = _build_processors(json_output)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    logging.root.setLevel(level)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Example:
        # In gettext_catalogs/i18n/filesystem.py
        logger = get_module_logger()
        # context: {"component": "filesystem", "module_path": "gettext_catalogs.i18n.filesystem"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
