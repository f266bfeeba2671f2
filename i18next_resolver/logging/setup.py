"""Structlog integration for the translation engine.

The package never configures logging on import. Module loggers are lazy
structlog proxies carrying ``component`` and ``module_path``; they render
through whatever configuration the host application installs.
Applications without their own setup can opt in to ours:

    from i18next_resolver.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from i18next_resolver.configuration import get_settings


def _is_test_environment() -> bool:
    """True if pytest is in sys.modules."""
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Install a structlog configuration for applications that want one.

    Under pytest every record is dropped by raising the root level above
    CRITICAL.

    Args:
        log_level: Level name (DEBUG, INFO, ...). Defaults to LOG_LEVEL.
        is_production: JSON output when True, console output otherwise.
            Defaults to the settings' is_production.

    Returns:
        A logger bound to the new configuration.
    """
    if _is_test_environment():
        level = logging.CRITICAL + 1
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
    else:
        settings = get_settings()
        prod_mode = settings.is_production if is_production is None else is_production
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)
        processors = _build_processors(prod_mode)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger()


def get_module_logger(**initial_values: Any) -> Any:
    """Get a lazy logger bound to the calling module.

    Binds ``component`` (last part of the module name) and ``module_path``.
    Configuration is resolved on the first log call, so loggers created at
    import time follow a configuration installed later.

    Example:
        # In i18next_resolver/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "i18next_resolver.i18n.loader"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None

    if module is None:
        return structlog.get_logger(component="unknown", **initial_values)

    return structlog.get_logger(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
        **initial_values,
    )
