"""
Handles the explicit initialization of shared process state, which for this
tool is only the structlog configuration.
"""
import logging
import sys
from typing import Optional

import structlog

from .config import settings

_configured = False


def configure_logging(level: Optional[str] = None, json_logs: Optional[bool] = None, force: bool = False) -> None:
    """
    Configure structlog once per process. Logs always go to stderr so the
    report on stdout stays machine readable.
    """
    global _configured
    if _configured and not force:
        return

    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    use_json = settings.log_json if json_logs is None else json_logs
    renderer = structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        # Resolve sys.stderr per logger so redirected streams are honoured.
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
    )
    _configured = True
