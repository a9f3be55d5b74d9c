"""Logging for the Shorthand toolkit.

All package loggers live under the ``shorthand`` namespace. Modules call
``logging.getLogger(__name__)`` and inherit the handler configured here. The
toolkit itself only emits DEBUG records (filter/reject summaries and rejected
arguments), so at the default INFO level a normal call writes nothing.
Exceptions raised by user callables are never logged here.
"""

import logging
import sys

from shorthand.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "shorthand",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Attach a stdout handler to the ``name`` logger once.

    Level and format default to ``settings.LOG_LEVEL`` and
    ``settings.LOG_FORMAT``. Calling again for a logger that already has
    handlers returns it untouched, so importing modules repeatedly never
    duplicates output.

    Args:
        name: Logger name; the package root by default.
        level: Level name such as "DEBUG"; case-insensitive.
        format_string: ``logging.Formatter`` format string.

    Returns:
        The configured logger.
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    log = logging.getLogger(name)
    if log.handlers:
        return log

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
    )
    log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper()))
    # Records stop at the package root instead of reaching the root logger.
    log.propagate = False
    return log


logger = setup_logger()
