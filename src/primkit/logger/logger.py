"""Project-wide logging for primkit.

The ``primkit`` logger writes to stdout and does not propagate to the root
logger. Modules log through children obtained from :func:`get_logger`, which
share its handler and level.
"""

import logging
import os
import sys
import typing as tp

__all__ = ["logger", "setup_logger", "get_logger", "DEFAULT_FORMAT"]

ROOT_NAME = "primkit"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: tp.Optional[str]) -> int:
    # Explicit argument, then PRIMKIT_LOG_LEVEL, then LOG_LEVEL
    level = level or os.getenv("PRIMKIT_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    return getattr(logging, level.upper(), logging.INFO)


def setup_logger(
    name: str = ROOT_NAME,
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.Optional[tp.TextIO] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    A logger that already has handlers is returned untouched, so calling this
    repeatedly never duplicates output.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        stream: Destination stream, stdout by default

    Returns:
        Configured logger instance
    """
    configured = logging.getLogger(name)
    if configured.handlers:
        return configured

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)
    )
    configured.addHandler(handler)
    configured.setLevel(_resolve_level(level))
    configured.propagate = False
    return configured


def get_logger(module: str) -> logging.Logger:
    """Return a child of the project logger for ``module``.

    Names outside the ``primkit`` namespace are nested under it.
    """
    if module == ROOT_NAME or module.startswith(ROOT_NAME + "."):
        return logging.getLogger(module)
    return logging.getLogger(f"{ROOT_NAME}.{module}")


logger = setup_logger()
