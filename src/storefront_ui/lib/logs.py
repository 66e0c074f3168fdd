"""
Logging utilities for the Storefront UI.

Every module logs through ``LOG = logs.logger(__file__)``. File paths are
turned into dotted module names (``storefront_ui.i18n.locale``), so all
loggers hang under the ``storefront_ui`` package logger, which carries the
only handler and the level from LOG_LEVEL.
"""

import logging
import os
from pathlib import Path

PACKAGE = "storefront_ui"

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def module_name(path: str) -> str:
    """
    Convert a source path into its dotted module name.

    Paths outside the package fall back to the file stem; a package's
    ``__init__.py`` resolves to the package itself.
    """
    parts = list(Path(path).with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    if PACKAGE not in parts:
        return Path(path).stem
    start = len(parts) - 1 - parts[::-1].index(PACKAGE)
    return ".".join(parts[start:])


def _configure(log: logging.Logger) -> None:
    if log.handlers:
        return
    log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    log.addHandler(handler)


def logger(name: str) -> logging.Logger:
    """
    Return the logger for a module.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Logger whose records reach the package handler.
    """
    if "/" in name or "\\" in name:
        name = module_name(name)

    package = logging.getLogger(PACKAGE)
    _configure(package)
    if name == PACKAGE or name.startswith(f"{PACKAGE}."):
        return logging.getLogger(name)

    # loggers outside the package get their own handler
    log = logging.getLogger(name)
    _configure(log)
    return log
