"""Mini README: Application-wide logging helpers for Budgeter.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - optional helper to adjust the global logging level.

Usage:
    Modules import ``get_logger`` and keep a module-level ``LOGGER``. Ledger
    mutations log at INFO when applied and at WARNING when rejected. The
    root handler is installed exactly once so repeated imports or CLI
    invocations in the same process never duplicate output. Only explicit
    ``configure_root_logger`` calls change the root level.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _ensure_handler() -> bool:
    """Install the stream handler on the root logger once.

    Returns ``True`` when this call installed it.
    """

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return False

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logging.getLogger().addHandler(handler)
    _LOGGER_INITIALISED = True
    return True


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Install the handler if needed and set the root level."""

    _ensure_handler()
    logging.getLogger().setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if _ensure_handler():
        logging.getLogger().setLevel(logging.INFO)
    return logging.getLogger(name)
