"""Mini README: Application-wide logging helpers for VIP Finance.

Structure:
    * configure_root_logger - one-time root handler setup with a readable format.
    * get_logger - factory returning module loggers after baseline setup.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)`` at import time. Record
    mutations are logged at INFO, reads at DEBUG and persistence failures at
    ERROR so the console doubles as an audit trail for the bookkeeper. The
    first ``get_logger`` call installs the handler at INFO; later calls to
    ``configure_root_logger`` are no-ops, so change verbosity afterwards with
    ``logging.getLogger(...).setLevel``.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach a single stream handler to the root logger."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
