"""Logging setup for the ``gpacalc`` logger namespace.

Library modules only create loggers; handlers are attached here, on demand.
"""

from __future__ import annotations

import logging
from typing import Optional

from gpacalc.config.settings import Settings, SettingsError, settings as default_settings


ROOT_LOGGER_NAME = "gpacalc"


class GpacalcHandler(logging.StreamHandler):
    pass


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise SettingsError(f"Unsupported log level: {name!r}")
    return level


def configure_logging(config: Optional[Settings] = None) -> logging.Logger:
    config = config or default_settings
    level = _resolve_level(config.log_level)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if isinstance(h, GpacalcHandler)), None)
    if handler is None:
        handler = GpacalcHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(config.log_format))
    return logger
