# mp3slice/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "mp3slice", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger. If nothing has configured logging yet
    (no uvicorn, no app), install a basicConfig once.
    Level defaults to settings.log_level.
    """
    if level is None:
        from mp3slice.common.settings import get_settings
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
