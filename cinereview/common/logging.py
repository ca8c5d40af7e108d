# cinereview/common/logging.py
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# chatty third-party loggers; never below WARNING
_QUIET = ("httpx", "httpcore", "sqlalchemy.engine")


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from cinereview.common.settings import get_settings

        level = get_settings().log_level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str = "uvicorn.error", level: int | str | None = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    Outside Uvicorn (seed script, tests) a single basicConfig is installed.
    `level` defaults to settings.log_level.
    """
    lvl = _resolve_level(level)
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=lvl, format=LOG_FORMAT)
        for noisy in _QUIET:
            logging.getLogger(noisy).setLevel(max(lvl, logging.WARNING))
    logger.setLevel(lvl)
    return logger
