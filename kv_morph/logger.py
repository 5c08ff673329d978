"""Logging configuration for the kv-morph command line."""

from __future__ import annotations

import logging
import os
import sys


__all__ = ["setup_logger"]

_LOG_LEVEL_ENV = "KV_MORPH_LOG_LEVEL"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str = "kv_morph", level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level.

    ``level`` falls back to ``$KV_MORPH_LOG_LEVEL`` and then ``WARNING``.
    Calling it again only updates the level.
    """
    level = (level or os.getenv(_LOG_LEVEL_ENV) or "WARNING").upper()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        msg = f"unknown log level: {level}"
        raise ValueError(msg)

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(numeric_level)
    return logger
