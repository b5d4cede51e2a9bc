"""Utilities shared by pdfsuite modules."""

from __future__ import annotations

import logging
import time
from pathlib import Path

PACKAGE_LOGGER = "pdfsuite"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def configure_logging(level: str | int) -> None:
    """Set the level inherited by every ``pdfsuite.*`` logger."""

    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def safe_filename(filename: str | None, default: str) -> str:
    """Return a filesystem-safe filename derived from user input."""

    if not filename:
        return default

    candidate = Path(filename.replace("\\", "/")).name
    if candidate in {"", ".", ".."}:
        return default
    return candidate


def timestamped_filename(operation: str, extension: str = "pdf") -> str:
    """Build ``<operation>-<epoch millis>.<extension>`` for a result download."""

    return f"{operation}-{int(time.time() * 1000)}.{extension}"


__all__ = ["get_logger", "configure_logging", "safe_filename", "timestamped_filename"]
