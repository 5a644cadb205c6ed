"""Logging wrapper shared by the solvers, with optional file output."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMATTER = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def attach_file_handler(name: str, file_path: str) -> logging.Logger:
    """Attach a UTF-8 file handler for ``file_path`` to logger ``name``."""
    logger = logging.getLogger(name)
    target = Path(file_path).resolve()
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == target:
            return logger
    target.parent.mkdir(parents=True, exist_ok=True)
    f_handler = logging.FileHandler(target, encoding="utf-8")
    f_handler.setFormatter(_FORMATTER)
    logger.addHandler(f_handler)
    return logger


def get_logger(name: str, file_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided."""

    logger = logging.getLogger(name)
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(_FORMATTER)
        logger.addHandler(handler)
    if file_path:
        attach_file_handler(name, file_path)
    logger.setLevel(level)
    return logger


def set_level(level: int, prefix: str = "grid_solver") -> None:
    """Set ``level`` on every already-created logger under ``prefix``."""
    for name, obj in logging.root.manager.loggerDict.items():
        if name.startswith(prefix) and isinstance(obj, logging.Logger):
            obj.setLevel(level)
