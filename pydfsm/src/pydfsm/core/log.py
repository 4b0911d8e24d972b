"""Logging setup shared by pydfsm modules and scripts."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "PYDFSM_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(value: Union[int, str, None] = None) -> int:
    if isinstance(value, int):
        return value
    for candidate in (value, os.environ.get(LOG_LEVEL_ENV)):
        if isinstance(candidate, str):
            level = logging.getLevelName(candidate.strip().upper())
            if isinstance(level, int):
                return level
    return logging.WARNING


def configure_logging(level: Union[int, str, None] = None) -> None:
    resolved = resolve_level(level)
    root = logging.getLogger()
    if not root.hasHandlers():
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
    else:
        root.setLevel(resolved)
    logging.getLogger("pydfsm").setLevel(resolved)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "pydfsm")
