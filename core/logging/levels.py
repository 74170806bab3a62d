from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


_CUSTOM = {"TRACE": LogLevel.TRACE, "SUCCESS": LogLevel.SUCCESS}


def register_levels() -> None:
    for name, value in _CUSTOM.items():
        if logging.getLevelName(int(value)) != name:
            logging.addLevelName(int(value), name)


def to_level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in _CUSTOM:
        return int(_CUSTOM[name])
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
