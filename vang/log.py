"""Levelled, coloured console logging with fatal errors raised as exceptions."""

from __future__ import annotations

import enum
import inspect
import sys


class Level(enum.IntEnum):
    """Log levels; a message is shown when the current level is at least its own."""

    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4


class FatalError(RuntimeError):
    """Raised by :func:`fatal` after the message has been printed."""


_RESET = "\033[0m"
_COLOURS = {
    Level.DEBUG: "\033[32m",
    Level.INFO: "\033[0m",
    Level.WARN: "\033[33m",
    Level.ERROR: "\033[31m",
    Level.FATAL: "\033[91;1m",
}

_level = Level.DEBUG


def set_level(level: Level) -> None:
    """Set the most verbose level that is still printed."""
    global _level
    _level = Level(level)


def get_level() -> Level:
    """Return the current log level."""
    return _level


def _emit(level: Level, message: str) -> None:
    if _level < level:
        return
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    if caller is not None:
        location = f"{caller.f_code.co_filename}({caller.f_lineno}) `{caller.f_code.co_name}`"
    else:
        location = "<unknown>"
    sys.stdout.write(f"{_COLOURS[level]}File: {location}: {message}{_RESET} \n")


def debug(message: str) -> None:
    """Print a debug message."""
    _emit(Level.DEBUG, message)


def info(message: str) -> None:
    """Print an informational message."""
    _emit(Level.INFO, message)


def warn(message: str) -> None:
    """Print a warning."""
    _emit(Level.WARN, message)


def error(message: str) -> None:
    """Print an error message."""
    _emit(Level.ERROR, message)


def fatal(message: str) -> None:
    """Print a fatal message and raise :class:`FatalError`."""
    _emit(Level.FATAL, message)
    raise FatalError(message)