"""
debug.py - Package-wide logging for the Connect Four session core

Every component logs through the ``debug`` singleton below, tagging its
messages with a component name ("board", "game", "cli"). The tag lets a
troubleshooting session narrow output to one part of the system without
touching the standard logging configuration.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, Iterable, Optional, Set

LOGGER_NAME = "connect_four"
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# logging has no TRACE; trace lines go out at DEBUG with a prefix
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 1,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}


class _ConsoleHandler(logging.StreamHandler):
    """Marker type so one logger never gets two console handlers."""


class DebugManager:
    """Filters by level and component, then hands messages to a Logger."""

    def __init__(self, logger_name: str = LOGGER_NAME):
        self._level = DebugLevel.INFO
        self._enabled = True
        self._components: Set[str] = set()
        self._timers: Dict[str, float] = {}

        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(LEVEL_MAP[self._level])
        if not any(isinstance(h, _ConsoleHandler) for h in self._logger.handlers):
            console = _ConsoleHandler(sys.stdout)
            console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
            self._logger.addHandler(console)

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: DebugLevel = None,
                  enabled: bool = None,
                  log_file: str = None,
                  components: Iterable[str] = None):
        """
        Change any subset of the settings; arguments left as None are kept.

        Args:
            level: Most verbose level to emit
            enabled: Master switch for all output
            log_file: Also write to this file; "" stops file output
            components: Only emit messages tagged with these (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])
        if enabled is not None:
            self._enabled = enabled
        if log_file is not None:
            self._set_log_file(log_file)
        if components is not None:
            self._components = set(components)

    def _set_log_file(self, path: str):
        for handler in [h for h in self._logger.handlers if isinstance(h, logging.FileHandler)]:
            self._logger.removeHandler(handler)
            handler.close()
        if path:
            handler = logging.FileHandler(path)
            handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            self._logger.addHandler(handler)

    def is_enabled_for(self, level: DebugLevel, component: str = None) -> bool:
        if not self._enabled or level == DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        return not (component and self._components and component not in self._components)

    def log(self, level: DebugLevel, message: str, component: str = None):
        if not self.is_enabled_for(level, component):
            return
        if component:
            message = f"[{component}] {message}"
        if level == DebugLevel.TRACE:
            message = f"TRACE: {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: str = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: str = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: str = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: str = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: str = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: str = None) -> Optional[float]:
        """
        Stop a timer started with start_timer() and trace the elapsed time.

        Returns:
            Seconds since start_timer(), or None if the marker was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"{marker_name} took {elapsed:.6f}s", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a name such as "debug" (case-insensitive)."""
        level = DebugLevel.__members__.get(level_str.upper())
        if level is None:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")
        return True


debug = DebugManager()
