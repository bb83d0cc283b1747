"""A minimal named, levelled printf-style logger."""

import sys
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4


@dataclass
class Logger:
    """Writes ``[name] - message`` lines for messages at or below its level."""

    name: str = ""
    level: LogLevel = LogLevel.TRACE
    stream: object = None

    def _emit(self, format, args):
        out = self.stream if self.stream is not None else sys.stdout
        message = format % args if args else format
        out.write(f"[{self.name}] - {message}")

    def _log(self, level, format, args):
        if self.level < level:
            return
        self._emit(format, args)

    def trace(self, format, *args):
        self._log(LogLevel.TRACE, format, args)

    def debug(self, format, *args):
        self._log(LogLevel.DEBUG, format, args)

    def info(self, format, *args):
        self._log(LogLevel.INFO, format, args)

    def warn(self, format, *args):
        self._log(LogLevel.WARN, format, args)

    def error(self, format, *args):
        self._emit(format, args)