"""Indentation-aware logging facade.

Example::

    log = Willie().log_to_console()
    log.info("syncing %d files", 3).indent()
    log.block(output, log.info)
    log.dedent().hr()

Every public method returns the facade so calls chain.
"""
from __future__ import annotations

import contextlib
import logging
import re
from collections.abc import Mapping
from typing import Any, Callable, Iterator, List, Optional, Tuple

from .config import HR_CHAR, HR_WIDTH, WillieConfig
from .indentation import Indentation
from .levels import Level
from .logutil import get_logger
from .profiler import Profiler
from .transports import console_transport, file_transport, rolling_file_transport, timestamped_filename

Callback = Callable[[Level, str, Optional[Mapping[str, Any]]], Any]


_PLACEHOLDER = re.compile(r"%(?:\([^)]*\))?[-#0 +]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[diouxXeEfFgGcrsa%]")


def _placeholders(msg: Any) -> int:
    if not isinstance(msg, str):
        return 0
    return sum(1 for token in _PLACEHOLDER.findall(msg) if token != "%%")


def _split_trailing(
    msg: Any, args: Tuple[Any, ...]
) -> Tuple[Tuple[Any, ...], Optional[Mapping[str, Any]], Optional[Callback]]:
    # Trailing order is (..., meta, callback); either may be absent. A trailing
    # mapping is meta only when the format string has no placeholder left for it.
    rest = list(args)
    callback = rest.pop() if rest and callable(rest[-1]) else None
    meta = None
    if rest and isinstance(rest[-1], Mapping) and len(rest) > _placeholders(msg):
        meta = rest.pop()
    return tuple(rest), meta, callback


def _interpolate(message: str, args: Tuple[Any, ...]) -> str:
    # Same rule as LogRecord.getMessage(): a lone mapping feeds %(name)s fields
    if not args:
        return message
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return message % args[0]
    return message % args


class Willie:
    def __init__(self, logger: Optional[logging.Logger] = None, config: Optional[WillieConfig] = None) -> None:
        self.config = config or WillieConfig()
        self.logger = logger if logger is not None else get_logger(level=self.config.level)
        self._indentation = Indentation(self.config.indent_unit)
        self._profiler = Profiler()
        self._transports: List[logging.Handler] = []
        if self.config.log_to_console:
            self.log_to_console()

    @property
    def depth(self) -> int:
        return self._indentation.depth

    @property
    def prefix(self) -> str:
        return self._indentation.prefix

    @property
    def indent_unit(self) -> str:
        return self._indentation.unit

    @property
    def transports(self) -> List[logging.Handler]:
        return list(self._transports)

    # Leveled logging

    def _emit(self, level: Level, msg: Any, args: Tuple[Any, ...]) -> "Willie":
        args, meta, callback = _split_trailing(msg, args)
        message = self._indentation.apply(msg)
        extra = {"meta": dict(meta)} if meta else None
        # stacklevel 3 attributes the record to the caller of info()/log()
        self.logger.log(level.logging_level, message, *args, extra=extra, stacklevel=3)
        if callback is not None:
            callback(level, _interpolate(message, args), meta)
        return self

    def log(self, level: Level, msg: Any, *args: Any) -> "Willie":
        return self._emit(level, msg, args)

    def silly(self, msg: Any, *args: Any) -> "Willie":
        return self._emit(Level.SILLY, msg, args)

    def debug(self, msg: Any, *args: Any) -> "Willie":
        return self._emit(Level.DEBUG, msg, args)

    def verbose(self, msg: Any, *args: Any) -> "Willie":
        return self._emit(Level.VERBOSE, msg, args)

    def info(self, msg: Any, *args: Any) -> "Willie":
        return self._emit(Level.INFO, msg, args)

    def warn(self, msg: Any, *args: Any) -> "Willie":
        return self._emit(Level.WARN, msg, args)

    def error(self, msg: Any, *args: Any) -> "Willie":
        return self._emit(Level.ERROR, msg, args)

    def block(self, text: str, line_logger: Callable[[str], Any]) -> "Willie":
        """Log ``text`` one stripped, non-empty line at a time through ``line_logger``."""
        for line in text.split("\n"):
            line = line.strip()
            if line:
                line_logger(line)
        return self

    def profile(self, key: Any, message: Any = "") -> "Willie":
        """Start the timer ``key``, or stop it and log ``message`` with its duration."""
        message = self._indentation.apply(message)
        elapsed = self._profiler.toggle(key)
        if elapsed is not None:
            self.logger.log(
                Level.INFO.logging_level,
                message,
                extra={"meta": {"durationMs": int(round(elapsed))}},
                stacklevel=2,
            )
        return self

    # Indentation

    def indent(self) -> "Willie":
        self._indentation.indent()
        return self

    def dedent(self) -> "Willie":
        self._indentation.dedent()
        return self

    @contextlib.contextmanager
    def indented(self) -> Iterator["Willie"]:
        self.indent()
        try:
            yield self
        finally:
            self.dedent()

    def hr(self) -> "Willie":
        self.logger.log(Level.INFO.logging_level, HR_CHAR * HR_WIDTH, stacklevel=2)
        return self

    # Transports

    def add_transport(self, handler: logging.Handler) -> "Willie":
        self.logger.addHandler(handler)
        self._transports.append(handler)
        return self

    def log_to_console(self, console: Any = None) -> "Willie":
        return self.add_transport(console_transport(self.config, console=console))

    def log_to_file_with_timestamp(self, prefix: str) -> "Willie":
        filename = timestamped_filename(prefix, self.config.file_date_pattern)
        return self.add_transport(file_transport(filename, self.config))

    def log_to_rolling_file(self, name: str) -> "Willie":
        return self.add_transport(rolling_file_transport(name, self.config))

    def close(self) -> None:
        """Detach and close every transport this facade registered."""
        for handler in self._transports:
            self.logger.removeHandler(handler)
            handler.close()
        self._transports.clear()


_DEFAULT: Optional[Willie] = None


def get_willie() -> Willie:
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = Willie()
    return _DEFAULT


__all__ = ["Willie", "get_willie"]
