"""Transport construction for the facade.

A transport is a plain :class:`logging.Handler` registered on the underlying
logger. Rendering follows one line layout everywhere::

    12:34:56.789 -    info: message key=value, other=1

Console output goes through a rich Console; file transports write the same
layout, with the tag wrapped in ANSI color codes when ``colorize`` is set.
"""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from typing import Any, Mapping, Optional, Tuple

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style
from rich.text import Text

from .config import WillieConfig
from .levels import Level


def format_meta(meta: Mapping[str, Any]) -> str:
    return ", ".join(f"{key}={value}" for key, value in meta.items())


def timestamped_filename(prefix: str, pattern: str, now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime(pattern)
    return "%s_%s.log" % (prefix, stamp)


class WillieFormatter(logging.Formatter):
    def __init__(
        self,
        config: Optional[WillieConfig] = None,
        colorize: Optional[bool] = None,
        json_lines: Optional[bool] = None,
    ) -> None:
        cfg = config or WillieConfig()
        super().__init__()
        # formatTime() falls back to these when no datefmt is given
        self.default_time_format = cfg.timestamp_format
        self.default_msec_format = cfg.msec_format
        self.colorize = cfg.colorize if colorize is None else colorize
        self.json_lines = cfg.json if json_lines is None else json_lines

    def parts(self, record: logging.LogRecord) -> Tuple[str, Level, str]:
        """Split a record into (timestamp, level, message with meta)."""
        message = record.getMessage()
        meta = getattr(record, "meta", None)
        if meta:
            message = f"{message} {format_meta(meta)}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return self.formatTime(record), Level.from_logging_level(record.levelno), message

    def format_json(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": Level.from_logging_level(record.levelno).tag.strip(),
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "meta", None) or {})
        return json.dumps(payload, default=str)

    def format(self, record: logging.LogRecord) -> str:
        if self.json_lines:
            return self.format_json(record)
        timestamp, level, message = self.parts(record)
        tag = level.tag
        if self.colorize:
            tag = Style(color=level.color).render(tag, color_system=ColorSystem.STANDARD)
        return f"{timestamp} - {tag}: {message}"


class ConsoleHandler(logging.Handler):
    """Print records through a rich Console, tag styled in the level color."""

    def __init__(
        self,
        console: Optional[Console] = None,
        level: int = logging.NOTSET,
        config: Optional[WillieConfig] = None,
    ) -> None:
        super().__init__(level)
        cfg = config or WillieConfig()
        self.console = console or Console()
        self.colorize = cfg.colorize
        self.setFormatter(WillieFormatter(cfg, colorize=False))

    def render(self, record: logging.LogRecord) -> Text:
        formatter = self.formatter
        if not isinstance(formatter, WillieFormatter):
            raise TypeError(f"ConsoleHandler needs a WillieFormatter, got {type(formatter).__name__}")
        if formatter.json_lines:
            return Text(formatter.format_json(record))
        timestamp, level, message = formatter.parts(record)
        text = Text()
        text.append(f"{timestamp} - ")
        text.append(level.tag, style=level.color if self.colorize else None)
        text.append(f": {message}")
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.console.print(self.render(record), soft_wrap=True, highlight=False)
        except Exception:  # noqa: BLE001 - routed through logging's error hook
            self.handleError(record)


def console_transport(config: WillieConfig, console: Optional[Console] = None) -> ConsoleHandler:
    return ConsoleHandler(console=console, level=config.level.logging_level, config=config)


def file_transport(filename: str, config: WillieConfig) -> logging.FileHandler:
    handler = logging.FileHandler(filename, encoding="utf-8")
    handler.setLevel(config.level.logging_level)
    handler.setFormatter(WillieFormatter(config))
    return handler


def rolling_file_transport(name: str, config: WillieConfig) -> TimedRotatingFileHandler:
    os.makedirs(config.log_directory, exist_ok=True)
    path = os.path.join(config.log_directory, f"{name}.log")
    handler = TimedRotatingFileHandler(path, when="midnight", encoding="utf-8")
    handler.suffix = config.rolling_date_pattern
    handler.setLevel(config.level.logging_level)
    handler.setFormatter(WillieFormatter(config))
    return handler


__all__ = [
    "ConsoleHandler",
    "WillieFormatter",
    "console_transport",
    "file_transport",
    "format_meta",
    "rolling_file_transport",
    "timestamped_filename",
]
