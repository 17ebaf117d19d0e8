"""Underlying logger setup.

The facade delegates to a plain stdlib logger. The SILLY and VERBOSE numbers
are named once; the tags themselves are applied by the formatters.
Propagation is switched off so embedding applications do not see every line
twice through the root logger. Handlers are left to the facade's transports.
"""
from __future__ import annotations

import logging

from .levels import Level, register_levels


def get_logger(name: str = "willie", level: Level = Level.INFO) -> logging.Logger:
    register_levels()
    logger = logging.getLogger(name)
    logger.setLevel(level.logging_level)
    logger.propagate = False
    return logger

__all__ = ["get_logger"]
