"""Package metadata and public API for willie.

The version comes from importlib.metadata so an editable install or wheel
reports what pyproject.toml declares; the fallback covers running from a
source checkout without installation.
"""

from __future__ import annotations

from importlib import metadata as _metadata

from .config import WillieConfig
from .facade import Willie, get_willie
from .levels import Level

__all__ = ["Level", "Willie", "WillieConfig", "__version__", "get_willie"]

_FALLBACK_VERSION = "0.1.0"  # MUST match pyproject.toml [project].version

try:  # pragma: no cover - success path covered indirectly via CLI test
	__version__ = _metadata.version("willie")  # type: ignore[assignment]
except Exception:  # pragma: no cover - fallback exercised if metadata missing
	__version__ = _FALLBACK_VERSION
