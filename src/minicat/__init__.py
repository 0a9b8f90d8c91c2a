"""Public package surface for ``minicat``.

Exposes the configuration value object, the processing loop, and the logger
accessor so ``import minicat`` and ``python -m minicat`` share one code path.
"""

from __future__ import annotations

from .core import run
from .domain.config import STDIN_SOURCE, CatConfig, NumberingMode
from .domain.errors import CatError, ConflictingFlags, SourceUnavailable
from .observability import get_logger

__all__ = [
    "STDIN_SOURCE",
    "CatConfig",
    "CatError",
    "ConflictingFlags",
    "NumberingMode",
    "SourceUnavailable",
    "get_logger",
    "run",
]
