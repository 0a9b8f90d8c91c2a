"""Structured logging helpers for the processing loop.

Purpose
    Keep every diagnostic emission predictable and contextual without forcing
    a logging backend on whoever embeds or runs ``minicat``.

Contents
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for per-source event payloads.

System Integration
    Used by :mod:`minicat.core` to narrate source lifecycle events. User-facing
    error text is written by the processing loop itself; these helpers only
    feed ``logging`` handlers that a host chose to attach.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger("minicat")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry."""

    _emit(logging.ERROR, message, fields)


def make_event(source: str, payload: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a structured logging payload for a source lifecycle event.

    Inputs
        source: Display name of the source (see ``describe_source``).
        payload: Optional mapping with extra diagnostic detail.
    Outputs
        dict[str, Any]: Data safe to unpack into :func:`log_*` helpers.

    Examples
    --------
    >>> make_event('notes.txt', {'lines': 3})
    {'source': 'notes.txt', 'lines': 3}
    """

    event: dict[str, Any] = {"source": source}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": dict(fields)})
