"""Domain-level configuration value object.

Purpose
-------
Anchor the immutable :class:`CatConfig` that carries the parsed command line
into the processing loop. This module contains no I/O.

Contents
--------
* :data:`STDIN_SOURCE` – sentinel source name meaning "standard input".
* :class:`NumberingMode` – which lines receive a line-number prefix.
* :class:`CatConfig` – the frozen configuration built once per invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import ConflictingFlags

STDIN_SOURCE: Final[str] = ""
"""Source name that selects standard input instead of a file."""


class NumberingMode(Enum):
    """Line-number prefix policy derived from the numbering flags."""

    NONE = "none"
    ALL = "all"
    NONBLANK = "nonblank"


@dataclass(frozen=True, slots=True)
class CatConfig:
    """Immutable configuration consumed by :func:`minicat.core.run`.

    Parameters
    ----------
    sources:
        Ordered source names. An empty sequence is normalised to
        ``(STDIN_SOURCE,)`` so the loop always has at least one source.
        Any iterable is accepted and frozen into a tuple.
    number:
        Prefix every line with its 1-based position (``-n``).
    number_nonblank:
        Prefix only non-empty lines, counting them independently of blank
        lines (``-b``).

    Examples
    --------
    >>> CatConfig().sources
    ('',)
    >>> CatConfig(["a.txt", "b.txt"], number=True).numbering
    <NumberingMode.ALL: 'all'>
    >>> CatConfig(number=True, number_nonblank=True)
    Traceback (most recent call last):
    ...
    minicat.domain.errors.ConflictingFlags: -n/--number cannot be combined with -b/--number-nonblank
    """

    sources: tuple[str, ...] = (STDIN_SOURCE,)
    number: bool = False
    number_nonblank: bool = False

    def __post_init__(self) -> None:
        """Reject conflicting flags and freeze *sources* into a non-empty tuple.

        Side Effects
        ------------
        Replaces ``sources`` via ``object.__setattr__`` during initialisation
        only, so callers may pass any iterable (lists from click included).
        """

        if self.number and self.number_nonblank:
            raise ConflictingFlags("-n/--number cannot be combined with -b/--number-nonblank")
        object.__setattr__(self, "sources", tuple(self.sources) or (STDIN_SOURCE,))

    @property
    def numbering(self) -> NumberingMode:
        """Return the active :class:`NumberingMode`."""

        if self.number:
            return NumberingMode.ALL
        if self.number_nonblank:
            return NumberingMode.NONBLANK
        return NumberingMode.NONE

