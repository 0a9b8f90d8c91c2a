"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the source adapters, the processing loop,
and the CLI. The hierarchy lives in the domain layer so outer layers may
depend on it without the reverse being true.

Contents
--------
* :class:`CatError` – umbrella base class for all ``minicat`` failures.
* :class:`ConflictingFlags` – mutually exclusive numbering flags were combined.
* :class:`SourceUnavailable` – an input source could not be opened.

System Role
-----------
``ConflictingFlags`` is fatal and surfaces as a usage error before any output
is produced. ``SourceUnavailable`` is recoverable: the processing loop reports
it and moves on to the next source.
"""

from __future__ import annotations


class CatError(Exception):
    """Base type for all exceptions emitted by ``minicat``."""


class ConflictingFlags(CatError, ValueError):
    """Raised when "number all" and "number non-blank" are requested together.

    Why
    ----
    Both flags claim the line-number prefix; there is no sensible merge of the
    two, so the configuration refuses to exist.
    """


class SourceUnavailable(CatError):
    """Represents an input source that could not be opened for reading.

    Why
    ----
    Allow the opener to signal absence or permission problems without aborting
    the batch. The processing loop treats this as a non-fatal condition.

    Attributes
    ----------
    source:
        Source name exactly as supplied on the command line.
    reason:
        Human readable cause, usually the ``strerror`` of the ``OSError``.

    Examples
    --------
    >>> str(SourceUnavailable("missing.txt", "No such file or directory"))
    'Failed to open missing.txt due to No such file or directory'
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to open {source} due to {reason}")
        self.source = source
        self.reason = reason
