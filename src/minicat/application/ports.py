"""Application-layer ports describing adapter responsibilities.

Contents
--------
* :class:`SourceOpener` – turns a source name into a readable binary stream.

System Role
-----------
:func:`minicat.core.run` depends on this protocol rather than on the
filesystem, so tests can substitute in-memory sources.
"""

from __future__ import annotations

from typing import BinaryIO, ContextManager, Protocol, runtime_checkable


@runtime_checkable
class SourceOpener(Protocol):
    """Open a named input source for buffered reading.

    Why
    ----
    Keep the decision "file or standard input" and the ``OSError`` translation
    out of the processing loop.
    """

    def open(self, name: str) -> ContextManager[BinaryIO]:
        """Return a context manager yielding a binary stream or raise ``SourceUnavailable``."""
        ...
