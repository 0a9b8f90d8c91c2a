"""Input source adapter.

Purpose
-------
Resolve source names into readable byte streams and split those streams into
decoded lines. Implements :class:`minicat.application.ports.SourceOpener`.

Key behaviours
--------------
* The empty source name selects standard input, which is never closed here.
* ``OSError`` from ``open`` becomes :class:`SourceUnavailable` so the loop can
  report it and continue.
* Lines are decoded one at a time; a line that is not valid in the input
  encoding is dropped while its position is still consumed.
"""

from __future__ import annotations

import io
import sys
from contextlib import contextmanager, nullcontext
from typing import BinaryIO, ContextManager, Final, Iterable, Iterator

from ..domain.config import STDIN_SOURCE
from ..domain.errors import SourceUnavailable
from ..observability import log_debug

DEFAULT_ENCODING: Final[str] = "utf-8"


def describe_source(name: str) -> str:
    """Return a display name for *name*.

    Examples
    --------
    >>> describe_source("")
    '<stdin>'
    >>> describe_source("notes.txt")
    'notes.txt'
    """

    return "<stdin>" if name == STDIN_SOURCE else name


class FileSourceOpener:
    """Open files from the local filesystem, or standard input for ``""``."""

    def __init__(self, *, stdin: BinaryIO | None = None) -> None:
        """Initialise the opener with an explicit *stdin* for testability.

        Parameters
        ----------
        stdin:
            Binary stream used for the stdin sentinel. Defaults to
            the process standard input resolved on each open; a closed stdin
            reads as empty.
        """

        self._stdin = stdin

    def open(self, name: str) -> ContextManager[BinaryIO]:
        """Return a context manager yielding the binary stream behind *name*.

        Raises
        ------
        SourceUnavailable
            When the file cannot be opened (missing, unreadable, directory).
        """

        if name == STDIN_SOURCE:
            return nullcontext(self._stdin if self._stdin is not None else _process_stdin())
        try:
            handle = open(name, "rb")
        except OSError as exc:
            raise SourceUnavailable(name, exc.strerror or str(exc)) from exc
        return _closing(handle)


def _process_stdin() -> BinaryIO:
    """Return the binary stdin, or an empty stream when fd 0 is closed."""

    if sys.stdin is None:
        return io.BytesIO()
    return getattr(sys.stdin, "buffer", sys.stdin)


@contextmanager
def _closing(handle: BinaryIO) -> Iterator[BinaryIO]:
    try:
        yield handle
    finally:
        handle.close()
        log_debug("source_closed", source=getattr(handle, "name", None))


def read_lines(stream: Iterable[bytes], *, encoding: str = DEFAULT_ENCODING) -> Iterator[tuple[int, str]]:
    """Yield ``(position, text)`` for each decodable line of *stream*.

    The trailing ``\\n`` (or ``\\r\\n``) is stripped. Positions are 1-based and
    keep counting across lines that fail to decode.

    Examples
    --------
    >>> list(read_lines([b"one\\n", b"\\xff\\n", b"three\\r\\n", b"four"]))
    [(1, 'one'), (3, 'three'), (4, 'four')]
    """

    for position, raw in enumerate(stream, start=1):
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError:
            continue
        yield position, _strip_terminator(text)


def _strip_terminator(text: str) -> str:
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text
