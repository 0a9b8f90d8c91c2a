"""Composition root for ``minicat``.

Purpose
-------
Provide the single processing loop that walks the configured sources, opens
each through a :class:`~minicat.application.ports.SourceOpener`, applies the
numbering rules, and writes the result.

Contents
--------
* :func:`run` – process every source in order and report failures.
* :func:`_copy_source` – stream one opened source to the output.

System Role
-----------
Connects the domain configuration, the numbering rules, and the source
adapter. The CLI calls :func:`run` and nothing else.
"""

from __future__ import annotations

import sys
from typing import BinaryIO, TextIO

import click

from .adapters.sources import FileSourceOpener, describe_source, read_lines
from .application.numbering import format_lines
from .application.ports import SourceOpener
from .domain.config import CatConfig, NumberingMode
from .domain.errors import SourceUnavailable
from .observability import log_debug, log_error, make_event


def run(
    config: CatConfig,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    stdin: BinaryIO | None = None,
    opener: SourceOpener | None = None,
) -> tuple[str, ...]:
    """Concatenate ``config.sources`` onto *stdout* and return the failed sources.

    Why
    ----
    A missing or unreadable file must not abort the batch; the caller learns
    about it through stderr and the returned tuple, never through an exception.

    Parameters
    ----------
    config:
        Parsed, immutable configuration.
    stdout / stderr:
        Text streams for output and error messages. Default to the process
        streams, ``sys.stdout`` and ``sys.stderr``, resolved at call time.
    stdin:
        Binary stream used for the ``""`` source when no *opener* is given.
    opener:
        Strategy used to open sources. Defaults to :class:`FileSourceOpener`.

    Returns
    -------
    tuple[str, ...]
        Source names that could not be opened, in command-line order.

    Examples
    --------
    >>> import io
    >>> out, err = io.StringIO(), io.StringIO()
    >>> run(CatConfig([""], number=True), stdout=out, stderr=err, stdin=io.BytesIO(b"a\\nb\\n"))
    ()
    >>> out.getvalue()
    '1\\ta\\n2\\tb\\n'
    """

    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    source_opener = opener if opener is not None else FileSourceOpener(stdin=stdin)

    failed: list[str] = []
    for name in config.sources:
        try:
            context = source_opener.open(name)
        except SourceUnavailable as exc:
            log_error("source_open_failed", **make_event(describe_source(name), {"reason": exc.reason}))
            click.echo(str(exc), file=err)
            failed.append(name)
            continue
        with context as stream:
            log_debug("source_opened", **make_event(describe_source(name)))
            _copy_source(stream, out, config.numbering, name)
    return tuple(failed)


def _copy_source(stream: BinaryIO, out: TextIO, numbering: NumberingMode, name: str) -> None:
    """Write every decodable line of *stream* to *out*; numbering restarts here."""

    emitted = 0
    # content is written verbatim; no ANSI stripping
    for line in format_lines(read_lines(stream), numbering):
        out.write(f"{line}\n")
        emitted += 1
    log_debug("source_finished", **make_event(describe_source(name), {"lines": emitted}))
