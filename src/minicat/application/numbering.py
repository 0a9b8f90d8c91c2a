"""Line-number formatting rules.

Purpose
-------
Turn decoded lines into output lines according to the active
:class:`~minicat.domain.config.NumberingMode`. Pure functions only; the
processing loop owns all I/O.

Contents
--------
* :func:`format_line` – render a single line given its position and the
  number of blank lines seen before it.
* :func:`format_lines` – stream version that tracks blank lines per source.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from ..domain.config import NumberingMode


def format_line(position: int, text: str, blank_count: int, numbering: NumberingMode) -> str:
    """Return the output form of *text* found at 1-based *position*.

    Parameters
    ----------
    position:
        1-based position of the line inside its source.
    text:
        Line content without its terminator.
    blank_count:
        Blank lines seen so far in the same source, *text* included when it
        is itself blank. Only used for :attr:`NumberingMode.NONBLANK`.
    numbering:
        Prefix policy.

    Examples
    --------
    >>> format_line(3, "gamma", 0, NumberingMode.ALL)
    '3\\tgamma'
    >>> format_line(3, "gamma", 1, NumberingMode.NONBLANK)
    '2\\tgamma'
    >>> format_line(2, "", 1, NumberingMode.NONBLANK)
    ''
    >>> format_line(7, "plain", 0, NumberingMode.NONE)
    'plain'
    """

    if numbering is NumberingMode.ALL:
        return f"{position}\t{text}"
    if numbering is NumberingMode.NONBLANK and text:
        return f"{position - blank_count}\t{text}"
    return text


def format_lines(lines: Iterable[tuple[int, str]], numbering: NumberingMode) -> Iterator[str]:
    """Yield formatted output for ``(position, text)`` pairs from one source.

    Positions may skip values where undecodable lines were dropped; the
    dropped lines still count as non-blank for ``NONBLANK`` numbering.

    Examples
    --------
    >>> list(format_lines([(1, "a"), (2, ""), (3, "b")], NumberingMode.NONBLANK))
    ['1\\ta', '', '2\\tb']
    """

    blank_count = 0
    for position, text in lines:
        if not text:
            blank_count += 1
        yield format_line(position, text, blank_count, numbering)
