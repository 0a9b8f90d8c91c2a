from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from minicat.adapters.sources import FileSourceOpener, describe_source, read_lines
from minicat.application import ports
from minicat.domain.errors import SourceUnavailable


def test_file_opener_satisfies_port() -> None:
    assert isinstance(FileSourceOpener(), ports.SourceOpener)


def test_open_reads_file_bytes(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_bytes(b"alpha\nbeta\n")
    with FileSourceOpener().open(str(path)) as stream:
        assert stream.read() == b"alpha\nbeta\n"
    assert stream.closed


def test_open_missing_file_raises_source_unavailable(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    with pytest.raises(SourceUnavailable) as excinfo:
        FileSourceOpener().open(str(missing))
    assert excinfo.value.source == str(missing)
    assert str(missing) in str(excinfo.value)


def test_open_directory_raises_source_unavailable(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable):
        FileSourceOpener().open(str(tmp_path))


def test_empty_name_uses_injected_stdin_and_leaves_it_open() -> None:
    stdin = io.BytesIO(b"from stdin\n")
    with FileSourceOpener(stdin=stdin).open("") as stream:
        assert stream is stdin
    assert not stdin.closed


def test_read_lines_strips_terminators() -> None:
    stream = io.BytesIO(b"unix\ndos\r\n\nlast")
    assert list(read_lines(stream)) == [(1, "unix"), (2, "dos"), (3, ""), (4, "last")]


def test_read_lines_skips_undecodable_lines() -> None:
    stream = io.BytesIO(b"ok\n\xc3\x28 broken\nstill ok\n")
    assert list(read_lines(stream)) == [(1, "ok"), (3, "still ok")]


def test_read_lines_empty_stream() -> None:
    assert list(read_lines(io.BytesIO(b""))) == []


def test_describe_source() -> None:
    assert describe_source("") == "<stdin>"
    assert describe_source("-") == "-"


def test_closed_process_stdin_opens_as_empty_stream(monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", None)
    with FileSourceOpener().open("") as stream:
        assert stream.read() == b""


def test_process_stdin_uses_binary_buffer(monkeypatch) -> None:
    fake = io.TextIOWrapper(io.BytesIO(b"bytes in\n"), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", fake)
    with FileSourceOpener().open("") as stream:
        assert stream is fake.buffer
