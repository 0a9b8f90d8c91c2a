from __future__ import annotations

from minicat.domain.errors import CatError, ConflictingFlags, SourceUnavailable


def test_error_hierarchy() -> None:
    assert issubclass(ConflictingFlags, CatError)
    assert issubclass(ConflictingFlags, ValueError)
    assert issubclass(SourceUnavailable, CatError)


def test_source_unavailable_references_filename() -> None:
    error = SourceUnavailable("missing.txt", "No such file or directory")
    assert error.source == "missing.txt"
    assert error.reason == "No such file or directory"
    assert str(error) == "Failed to open missing.txt due to No such file or directory"
