from __future__ import annotations

import dataclasses

import pytest

from minicat.domain.config import STDIN_SOURCE, CatConfig, NumberingMode
from minicat.domain.errors import ConflictingFlags


def test_empty_sources_default_to_stdin() -> None:
    assert CatConfig().sources == (STDIN_SOURCE,)
    assert CatConfig([]).sources == ("",)


def test_sources_keep_order_and_become_tuple() -> None:
    config = CatConfig(["b.txt", "a.txt", "-odd"])
    assert config.sources == ("b.txt", "a.txt", "-odd")


def test_numbering_modes() -> None:
    assert CatConfig().numbering is NumberingMode.NONE
    assert CatConfig(number=True).numbering is NumberingMode.ALL
    assert CatConfig(number_nonblank=True).numbering is NumberingMode.NONBLANK


def test_conflicting_flags_rejected() -> None:
    with pytest.raises(ConflictingFlags, match="cannot be combined"):
        CatConfig(["x"], number=True, number_nonblank=True)


def test_config_is_immutable() -> None:
    config = CatConfig(["a.txt"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.number = True  # type: ignore[misc]
