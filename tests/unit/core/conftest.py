"""Shared fixtures for core unit tests"""

import pytest


TEN_LINES = [f"l{i}" for i in range(1, 11)]


@pytest.fixture(name="ten_lines")
def ten_lines_fixture():
    return list(TEN_LINES)


@pytest.fixture(name="two_changes")
def two_changes_fixture():
    """l2 -> X and l9 -> Y, separated by six unchanged lines (l3..l8)."""
    new = list(TEN_LINES)
    new[1] = "X"
    new[8] = "Y"
    return list(TEN_LINES), new


@pytest.fixture(name="five_letters")
def five_letters_fixture():
    return ["a", "b", "c", "d", "e"], ["a", "b", "X", "d", "e"]
