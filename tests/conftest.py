"""Test configuration and fixtures for dir2csv."""

import pytest


@pytest.fixture
def sample_layout():
    """Nested mapping for an in-memory source; host order is deliberately unsorted."""
    return {
        "z.txt": None,
        "B": {"b2.txt": None, "b1.txt": None},
        "A10": {"inner": {"deep.txt": None}, "x.txt": None},
        "A2": {},
    }


@pytest.fixture
def sample_directory(tmp_path):
    """Create the same shape as ``sample_layout`` on disk under a directory named R."""
    root = tmp_path / "R"
    (root / "B").mkdir(parents=True)
    (root / "B" / "b2.txt").touch()
    (root / "B" / "b1.txt").touch()
    (root / "A10" / "inner").mkdir(parents=True)
    (root / "A10" / "inner" / "deep.txt").touch()
    (root / "A10" / "x.txt").touch()
    (root / "A2").mkdir()
    (root / "z.txt").touch()
    return root
