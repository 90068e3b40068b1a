"""Shared fixtures: temporary location files and directories built on them."""

import pytest

from campus_guide import DirectoryService


@pytest.fixture
def data_file(tmp_path):
    """Path to a location file that does not exist yet."""
    return tmp_path / "university_data.txt"


@pytest.fixture
def write_data(data_file):
    """Write the given lines to the data file and return its path."""
    def _write(*lines):
        data_file.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return data_file
    return _write


@pytest.fixture
def directory(write_data):
    """Directory loaded from a small two-entry file."""
    path = write_data(
        "# Location Data File",
        "c_lab;Engineering Hall;2nd;204;Computer Lab",
        "library;Main Library;Ground;G01;Study area",
    )
    return DirectoryService.open(path)
