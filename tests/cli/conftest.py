"""Pytest configuration and fixtures for CLI tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def bib_file(tmp_path, example_bibtex):
    """The canonical example written to disk."""
    path = tmp_path / "refs.bib"
    path.write_text(example_bibtex, encoding="utf-8")
    return path


@pytest.fixture
def broken_bib_file(tmp_path):
    path = tmp_path / "broken.bib"
    path.write_text('@string{ok = "1"}\n@misc{k, title = missing}\n', encoding="utf-8")
    return path
