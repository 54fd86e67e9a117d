"""Pytest configuration and fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Isolate environment variables and config lookup for each test.

    Config files are searched relative to the working directory and
    XDG_CONFIG_HOME, so both point into a fresh temporary directory.
    """
    original_env = os.environ.copy()
    for name in list(os.environ):
        if name.startswith("BIBSCAN_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def example_bibtex():
    """The canonical example with preamble, comments, strings and an entry."""
    return (
        '@preamble{ "A bibtex preamble" }\n'
        "@Comment{ Here is a comment. }\n"
        "Another comment!\n"
        '@string(name="Charles Vandevoorde")\n'
        '@string(github="https://github.com/charlesvdv")\n'
        '@misc{my_citation_key, author=name, title="nom-bibtex", '
        'note="Github: " # github}\n'
    )


@pytest.fixture
def sample_bibtex():
    """A larger, realistic BibTeX file."""
    return """
% Generated by hand
@string{ACM = "ACM Press"}
@string{YEAR = "2024"}

@article{smith2024neural,
    author = {John Smith and Jane Doe},
    title = {Neural Networks for {NLP}},
    journal = {Machine Learning Review},
    year = YEAR,
    volume = 42,
    pages = {123--145},
    month = mar,
}

@book{knuth1984tex,
    author = {Donald E. Knuth},
    title = {The {TeX}book},
    publisher = ACM,
    year = {1984}
}

@comment{This is a block comment that should be preserved}

@inproceedings(lee2023attention,
    author = "Lee, " # "S." # " and Park, K.",
    title = "Attention (Revisited)",
    booktitle = ACM # " Proceedings",
    year = 2023
)
"""
