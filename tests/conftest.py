"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path

from wordsieve.dictionary import Dictionary


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_words():
    """Sample word list for testing (small dataset, mostly five letters)."""
    return [
        "crane",
        "stare",
        "slate",
        "liker",
        "laker",
        "lipas",
        "urali",
        "ghost",
        "cab",
        "abc",
        "bca",
        "cat",
        "act",
        "tac",
        "apple",
        "grape",
        "great",
        "greet",
        "tiger",
        "trace",
        "react",
        "cater",
        "crate",
        "don't",
        "naïve",
    ]


@pytest.fixture
def sample_dictionary(sample_words):
    """Dictionary built from sample_words, in list order."""
    return Dictionary(sample_words, source="<sample>")


@pytest.fixture
def dict_file(sample_words, tmp_path):
    """Sample words written as a text dictionary, with a blank line and a duplicate."""
    path = tmp_path / "words.txt"
    lines = sample_words[:5] + ["", "crane  "] + sample_words[5:]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
