#!/usr/bin/env python3
"""
dictionary.py — Load word lists into a read-only Dictionary.

Sources:
  - Plain text: UTF-8, one word per line, trailing whitespace trimmed,
    blank lines ignored, duplicates collapse
  - MARISA trie (*.trie): compact binary dictionary built by wstrie
  - Embedded default: wordsieve/data/words.txt shipped with the package

Profiles (same as the trie builder):
  - full: every word
  - game: pure lowercase a-z words only (no hyphens, apostrophes, accents)

Iteration order is load order (first occurrence in a text file, key
order in a trie), so a given dictionary always scans the same way.
"""

import logging
import os
import re
from importlib import resources
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, Optional

import marisa_trie

from wordsieve.errors import ArgumentError, DictionaryError


logger = logging.getLogger(__name__)

DICT_ENV_VAR = 'WORDSIEVE_DICT'
TRIE_SUFFIX = '.trie'

GAME_PATTERN = re.compile(r'^[a-z]+$')


def filter_game(word: str) -> bool:
    """Game profile: only pure lowercase a-z words."""
    return bool(GAME_PATTERN.match(word))


PROFILES: Dict[str, Optional[Callable[[str], bool]]] = {
    'full': None,  # No filter - include all words
    'game': filter_game,
}


def get_profile(name: str) -> Optional[Callable[[str], bool]]:
    if name not in PROFILES:
        raise ArgumentError(f"Unknown profile {name!r} (expected one of: {', '.join(PROFILES)})")
    return PROFILES[name]


class Dictionary:
    """
    Read-only set of words with O(1) membership and stable iteration.

    Usage:
        with open(path, encoding='utf-8') as f:
            dictionary = Dictionary.from_lines(f)
        if 'crane' in dictionary: ...
    """

    def __init__(self, words: Iterable[str], source: str = '<memory>'):
        self.source = source
        self._words = dict.fromkeys(words)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        source: str = '<memory>',
        word_filter: Optional[Callable[[str], bool]] = None
    ) -> 'Dictionary':
        """Build from text lines, skipping blanks and filtered words."""
        def words():
            for line in lines:
                word = line.rstrip()
                if not word:
                    continue
                if word_filter and not word_filter(word):
                    continue
                yield word
        return cls(words(), source)

    def __contains__(self, word) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({self.source!r}, {len(self):,} words)"


def load_text(path: Path, word_filter: Optional[Callable[[str], bool]] = None) -> Dictionary:
    """Load a UTF-8 word-per-line file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return Dictionary.from_lines(f, str(path), word_filter)
    except UnicodeDecodeError as e:
        raise DictionaryError(f"{path}: not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise DictionaryError(f"{path}: {e.strerror or e}") from e


def load_trie(path: Path, word_filter: Optional[Callable[[str], bool]] = None) -> Dictionary:
    """Load a MARISA trie; words iterate in the trie's key order."""
    if not path.is_file():
        raise DictionaryError(f"{path}: No such file")
    trie = marisa_trie.Trie()
    try:
        trie.load(str(path))
    except OSError as e:
        raise DictionaryError(f"{path}: {e.strerror or e}") from e
    except RuntimeError as e:
        # marisa reports truncated or foreign files as MARISA_IO_ERROR
        raise DictionaryError(f"{path}: not a MARISA trie ({e})") from e
    words = trie.keys()
    if word_filter:
        words = [w for w in words if word_filter(w)]
    return Dictionary(words, str(path))


def load_embedded(word_filter: Optional[Callable[[str], bool]] = None) -> Dictionary:
    """Load the word list shipped inside the package."""
    resource = resources.files('wordsieve') / 'data' / 'words.txt'
    with resource.open('r', encoding='utf-8') as f:
        return Dictionary.from_lines(f, '<embedded>', word_filter)


def load_dictionary(path: Optional[Path] = None, profile: str = 'full') -> Dictionary:
    """
    Load a dictionary from a path, $WORDSIEVE_DICT, or the embedded list.

    Args:
        path: Text file or *.trie; None falls back to the environment, then
            to the embedded default
        profile: 'full' or 'game'

    Returns:
        Loaded Dictionary

    Raises:
        DictionaryError: The file cannot be opened or read
        ArgumentError: Unknown profile
    """
    word_filter = get_profile(profile)

    if path is None and os.environ.get(DICT_ENV_VAR):
        path = Path(os.environ[DICT_ENV_VAR])
        logger.debug(f"Using dictionary from ${DICT_ENV_VAR}: {path}")

    if path is None:
        dictionary = load_embedded(word_filter)
    elif path.suffix == TRIE_SUFFIX:
        dictionary = load_trie(path, word_filter)
    else:
        dictionary = load_text(path, word_filter)

    logger.debug(f"Loaded {dictionary!r} (profile: {profile})")
    return dictionary
