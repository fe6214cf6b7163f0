#!/usr/bin/env python3
"""
trie_build.py — Compile a word list into a compact MARISA trie.

Usage:
  wstrie words.txt words.trie [--profile game] [--length 5]

Profiles:
  - full (default): every word in the list
  - game: pure a-z words only (no hyphens, apostrophes, accents)

The result loads with `--dict words.trie` in the other front-ends and
iterates in the trie's key order.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import marisa_trie

from wordsieve.errors import DictionaryError
from wordsieve.progress_display import ProgressDisplay


logger = logging.getLogger(__name__)


def build_trie(
    input_path: Path,
    trie_path: Path,
    word_filter: Optional[Callable[[str], bool]] = None,
    length: int = 0,
    verbose: bool = False
) -> marisa_trie.Trie:
    """
    Build a MARISA trie from a word-per-line text file.

    Args:
        input_path: UTF-8 word list
        trie_path: Output path for the trie
        word_filter: Optional profile filter (returns True to keep a word)
        length: Keep only words of this many letters (0 keeps all)
        verbose: Log counts and show live progress

    Returns:
        The saved trie

    Raises:
        DictionaryError: The input cannot be read or the output written
    """
    words = []
    filtered_count = 0
    try:
        with ProgressDisplay("Loading words", enabled=verbose) as progress, \
                open(input_path, 'r', encoding='utf-8') as f:
            for line_num, line in enumerate(f, 1):
                word = line.rstrip()
                if not word:
                    continue
                if (word_filter and not word_filter(word)) or (length and len(word) != length):
                    filtered_count += 1
                else:
                    words.append(word)
                progress.update(Lines=line_num, Words=len(words), Filtered=filtered_count)
    except UnicodeDecodeError as e:
        raise DictionaryError(f"{input_path}: not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise DictionaryError(f"{input_path}: {e.strerror or e}") from e

    if verbose:
        logger.info(f"  -> Loaded {len(words):,} words")
        if filtered_count > 0:
            logger.info(f"  -> Filtered out {filtered_count:,} words")

    trie = marisa_trie.Trie(words)

    try:
        trie_path.parent.mkdir(parents=True, exist_ok=True)
        trie.save(str(trie_path))
    except OSError as e:
        raise DictionaryError(f"{trie_path}: {e.strerror or e}") from e

    if verbose:
        trie_size_kb = trie_path.stat().st_size / 1024
        logger.info(f"  Trie saved: {trie_path} ({trie_size_kb:.1f} KB)")
        logger.info(f"  Word count: {len(trie):,}")
    return trie
