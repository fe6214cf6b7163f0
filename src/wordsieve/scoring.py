#!/usr/bin/env python3
"""
scoring.py — Heuristic word scores for ranking guesses.

Two independent strategies:

  1. total_score(): uniqueness-weighted inverted Scrabble value. Words
     with many distinct, common letters probe the most of the alphabet.
  2. analyze(): pairwise comparison of a word against every other
     surviving word, counting the greens/yellows/misses it would produce
     if guessed.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Tuple

from wordsieve.errors import UnscorableLetterError


# Inverse of Scrabble tile values: common letters score highest
INVERTED_SCRABBLE: Dict[str, int] = {}
for _letters, _score in (
    ('aeioulnstr', 10),
    ('dg', 8),
    ('bcmp', 5),
    ('fhvwy', 4),
    ('k', 3),
    ('jx', 2),
    ('qz', 1),
):
    for _letter in _letters:
        INVERTED_SCRABBLE[_letter] = _score

UNIQUE_LETTER_WEIGHT = 20


def inverted_scrabble(letter: str) -> int:
    """Score a single letter; letters outside a-z are a bug upstream."""
    try:
        return INVERTED_SCRABBLE[letter]
    except KeyError:
        raise UnscorableLetterError(letter) from None


def unique_letters(word: str) -> int:
    return len(set(word))


def total_score(word: str) -> int:
    """20 points per distinct letter plus the inverted value of every letter."""
    return UNIQUE_LETTER_WEIGHT * unique_letters(word) + sum(inverted_scrabble(c) for c in word)


# =============================================================================
# Pairwise Analysis
# =============================================================================

@dataclass
class WordStats:
    """Feedback a guess would earn summed over the other surviving words."""
    word: str
    unique_letters: int = 0
    green: int = 0
    yellow: int = 0
    miss: int = 0

    @property
    def hits(self) -> int:
        return self.green + self.yellow

    def to_dict(self) -> Dict:
        return {
            'word': self.word,
            'unique_letters': self.unique_letters,
            'green': self.green,
            'yellow': self.yellow,
            'miss': self.miss,
        }


def analyze_score(other: str, word: str) -> Tuple[int, int, int]:
    """
    Compare `word` against `other` position by position.

    Both words must have the same length.

    Returns:
        (green, yellow, miss) where green counts equal positions, yellow
        counts letters of `word` found elsewhere in `other`
    """
    present = set(other)
    green = yellow = miss = 0
    for mine, theirs in zip(word, other):
        if mine == theirs:
            green += 1
        elif mine in present:
            yellow += 1
        else:
            miss += 1
    return green, yellow, miss


def analyze(survivors: Iterable[str], word: str) -> WordStats:
    """Sum analyze_score over every other survivor of the same length."""
    stats = WordStats(word=word, unique_letters=unique_letters(word))
    for other in survivors:
        if other == word or len(other) != len(word):
            continue
        green, yellow, miss = analyze_score(other, word)
        stats.green += green
        stats.yellow += yellow
        stats.miss += miss
    return stats


# Sort keys for analysis results; larger is better
ANALYSIS_ORDERS: Dict[str, Callable[[WordStats], Tuple[int, ...]]] = {
    'green': lambda s: (s.green,),
    'green-yellow': lambda s: (s.hits,),
    'unique': lambda s: (s.unique_letters, s.hits),
}
