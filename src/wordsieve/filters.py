#!/usr/bin/env python3
"""
filters.py — Word predicates for puzzle feedback.

Provides the building blocks every pass is composed from:
  1. Position masks (green letters at fixed positions)
  2. Letter multisets (yellow / known letters, with multiplicity)
  3. Exclusion (gray letters)

All predicates are pure and never raise: bad input simply fails to match.
Comparison is over code points, so "naïve" has length 5 here, not 6.

WILDCARDS:
  A mask position holding the wildcard accepts any letter. The anagram
  front-end uses '?', the Wordle front-end '_'. Every function takes the
  wildcard as a parameter; the default is '?'.
"""

from collections import Counter
from typing import Iterable, Set

ANAGRAM_WILDCARD = '?'
WORDLE_WILDCARD = '_'


# =============================================================================
# Position Masks
# =============================================================================

def matches(mask: str, word: str, wildcard: str = ANAGRAM_WILDCARD) -> bool:
    """
    Check a word against a position mask.

    An empty mask constrains nothing, but only when there is something to
    constrain: an empty mask never matches an empty word.

    Args:
        mask: Positional template, e.g. '?i?e?'
        word: Candidate word
        wildcard: Sentinel accepting any letter at its position

    Returns:
        True if every non-wildcard mask letter equals the word letter
    """
    if not mask:
        return len(word) > 0
    if len(mask) != len(word):
        return False
    for want, got in zip(mask, word):
        if want != wildcard and want != got:
            return False
    return True


def greens(mask: str, wildcard: str = ANAGRAM_WILDCARD) -> int:
    """Count the constrained (non-wildcard) positions of a mask."""
    return sum(1 for c in mask if c != wildcard)


# =============================================================================
# Letter Multisets
# =============================================================================

def counts(*strings: str, wildcard: str = ANAGRAM_WILDCARD) -> Counter:
    """
    Count every non-wildcard letter across all strings.

    Args:
        *strings: Words, letter sets or mask-shaped yellow strings
        wildcard: Sentinel that is never counted

    Returns:
        Counter mapping letter -> count
    """
    letters: Counter = Counter()
    for s in strings:
        letters.update(c for c in s if c != wildcard)
    return letters


def subset(a: Counter, b: Counter) -> bool:
    """True iff every letter of `a` occurs in `b` at least as often."""
    for letter, n in a.items():
        if b.get(letter, 0) < n:
            return False
    return True


def excludes(exclude: Set[str], word: str) -> bool:
    """True iff no letter of `word` is in the exclude set."""
    if not exclude:
        return True
    return exclude.isdisjoint(word)


# =============================================================================
# Yellow Feedback
# =============================================================================

def yellows_all(yellows: Iterable[str], word: str, wildcard: str = ANAGRAM_WILDCARD) -> bool:
    """
    Check that a word carries every yellow constraint's letters.

    Each yellow is mask-shaped ('_i___'); its non-wildcard letters must be
    present in the word with at least the same multiplicity. Only presence
    is checked, not that the letter moved away from its yellow position.

    Args:
        yellows: Mask-shaped yellow strings (or plain letter strings)
        word: Candidate word
        wildcard: Sentinel ignored in the yellow strings

    Returns:
        True if each yellow's letters are a sub-multiset of the word's
    """
    have = counts(word, wildcard=wildcard)
    for yellow in yellows:
        if not subset(counts(yellow, wildcard=wildcard), have):
            return False
    return True


def yellows_any(yellows: Iterable[str], word: str, wildcard: str = ANAGRAM_WILDCARD) -> bool:
    """
    Check whether a word repeats any already-known yellow letter.

    Used when hunting for a discovery guess: a word sharing a yellow
    letter spends a position on information we already have.
    """
    known = counts(*yellows, wildcard=wildcard)
    if not known:
        return False
    return any(c in known for c in word)
