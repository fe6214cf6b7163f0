#!/usr/bin/env python3
"""
generate.py — Candidate word generation from letter sets.

Given the letters a word must contain (known) and the letters that may
fill the remaining slots (maybe), enumerate every distinct string of the
mask's length that uses them and fits the mask. The dictionary pass then
keeps only real words found in that candidate set.

Cost is O(L! * |A|^m) for mask length L, padding alphabet A and m filler
slots. Keep m and the alphabet small (Wordle: L <= 5, m <= 3).
"""

import logging
from itertools import product
from typing import List, Optional, Set

from wordsieve.filters import ANAGRAM_WILDCARD, matches


logger = logging.getLogger(__name__)


def choose(letters: str, count: int) -> List[str]:
    """
    Select exactly `count` letters, preserving their order.

    Walks every bit pattern 0..2^n-1 over the input positions, so repeated
    letters yield repeated selections. choose("abcde", 3) has 10 results.
    """
    output = []
    for bits in range(1 << len(letters)):
        selection = [c for i, c in enumerate(letters) if bits >> i & 1]
        if len(selection) == count:
            output.append(''.join(selection))
    return output


def powerset(letters: str) -> List[str]:
    """Every nonempty order-preserving selection of `letters`."""
    output = []
    for bits in range(1, 1 << len(letters)):
        output.append(''.join(c for i, c in enumerate(letters) if bits >> i & 1))
    return output


def choose_any(letters: str, count: int) -> List[str]:
    """Every length-`count` string over `letters`, with replacement."""
    return [''.join(combo) for combo in product(letters, repeat=count)]


def permutations(
    letters: str,
    mask: str = '',
    wildcard: str = ANAGRAM_WILDCARD,
    into: Optional[Set[str]] = None
) -> Set[str]:
    """
    Arrange `letters` in every order and keep those that fit the mask.

    Each letter in turn is inserted at every index of a single working
    buffer; completed arrangements land in one shared result set, which
    also collapses arrangements that differ only in repeated letters.

    Args:
        letters: Letters to arrange (all of them are used)
        mask: Positional template; empty means no positional constraint
        wildcard: Mask wildcard sentinel
        into: Existing set to add results to

    Returns:
        The result set (`into` when given)
    """
    output: Set[str] = set() if into is None else into
    working: List[str] = []
    total = len(letters)

    def place(index: int):
        if index == total:
            word = ''.join(working)
            if matches(mask, word, wildcard):
                output.add(word)
            return
        letter = letters[index]
        for x in range(len(working) + 1):
            working.insert(x, letter)
            place(index + 1)
            del working[x]

    place(0)
    return output


def candidates(
    known: str,
    maybe: str,
    mask: str,
    wildcard: str = ANAGRAM_WILDCARD
) -> Set[str]:
    """
    Generate the candidate set for known/maybe letters under a mask.

    Every candidate has the mask's length, contains all known letters (with
    multiplicity) and draws its other letters from known + maybe.

    Args:
        known: Letters every candidate must contain
        maybe: Extra letters allowed in the filler slots
        mask: Positional template fixing the candidate length
        wildcard: Mask wildcard sentinel

    Returns:
        Set of candidate strings; empty when known is empty or longer
        than the mask
    """
    if not known:
        return set()

    length = len(mask)
    if len(known) > length:
        logger.debug(f"{len(known)} known letters exceed mask length {length}")
        return set()

    if len(known) == length:
        return permutations(known, mask, wildcard)

    missing = length - len(known)
    alphabet = maybe + known
    output: Set[str] = set()
    seen: Set[str] = set()
    for fill in choose_any(alphabet, missing):
        # (c, d) and (d, c) pad to the same multiset
        key = ''.join(sorted(fill))
        if key in seen:
            continue
        seen.add(key)
        permutations(known + fill, mask, wildcard, into=output)

    logger.debug(f"{len(seen)} distinct fills over {alphabet!r} -> {len(output)} candidates")
    return output


def sub_anagrams(
    letters: str,
    mask: str = '',
    wildcard: str = ANAGRAM_WILDCARD
) -> Set[str]:
    """
    Arrangements of any selection of `letters` that fit the mask.

    With a mask, selections have exactly the mask's length; without one,
    every nonempty selection is arranged.
    """
    if mask:
        selections = choose(letters, len(mask))
    else:
        selections = powerset(letters)

    output: Set[str] = set()
    seen: Set[str] = set()
    for selection in selections:
        key = ''.join(sorted(selection))
        if key in seen:
            continue
        seen.add(key)
        permutations(selection, mask, wildcard, into=output)
    return output
