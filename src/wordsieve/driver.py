#!/usr/bin/env python3
"""
driver.py — Run a configured constraint pass over a dictionary.

A pass is one scan of the dictionary. Each word is tested in a fixed
order, stopping at the first failure:

  1. candidate set membership (when known letters were given)
  2. position mask
  3. mode-specific checks

Modes:
  filter    stream words in dictionary order
  match     satisfy greens, yellows and grays; rank by total_score
  discover  avoid known greens, yellows and grays; rank by total_score
  analyze   rank survivors by pairwise green/yellow analysis

The driver never reads files: it is handed a Dictionary value.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Set

from wordsieve import filters
from wordsieve.errors import ArgumentError
from wordsieve.filters import ANAGRAM_WILDCARD, WORDLE_WILDCARD
from wordsieve.generate import candidates, sub_anagrams
from wordsieve.heap import BoundedHeap, Heap
from wordsieve.progress_display import ProgressDisplay
from wordsieve.scoring import ANALYSIS_ORDERS, WordStats, analyze, total_score


logger = logging.getLogger(__name__)


class Mode(Enum):
    """How surviving words are checked and emitted."""
    FILTER = "filter"
    MATCH = "match"
    DISCOVER = "discover"
    ANALYZE = "analyze"


@dataclass
class SieveConfig:
    """Constraints and output controls for one pass."""
    mask: str = ''
    greens: str = ''
    yellows: List[str] = field(default_factory=list)
    include: str = ''
    exclude: Set[str] = field(default_factory=set)

    # Candidate generation
    known: str = ''
    maybe: str = ''
    partial: bool = False

    mode: Mode = Mode.FILTER
    order: str = 'green'
    limit: int = 0
    wildcard: str = ANAGRAM_WILDCARD

    def validate(self):
        """Reject configurations no pass can honor."""
        if self.limit < 0:
            raise ArgumentError(f"limit must be 0 (unlimited) or positive, got {self.limit}")

        if self.order not in ANALYSIS_ORDERS:
            raise ArgumentError(
                f"Unknown order {self.order!r} (expected one of: {', '.join(ANALYSIS_ORDERS)})"
            )

        # One wildcard per front-end; a stray foreign wildcard is a typo
        foreign = WORDLE_WILDCARD if self.wildcard == ANAGRAM_WILDCARD else ANAGRAM_WILDCARD
        for name, value in [('mask', self.mask), ('green', self.greens)] + \
                [('yellow', y) for y in self.yellows]:
            if foreign in value:
                raise ArgumentError(
                    f"{name} {value!r} uses {foreign!r}; this mode's wildcard is {self.wildcard!r}"
                )

        if self.mask and self.greens and len(self.mask) != len(self.greens):
            raise ArgumentError(
                f"green {self.greens!r} and mask {self.mask!r} have different lengths"
            )

        if self.known and not self.mask and not self.partial:
            raise ArgumentError("known letters need a mask to fix the word length (or --partial)")

    @property
    def has_greens(self) -> bool:
        return filters.greens(self.greens, self.wildcard) > 0

    @property
    def required(self) -> List[str]:
        """Yellow constraints plus the included letters."""
        if self.include:
            return self.yellows + [self.include]
        return list(self.yellows)


@dataclass
class Result:
    """One emitted word, with its score or analysis when ranked."""
    word: str
    score: Optional[int] = None
    stats: Optional[WordStats] = None

    def to_dict(self) -> dict:
        if self.stats is not None:
            return self.stats.to_dict()
        if self.score is not None:
            return {'word': self.word, 'score': self.score}
        return {'word': self.word}


class Sieve:
    """
    Filter driver for one configured pass.

    Usage:
        sieve = Sieve(SieveConfig(mask='?????', known='crane'))
        for result in sieve.run(dictionary):
            print(result.word)
    """

    def __init__(self, config: SieveConfig):
        config.validate()
        self.config = config
        self.candidates: Optional[Set[str]] = None

    def build_candidates(self) -> Optional[Set[str]]:
        """
        Generate the candidate set, or None when no known letters were given.

        Excluded letters are removed from the filler alphabet first.
        """
        config = self.config
        if not config.known:
            return None

        maybe = ''.join(c for c in config.maybe if c not in config.exclude)
        if config.partial and len(config.known) > len(config.mask):
            generated = sub_anagrams(config.known, config.mask, config.wildcard)
        else:
            generated = candidates(config.known, maybe, config.mask, config.wildcard)

        logger.debug(f"Generated {len(generated):,} candidates from known={config.known!r} maybe={maybe!r}")
        return generated

    def run(self, dictionary: Iterable[str], verbose: bool = False) -> List[Result]:
        """
        Scan the dictionary and return results in emission order.

        Args:
            dictionary: Words to scan, in iteration order
            verbose: Log diagnostics and show progress for analysis

        Returns:
            Results, already limited
        """
        config = self.config
        self.candidates = self.build_candidates()

        if verbose and self.candidates is not None:
            logger.info(f"Candidate set: {len(self.candidates):,} strings")
            for word in sorted(self.candidates):
                logger.debug(f"  candidate {word}")

        if config.mode is Mode.FILTER:
            results = self._stream(dictionary)
        elif config.mode is Mode.ANALYZE:
            results = self._analyze(dictionary, verbose)
        else:
            results = self._rank(dictionary)

        if verbose:
            logger.info(f"Emitting {len(results):,} results ({config.mode.value} mode)")
        return results

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def _survives(self, word: str) -> bool:
        """Candidate membership, then the position mask."""
        if self.candidates is not None and word not in self.candidates:
            return False
        if self.config.mask and not filters.matches(self.config.mask, word, self.config.wildcard):
            return False
        return True

    def _passes_match(self, word: str) -> bool:
        config = self.config
        if not filters.matches(config.greens, word, config.wildcard):
            return False
        if not filters.yellows_all(config.required, word, config.wildcard):
            return False
        return filters.excludes(config.exclude, word)

    def _passes_discover(self, word: str) -> bool:
        config = self.config
        if config.has_greens and filters.matches(config.greens, word, config.wildcard):
            return False
        if filters.yellows_any(config.required, word, config.wildcard):
            return False
        return filters.excludes(config.exclude, word)

    # -------------------------------------------------------------------------
    # Modes
    # -------------------------------------------------------------------------

    def _stream(self, dictionary: Iterable[str]) -> List[Result]:
        limit = self.config.limit
        results = []
        for word in dictionary:
            if limit and len(results) >= limit:
                break
            if self._survives(word):
                results.append(Result(word))
        return results

    def _rank(self, dictionary: Iterable[str]) -> List[Result]:
        check = self._passes_match if self.config.mode is Mode.MATCH else self._passes_discover
        scored = [
            Result(word, score=total_score(word))
            for word in dictionary
            if self._survives(word) and check(word)
        ]
        # sorted() is stable under reverse, so ties keep scan order
        scored = sorted(scored, key=lambda r: r.score, reverse=True)
        if self.config.limit:
            scored = scored[:self.config.limit]
        return scored

    def _analyze(self, dictionary: Iterable[str], verbose: bool = False) -> List[Result]:
        survivors = [w for w in dictionary if self._survives(w) and self._passes_match(w)]
        if verbose:
            logger.info(f"Analyzing {len(survivors):,} surviving words pairwise")

        key = ANALYSIS_ORDERS[self.config.order]
        limit = self.config.limit

        if limit:
            # Root is the weakest kept entry; later entries lose ties
            heap = BoundedHeap(
                lambda a, b: a[0] < b[0] or (a[0] == b[0] and a[1] > b[1]),
                limit
            )
        else:
            heap = Heap(lambda a, b: a[0] > b[0] or (a[0] == b[0] and a[1] < b[1]))

        with ProgressDisplay("Analyzing", enabled=verbose, update_interval=100) as progress:
            for index, word in enumerate(survivors):
                stats = analyze(survivors, word)
                heap.push((key(stats), index, stats))
                progress.update(analyzed=index + 1)

        if limit:
            ranked = heap.best_first()
        else:
            ranked = list(heap.drain())
        return [Result(stats.word, stats=stats) for _, _, stats in ranked]
