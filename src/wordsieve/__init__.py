"""
wordsieve - constraint filtering for Wordle-style puzzles and anagrams.

Core entry points:
  - filters:  mask, multiset and exclusion predicates
  - generate: candidate word generation from known/maybe letters
  - scoring:  uniqueness/frequency scores and pairwise analysis
  - driver:   the Sieve that runs a configured pass over a dictionary
"""

__version__ = "0.3.0"
