#!/usr/bin/env python3
"""
wstrie - Compile a word list into a MARISA trie dictionary.

Usage:
    wstrie INPUT OUTPUT [--profile game] [--length 5] [-v]

Example:
    wstrie words.txt data/five.trie --profile game --length 5
    wswordle --dict data/five.trie --gray stoi
"""

import logging
import sys
from pathlib import Path

from wordsieve.cli.common import CLIArgumentParser, configure_logging
from wordsieve.dictionary import PROFILES
from wordsieve.errors import DictionaryError
from wordsieve.trie_build import build_trie


configure_logging()
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Entry point for wstrie."""
    parser = CLIArgumentParser(prog='wstrie', description='Build a MARISA trie from a word list')
    parser.add_argument('input', type=Path, help='Word list, one word per line (UTF-8)')
    parser.add_argument('output', type=Path, help='Trie output path (use a .trie suffix)')
    parser.add_argument('--profile', choices=list(PROFILES.keys()), default='full',
                        help='Word filter profile (default: full)')
    parser.add_argument('--length', type=int, default=0,
                        help='Keep only words of this length (default: all)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show progress and counts')
    args = parser.parse_args(argv)

    if args.length < 0:
        parser.error('--length must be 0 or positive')

    if args.verbose:
        logger.info("Trie build (MARISA)")
        logger.info(f"  Input: {args.input}")
        logger.info(f"  Profile: {args.profile}")

    try:
        build_trie(args.input, args.output, PROFILES[args.profile], args.length, args.verbose)
    except DictionaryError as e:
        logger.error(e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
