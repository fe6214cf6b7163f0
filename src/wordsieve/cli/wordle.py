#!/usr/bin/env python3
"""
wswordle - Wordle feedback filter.

Turns green/yellow/gray feedback into a ranked word list. The mask
wildcard is '_'.

Modes:
  --match     words consistent with all feedback (possible answers)
  (default)   discovery guesses that avoid known greens/yellows/grays
  --analyze   rank consistent words by greens they would earn

Usage:
    wswordle --green __a__ --yellow _r___ --gray stoi --match
    wswordle --yellow _r___ --gray stoi --limit 5
"""

import argparse
import logging
import sys

from wordsieve.cli.common import CLIArgumentParser, add_common_arguments, configure_logging, parse_mode, resolve, run
from wordsieve.driver import Mode, SieveConfig
from wordsieve.errors import ArgumentError, DictionaryError
from wordsieve.filters import WORDLE_WILDCARD


configure_logging()
logger = logging.getLogger(__name__)

DEFAULTS = {
    'mask': '_____',
    'green': '',
    'yellow': [],
    'gray': '',
    'exclude': '',
    'include': '',
    'known': '',
    'maybe': '',
    'partial': False,
    'mode': Mode.DISCOVER.value,
    'order': 'green',
    'limit': 0,
    'format': 'text',
}


def build_parser() -> argparse.ArgumentParser:
    parser = CLIArgumentParser(
        prog='wswordle',
        description='Filter and rank words from Wordle feedback',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Possible answers after CRANE -> _ r a _ e (r, e yellow) and STOIC all gray
  wswordle --green __a__ --yellow _r___ --yellow ____e --gray cnstoi --match

  # A next guess that spends no letter on what we already know
  wswordle --green __a__ --yellow _r___ --gray stoi --limit 5

  # Which remaining answer splits the rest best?
  wswordle --green __a__ --yellow _r___ --gray stoi --analyze --limit 5

  # Same puzzle kept in a file
  wswordle --spec today.yaml
        """
    )
    add_common_arguments(parser)
    parser.add_argument(
        '--mask',
        help="Position mask, '_' is the wildcard (default: _____)"
    )
    parser.add_argument('--green', metavar='STR', help="Green letters in place, e.g. __a__")
    parser.add_argument(
        '--yellow',
        action='append',
        metavar='STR',
        help='Yellow letters at the position they were guessed, e.g. _r___ (repeatable)'
    )
    parser.add_argument('--gray', metavar='STR', help='Letters not in the word')
    parser.add_argument('--exclude', metavar='STR', help='Alias of --gray')
    parser.add_argument('--include', metavar='STR', help='Letters the word must contain')
    parser.add_argument('--known', help='Generate candidates from these letters')
    parser.add_argument('--maybe', help='Filler letters for candidate generation')

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        '--match',
        action='store_const',
        const=Mode.MATCH.value,
        dest='mode',
        help='Words consistent with greens, yellows and grays'
    )
    modes.add_argument(
        '--analyze',
        action='store_const',
        const=Mode.ANALYZE.value,
        dest='mode',
        help='Rank consistent words by pairwise green/yellow analysis'
    )
    return parser


def main(argv=None) -> int:
    """Entry point for wswordle."""
    args = build_parser().parse_args(argv)

    try:
        values = resolve(args, {
            'mask': args.mask,
            'green': args.green,
            'yellow': args.yellow,
            'gray': args.gray,
            'exclude': args.exclude,
            'include': args.include,
            'known': args.known,
            'maybe': args.maybe,
            'mode': args.mode,
            'order': args.order,
            'limit': args.limit,
            'format': args.format,
        }, DEFAULTS)

        config = SieveConfig(
            mask=values['mask'],
            greens=values['green'],
            yellows=list(values['yellow']),
            include=values['include'],
            exclude=set(values['gray']) | set(values['exclude']),
            known=values['known'],
            maybe=values['maybe'],
            partial=values['partial'],
            mode=parse_mode(values['mode'], Mode),
            order=values['order'],
            limit=values['limit'],
            wildcard=WORDLE_WILDCARD,
        )
        return run(config, args.dict, values['format'], profile='game', verbose=args.verbose)
    except (ArgumentError, DictionaryError) as e:
        logger.error(e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
