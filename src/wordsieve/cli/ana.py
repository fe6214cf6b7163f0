#!/usr/bin/env python3
"""
wsana - Anagram solver.

Generates every arrangement of the known letters (padded from the maybe
letters when the mask is longer) and prints those found in the
dictionary. The mask wildcard is '?'.

Usage:
    wsana --known tac --mask '???'
    wsana --known ab --maybe c --mask '???'
    wsana --known crate --mask '????' --partial
    wsana --mask '?i?e?' --analyze --limit 10
"""

import argparse
import logging
import sys

from wordsieve.cli.common import CLIArgumentParser, add_common_arguments, configure_logging, parse_mode, resolve, run
from wordsieve.driver import Mode, SieveConfig
from wordsieve.errors import ArgumentError, DictionaryError
from wordsieve.filters import ANAGRAM_WILDCARD


configure_logging()
logger = logging.getLogger(__name__)

DEFAULTS = {
    'mask': '?????',
    'known': '',
    'maybe': '',
    'partial': False,
    'mode': Mode.FILTER.value,
    'order': 'green',
    'limit': 0,
    'format': 'text',
}

ANA_MODES = (Mode.FILTER, Mode.ANALYZE)

# Spec keys that only make sense for Wordle feedback
WORDLE_KEYS = {'green', 'yellow', 'gray', 'exclude', 'include'}


def build_parser() -> argparse.ArgumentParser:
    parser = CLIArgumentParser(
        prog='wsana',
        description='Find dictionary words that are arrangements of a letter set',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All three-letter anagrams of "tac"
  wsana --known tac --mask '???'

  # Two known letters plus one slot filled from "c" or the known letters
  wsana --known ab --maybe c --mask '???'

  # Four-letter words drawn from the letters of "crate"
  wsana --known crate --mask '????' --partial

  # Every word made from "listen", any length
  wsana --known listen --mask '' --partial

  # Rank five-letter words shaped ?i?e? by greens earned against the rest
  wsana --mask '?i?e?' --analyze --limit 10
        """
    )
    add_common_arguments(parser)
    parser.add_argument(
        '--mask',
        help="Position mask, '?' is the wildcard (default: ?????); '' disables it"
    )
    parser.add_argument('--known', help='Letters every word must contain')
    parser.add_argument('--maybe', help='Extra letters allowed in the remaining slots')
    parser.add_argument(
        '--partial',
        action='store_true',
        default=None,
        help='Allow more known letters than mask slots (use any selection of them)'
    )
    parser.add_argument(
        '--analyze',
        action='store_const',
        const=Mode.ANALYZE.value,
        dest='mode',
        help='Rank matches by pairwise green/yellow analysis'
    )
    return parser


def main(argv=None) -> int:
    """Entry point for wsana."""
    args = build_parser().parse_args(argv)

    try:
        values = resolve(args, {
            'mask': args.mask,
            'known': args.known,
            'maybe': args.maybe,
            'partial': args.partial,
            'mode': args.mode,
            'order': args.order,
            'limit': args.limit,
            'format': args.format,
        }, DEFAULTS)

        wordle_only = sorted(WORDLE_KEYS & set(values))
        if wordle_only:
            raise ArgumentError(f"wsana does not take {', '.join(wordle_only)}; use wswordle")

        config = SieveConfig(
            mask=values['mask'],
            known=values['known'],
            maybe=values['maybe'],
            partial=values['partial'],
            mode=parse_mode(values['mode'], ANA_MODES),
            order=values['order'],
            limit=values['limit'],
            wildcard=ANAGRAM_WILDCARD,
        )
        return run(config, args.dict, values['format'], profile='full', verbose=args.verbose)
    except (ArgumentError, DictionaryError) as e:
        logger.error(e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
