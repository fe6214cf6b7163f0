"""
Shared plumbing for the wordsieve front-ends.

Each front-end builds its own parser and SieveConfig; this module holds
what they have in common: logging setup, the options every front-end
accepts, spec/flag merging and the load -> run -> print sequence.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from wordsieve.dictionary import load_dictionary
from wordsieve.driver import Mode, Sieve, SieveConfig
from wordsieve.errors import ArgumentError
from wordsieve.output import FORMATS, format_results
from wordsieve.puzzle_spec import load_spec, merge_spec
from wordsieve.scoring import ANALYSIS_ORDERS


logger = logging.getLogger(__name__)


class CLIArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        logger.error(f"{self.prog}: {message}")
        self.exit(1)


def configure_logging():
    """INFO to stderr by default; DEBUG when $DEBUG is non-empty."""
    level = logging.DEBUG if os.environ.get('DEBUG') else logging.INFO
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s', stream=sys.stderr)


def add_common_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        '--dict',
        type=Path,
        metavar='PATH',
        help='Dictionary file, one word per line or a .trie '
             '(default: $WORDSIEVE_DICT, then the embedded list)'
    )
    parser.add_argument(
        '--spec',
        type=Path,
        metavar='PATH',
        help='YAML or JSON puzzle specification; flags override its values'
    )
    parser.add_argument(
        '--order',
        choices=list(ANALYSIS_ORDERS),
        help='Analysis ranking: green, green-yellow or unique (default: green)'
    )
    parser.add_argument(
        '--limit',
        type=int,
        metavar='N',
        help='Emit at most N results; 0 means unlimited (default: 0)'
    )
    parser.add_argument(
        '--format',
        choices=FORMATS,
        help='Output format (default: text)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log diagnostics (candidate set, dictionary size) to stderr'
    )


def resolve(args: argparse.Namespace, overrides: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
    """Defaults, then the spec file, then command-line flags."""
    spec = load_spec(args.spec) if args.spec else {}
    values = dict(defaults)
    values.update(merge_spec(spec, overrides))

    if values.get('format') not in FORMATS:
        raise ArgumentError(f"Unknown format {values.get('format')!r} (expected one of: {', '.join(FORMATS)})")
    return values


def parse_mode(value: str, allowed: Iterable[Mode]) -> Mode:
    allowed = list(allowed)
    for mode in allowed:
        if mode.value == value:
            return mode
    raise ArgumentError(
        f"Unknown mode {value!r} (expected one of: {', '.join(m.value for m in allowed)})"
    )


def run(
    config: SieveConfig,
    dict_path: Optional[Path],
    output_format: str = 'text',
    profile: str = 'full',
    verbose: bool = False
) -> int:
    """
    Validate, load the dictionary, run the pass and print results.

    ArgumentError/DictionaryError propagate to the caller's main().
    """
    sieve = Sieve(config)
    dictionary = load_dictionary(dict_path, profile=profile)

    if verbose:
        logger.info(f"Dictionary: {len(dictionary):,} words ({dictionary.source})")

    results = sieve.run(dictionary, verbose=verbose)

    output = format_results(results, output_format)
    if output:
        print(output)
    return 0
