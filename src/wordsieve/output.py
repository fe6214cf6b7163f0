#!/usr/bin/env python3
"""
output.py — Render results as text, JSON or JSONL.

Text is one word per line, with ' (score)' appended for match/discover
and ': green/yellow' for analysis. JSON output carries every field.
"""

from typing import List

import orjson

from wordsieve.driver import Result

FORMATS = ('text', 'json', 'jsonl')


def format_line(result: Result) -> str:
    if result.stats is not None:
        return f"{result.word}: {result.stats.green}/{result.stats.yellow}"
    if result.score is not None:
        return f"{result.word} ({result.score})"
    return result.word


def format_results(results: List[Result], output_format: str = 'text') -> str:
    """Format results; an empty list renders as an empty string (or [])."""
    if output_format == 'json':
        return orjson.dumps(
            [r.to_dict() for r in results],
            option=orjson.OPT_INDENT_2
        ).decode('utf-8')

    if output_format == 'jsonl':
        return '\n'.join(orjson.dumps(r.to_dict()).decode('utf-8') for r in results)

    return '\n'.join(format_line(r) for r in results)
