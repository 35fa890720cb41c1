"""Matching-block alignment.

Exports
-------
get_matching_blocks
    Align two sequences into sorted, merged matching blocks.
find_longest_match
    Longest common run of two windows (reference scan).
find_longest_match_indexed
    Same result via a character-position index.
merge_adjacent
    Sort and coalesce contiguous blocks.
"""

from .blocks import collect_blocks, get_matching_blocks, make_finder, merge_adjacent
from .longest_match import (
    build_position_index,
    find_longest_match,
    find_longest_match_indexed,
)

__all__ = [
    "build_position_index",
    "collect_blocks",
    "find_longest_match",
    "find_longest_match_indexed",
    "get_matching_blocks",
    "make_finder",
    "merge_adjacent",
]
