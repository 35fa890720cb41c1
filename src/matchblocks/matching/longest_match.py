"""Longest common run between two windows.

Given ``shorter[low1:high1]`` and ``longer[low2:high2]``, find the longest
run ``shorter[i:i+k] == longer[j:j+k]`` inside both windows.  Ties go to
the run that starts earliest in *shorter*, then to the one that starts
earliest in *longer*.  When the windows share nothing the result is
``(low1, low2, 0)``.

Two interchangeable implementations are provided:

* :func:`find_longest_match` tries every candidate length from the full
  window size downwards and every start position left to right, returning
  the first candidate found in *longer*.  The scan order alone produces the
  tie-breaks.  Worst case is roughly cubic in the window size.
* :func:`find_longest_match_indexed` sweeps *shorter* once, extending runs
  through a character → positions index of *longer*.  It returns exactly
  the same block in ``O(len(shorter) * len(longer))`` worst case.
"""

from __future__ import annotations

from bisect import bisect_left

from matchblocks.models import MatchingBlock
from matchblocks.text.slicing import check_range, slice_scalars

PositionIndex = dict[str, list[int]]


def find_longest_match(
    shorter: str,
    longer: str,
    low1: int,
    high1: int,
    low2: int,
    high2: int,
) -> MatchingBlock:
    """Find the longest common run of two windows by exhaustive scan.

    Parameters
    ----------
    shorter:
        First sequence; ``i`` offsets in the result refer to it.
    longer:
        Second sequence; ``j`` offsets in the result refer to it.
    low1, high1:
        Half-open window into *shorter*.
    low2, high2:
        Half-open window into *longer*.

    Returns
    -------
    MatchingBlock
        ``(i, j, k)`` with ``k`` maximal, then ``i`` minimal, then ``j``
        minimal.  ``(low1, low2, 0)`` if nothing matches.

    Raises
    ------
    MatchblocksContractError
        If either window lies outside its sequence or has ``low > high``.
    """
    check_range(low1, high1, len(shorter), "shorter")
    check_range(low2, high2, len(longer), "longer")

    # A run can be no longer than the smaller of the two windows.
    longest = min(high1 - low1, high2 - low2)
    for size in range(longest, 0, -1):
        for start in range(low1, high1 - size + 1):
            candidate = slice_scalars(shorter, start, start + size)
            found = longer.find(candidate, low2, high2)
            if found != -1:
                return MatchingBlock(start, found, size)
    return MatchingBlock(low1, low2, 0)


def build_position_index(text: str) -> PositionIndex:
    """Map every code point of *text* to the ascending list of its offsets."""
    index: PositionIndex = {}
    for position, char in enumerate(text):
        index.setdefault(char, []).append(position)
    return index


def find_longest_match_indexed(
    shorter: str,
    longer: str,
    low1: int,
    high1: int,
    low2: int,
    high2: int,
    index: PositionIndex | None = None,
) -> MatchingBlock:
    """Same contract as :func:`find_longest_match`, computed by run extension.

    ``run_lengths[j]`` holds the length of the common run ending at
    ``shorter[i - 1]`` and ``longer[j]``; each step of *i* extends those runs
    by one where the characters agree.  Runs are discovered in order of
    their end offset in *shorter* and, for a fixed end, of their offset in
    *longer*, so keeping only strictly longer runs yields the earliest
    starting one.

    Parameters
    ----------
    index:
        Result of :func:`build_position_index` for *longer*.  Pass it when
        calling repeatedly on the same *longer*; it is built on demand
        otherwise.
    """
    check_range(low1, high1, len(shorter), "shorter")
    check_range(low2, high2, len(longer), "longer")
    if index is None:
        index = build_position_index(longer)

    best = MatchingBlock(low1, low2, 0)
    run_lengths: dict[int, int] = {}
    for i in range(low1, high1):
        positions = index.get(shorter[i], [])
        extended: dict[int, int] = {}
        for cursor in range(bisect_left(positions, low2), len(positions)):
            j = positions[cursor]
            if j >= high2:
                break
            size = extended[j] = run_lengths.get(j - 1, 0) + 1
            if size > best.size:
                best = MatchingBlock(i - size + 1, j - size + 1, size)
        run_lengths = extended
    return best
