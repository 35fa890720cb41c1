"""Full alignment of two sequences as a list of matching blocks.

:func:`get_matching_blocks` repeatedly finds the longest common run inside a
pending window, then queues the regions before and after it.  The recorded
runs are sorted, adjacent runs are merged, and a zero-length sentinel
``(len(a), len(b), 0)`` is appended.  The output reproduces the ordering and
tie-breaking of :meth:`difflib.SequenceMatcher.get_matching_blocks` with no
junk heuristics, computed on the shorter input first.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import partial

from matchblocks.models import MatchingBlock, Window

from .longest_match import (
    build_position_index,
    find_longest_match,
    find_longest_match_indexed,
)

Finder = Callable[[str, str, int, int, int, int], MatchingBlock]


def make_finder(longer: str, strategy: str = "scan") -> Finder:
    """Return the longest-match function for *strategy*.

    The ``"indexed"`` finder is bound to a position index of *longer*, which
    is built once here and shared by every window.
    """
    if strategy == "scan":
        return find_longest_match
    if strategy == "indexed":
        return partial(find_longest_match_indexed, index=build_position_index(longer))
    raise ValueError(f"strategy must be 'scan' or 'indexed', got {strategy!r}")


def merge_adjacent(blocks: Iterable[MatchingBlock | tuple[int, int, int]]) -> list[MatchingBlock]:
    """Sort *blocks* and coalesce runs that continue one another.

    Two blocks merge when the second starts exactly where the first ends in
    both sequences (``i1 + k1 == i2`` and ``j1 + k1 == j2``).  Zero-length
    blocks are dropped.

    Examples
    --------
    >>> merge_adjacent([(3, 2, 2), (0, 0, 2), (2, 2, 0)])
    [MatchingBlock(a=0, b=0, size=2), MatchingBlock(a=3, b=2, size=2)]
    >>> merge_adjacent([(0, 0, 2), (2, 2, 3)])
    [MatchingBlock(a=0, b=0, size=5)]
    """
    merged: list[MatchingBlock] = []
    i1 = j1 = k1 = 0
    for i2, j2, k2 in sorted(blocks):
        if i1 + k1 == i2 and j1 + k1 == j2:
            k1 += k2
        else:
            if k1:
                merged.append(MatchingBlock(i1, j1, k1))
            i1, j1, k1 = i2, j2, k2
    if k1:
        merged.append(MatchingBlock(i1, j1, k1))
    return merged


def collect_blocks(shorter: str, longer: str, finder: Finder = find_longest_match) -> list[MatchingBlock]:
    """Run *finder* over a LIFO work-list of windows; return the unsorted runs.

    *shorter* must not be longer than *longer*.  The work-list replaces
    recursion, so inputs with many small runs do not grow the call stack.
    """
    found: list[MatchingBlock] = []
    windows = [Window(0, len(shorter), 0, len(longer))]
    while windows:
        window = windows.pop()
        match = finder(shorter, longer, window.low1, window.high1, window.low2, window.high2)
        if not match.size:
            continue
        found.append(match)
        for pending in (window.before(match), window.after(match)):
            if pending is not None:
                windows.append(pending)
    return found


def get_matching_blocks(a: str, b: str, *, strategy: str = "scan") -> list[MatchingBlock]:
    """Return the matching blocks of *a* and *b*.

    Parameters
    ----------
    a, b:
        Sequences to align.  Either may be empty.
    strategy:
        ``"scan"`` (default) or ``"indexed"``; both give identical output.

    Returns
    -------
    list[MatchingBlock]
        ``(i, j, k)`` triples with ``a[i:i+k] == b[j:j+k]``, sorted and
        non-overlapping, with no two adjacent blocks left unmerged.  The last
        element is always ``(len(a), len(b), 0)``.

    Examples
    --------
    >>> get_matching_blocks("abxcd", "abcd")
    [MatchingBlock(a=0, b=0, size=2), MatchingBlock(a=3, b=2, size=2), MatchingBlock(a=5, b=4, size=0)]
    >>> get_matching_blocks("chance", "スマホでchance")
    [MatchingBlock(a=0, b=4, size=6), MatchingBlock(a=6, b=10, size=0)]
    """
    # Ties keep ``a`` as the shorter sequence.
    flipped = len(a) > len(b)
    shorter, longer = (b, a) if flipped else (a, b)

    finder = make_finder(longer, strategy)
    blocks = merge_adjacent(collect_blocks(shorter, longer, finder))
    blocks.append(MatchingBlock(len(shorter), len(longer), 0))
    if flipped:
        return [block.swapped() for block in blocks]
    return blocks
