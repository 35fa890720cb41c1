"""Value types shared by the matching modules.

Both types are immutable and built per call.  :class:`MatchingBlock` is a
``NamedTuple`` so that results compare equal to plain ``(i, j, k)`` tuples
and unpack like them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class MatchingBlock(NamedTuple):
    """A run of ``size`` code points with ``first[a:a+size] == second[b:b+size]``."""

    a: int
    """Start offset in the first sequence."""

    b: int
    """Start offset in the second sequence."""

    size: int
    """Length of the run.  Zero only for the trailing sentinel."""

    @property
    def end_a(self) -> int:
        return self.a + self.size

    @property
    def end_b(self) -> int:
        return self.b + self.size

    def swapped(self) -> MatchingBlock:
        """Return the block with the roles of the two sequences exchanged."""
        return MatchingBlock(self.b, self.a, self.size)


@dataclass(frozen=True)
class Window:
    """A pending search region: ``[low1, high1)`` in the shorter input and
    ``[low2, high2)`` in the longer one."""

    low1: int
    high1: int
    low2: int
    high2: int

    def before(self, match: MatchingBlock) -> Window | None:
        """Region strictly before *match*, or ``None`` if empty on either side."""
        if self.low1 < match.a and self.low2 < match.b:
            return Window(self.low1, match.a, self.low2, match.b)
        return None

    def after(self, match: MatchingBlock) -> Window | None:
        """Region strictly after *match*, or ``None`` if empty on either side."""
        if match.end_a < self.high1 and match.end_b < self.high2:
            return Window(match.end_a, self.high1, match.end_b, self.high2)
        return None
