"""matchblocks — matching-block alignment for fuzzy string comparison.

Public re-exports
-----------------

* **Matching:** :func:`get_matching_blocks`, :func:`find_longest_match`,
  :func:`find_longest_match_indexed`, :func:`merge_adjacent`
* **Text:** :func:`full_process` / :func:`normalize`, :func:`is_valid`,
  :func:`slice_scalars`, :func:`slice_utf8`, :class:`ScalarOffsets`
* **Configured matcher:** :class:`BlockMatcher`, :class:`MatcherConfig`
* **Errors:** :class:`MatchblocksError` and its subclasses, :class:`ErrorCode`
* **Models:** :class:`MatchingBlock`, :class:`Window`

Usage::

    from matchblocks import get_matching_blocks, normalize

    blocks = get_matching_blocks(normalize("Ça va?"), normalize("ca va"))
    matched = sum(block.size for block in blocks)
"""

from __future__ import annotations

__version__ = "0.1.0"

# ── Configuration ───────────────────────────────────────────────────────
from matchblocks.config import MatcherConfig

# ── Errors ──────────────────────────────────────────────────────────────
from matchblocks.errors import (
    ErrorCode,
    MatchblocksContractError,
    MatchblocksError,
    MatchblocksInputTooLongError,
)
from matchblocks.matcher import BlockMatcher

# ── Matching ────────────────────────────────────────────────────────────
from matchblocks.matching import (
    find_longest_match,
    find_longest_match_indexed,
    get_matching_blocks,
    merge_adjacent,
)

# ── Models ──────────────────────────────────────────────────────────────
from matchblocks.models import MatchingBlock, Window

# ── Text ────────────────────────────────────────────────────────────────
from matchblocks.text import (
    ScalarOffsets,
    full_process,
    is_valid,
    normalize,
    slice_scalars,
    slice_utf8,
    validate_string,
)

__all__ = [
    "__version__",
    # Matching
    "get_matching_blocks",
    "find_longest_match",
    "find_longest_match_indexed",
    "merge_adjacent",
    # Text
    "full_process",
    "normalize",
    "is_valid",
    "validate_string",
    "slice_scalars",
    "slice_utf8",
    "ScalarOffsets",
    # Configured matcher
    "BlockMatcher",
    "MatcherConfig",
    # Errors
    "MatchblocksError",
    "ErrorCode",
    "MatchblocksContractError",
    "MatchblocksInputTooLongError",
    # Models
    "MatchingBlock",
    "Window",
]
