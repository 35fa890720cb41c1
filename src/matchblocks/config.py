"""Matcher configuration for matchblocks.

:class:`MatcherConfig` is a plain dataclass that captures every tuneable
knob of :class:`~matchblocks.matcher.BlockMatcher`.  The module-level
functions (:func:`matchblocks.get_matching_blocks` and friends) take no
configuration and always use the reference behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

STRATEGIES: tuple[str, ...] = ("scan", "indexed")
"""Names accepted by :attr:`MatcherConfig.strategy`."""


@dataclass
class MatcherConfig:
    """Complete configuration for a :class:`BlockMatcher`.

    Every parameter has a default that reproduces the reference output, so
    ``MatcherConfig()`` is always valid.

    Parameters
    ----------
    strategy:
        Longest-match search used for every window.

        * ``"scan"`` — descending-length, left-to-right substring scan
          (the reference algorithm; roughly cubic in the window size).
        * ``"indexed"`` — dynamic-programming sweep over a
          character-position index of the longer input.  Same tie-breaks,
          ``O(len(a) * len(b))`` worst case.
    process_inputs:
        Run both inputs through :func:`~matchblocks.text.full_process`
        before matching.  Block offsets then refer to the processed text.
    force_ascii:
        Passed to :func:`~matchblocks.text.full_process` when
        ``process_inputs`` is enabled (and by :meth:`BlockMatcher.process`).
    max_input_length:
        Upper bound, in code points, on either input.  ``None`` disables
        the check.  Inputs over the limit raise
        :class:`~matchblocks.errors.MatchblocksInputTooLongError`.
    metrics:
        Optional :class:`~matchblocks.observability.MetricsHook`.
    debug_dump_blocks:
        Write each computed block list to *stderr* as JSON.
    """

    # ── Algorithm ───────────────────────────────────────────────────────
    strategy: Literal["scan", "indexed"] = "scan"

    # ── Preprocessing ───────────────────────────────────────────────────
    process_inputs: bool = False

    force_ascii: bool = False

    # ── Limits ──────────────────────────────────────────────────────────
    max_input_length: int | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_blocks: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"strategy must be one of {', '.join(STRATEGIES)}, got {self.strategy!r}"
            )
        if self.max_input_length is not None and self.max_input_length < 0:
            raise ValueError(f"max_input_length must be >= 0, got {self.max_input_length}")
