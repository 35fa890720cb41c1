"""Configuration-aware front end for block matching.

:class:`BlockMatcher` wraps the pure functions in :mod:`matchblocks.matching`
and :mod:`matchblocks.text` with the concerns a long-running caller needs:
optional preprocessing, an input-length limit, strategy selection, metrics
and structured debug logging.  The module-level
:func:`~matchblocks.matching.get_matching_blocks` stays configuration-free.
"""

from __future__ import annotations

import json
import sys
import time

from matchblocks.config import MatcherConfig
from matchblocks.errors import MatchblocksInputTooLongError
from matchblocks.matching import get_matching_blocks, make_finder
from matchblocks.models import MatchingBlock
from matchblocks.observability import NoopMetricsHook, get_logger
from matchblocks.text import full_process

log = get_logger("matchblocks.matcher")


class BlockMatcher:
    """Computes matching blocks according to a :class:`MatcherConfig`.

    Instances hold no per-call state and can be shared between threads.

    Parameters
    ----------
    config:
        Matcher configuration.  Defaults to ``MatcherConfig()``, which gives
        the same output as :func:`matchblocks.get_matching_blocks`.
    """

    def __init__(self, config: MatcherConfig | None = None) -> None:
        self._config = config or MatcherConfig()
        self._metrics = self._config.metrics or NoopMetricsHook()

    @property
    def config(self) -> MatcherConfig:
        return self._config

    def process(self, text: str) -> str:
        """Canonicalise *text* with the configured ``force_ascii`` flag."""
        return full_process(text, self._config.force_ascii)

    def matching_blocks(self, a: str, b: str) -> list[MatchingBlock]:
        """Return the matching blocks of *a* and *b*.

        When ``process_inputs`` is enabled the inputs are canonicalised
        first and the offsets refer to the processed strings.

        Raises
        ------
        MatchblocksInputTooLongError
            If either input exceeds ``max_input_length``.
        """
        if self._config.process_inputs:
            a, b = self.process(a), self.process(b)
        self._check_length("a", a)
        self._check_length("b", b)

        strategy = self._config.strategy
        t0 = time.monotonic()
        blocks = get_matching_blocks(a, b, strategy=strategy)
        elapsed_ms = (time.monotonic() - t0) * 1000

        tags = {"strategy": strategy}
        self._metrics.increment("matchblocks.comparisons_total", tags=tags)
        self._metrics.increment(
            "matchblocks.blocks_found_total", len(blocks) - 1, tags=tags,
        )
        self._metrics.timing("matchblocks.match_duration_ms", elapsed_ms, tags=tags)
        self._metrics.gauge("matchblocks.input_length", max(len(a), len(b)))
        log.debug(
            "matching blocks computed",
            extra={
                "extra_fields": {
                    "op": "matching_blocks",
                    "strategy": strategy,
                    "len_a": len(a),
                    "len_b": len(b),
                    "flipped": len(a) > len(b),
                    "blocks": len(blocks) - 1,
                    "duration_ms": round(elapsed_ms, 3),
                }
            },
        )
        if self._config.debug_dump_blocks:
            _dump_blocks(a, b, blocks)
        return blocks

    def longest_match(
        self,
        shorter: str,
        longer: str,
        low1: int,
        high1: int,
        low2: int,
        high2: int,
    ) -> MatchingBlock:
        """Longest common run of two windows, using the configured strategy."""
        finder = make_finder(longer, self._config.strategy)
        return finder(shorter, longer, low1, high1, low2, high2)

    def _check_length(self, argument: str, text: str) -> None:
        limit = self._config.max_input_length
        if limit is None or len(text) <= limit:
            return
        self._metrics.increment(
            "matchblocks.inputs_rejected_total", tags={"reason": "too_long"},
        )
        log.warning(
            "Input rejected",
            extra={
                "extra_fields": {
                    "op": "matching_blocks",
                    "argument": argument,
                    "length": len(text),
                    "limit": limit,
                }
            },
        )
        raise MatchblocksInputTooLongError(
            message=f"Input {argument!r} has {len(text)} code points, limit is {limit}",
            context={"argument": argument, "length": len(text), "limit": limit},
        )


def _dump_blocks(a: str, b: str, blocks: list[MatchingBlock]) -> None:
    """Write the computed alignment to stderr as JSON."""
    dump = {
        "a": a,
        "b": b,
        "blocks": [list(block) for block in blocks],
        "matched": [a[block.a : block.end_a] for block in blocks[:-1]],
    }
    print(json.dumps(dump, indent=2, ensure_ascii=False), file=sys.stderr)
