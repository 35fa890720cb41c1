"""Tests for BlockMatcher and MatcherConfig."""

from __future__ import annotations

import io
import json
import logging

import pytest

from matchblocks.config import MatcherConfig
from matchblocks.errors import ErrorCode, MatchblocksInputTooLongError
from matchblocks.matcher import BlockMatcher
from matchblocks.matching import get_matching_blocks
from matchblocks.observability.metrics import NoopMetricsHook

# =========================================================================
# MatcherConfig
# =========================================================================

class TestMatcherConfig:
    def test_defaults(self, config):
        assert config.strategy == "scan"
        assert config.process_inputs is False
        assert config.force_ascii is False
        assert config.max_input_length is None
        assert config.metrics is None
        assert config.debug_dump_blocks is False

    def test_unknown_strategy_raises(self):
        with pytest.raises(ValueError, match="strategy must be one of"):
            MatcherConfig(strategy="fast")  # type: ignore[arg-type]

    def test_negative_limit_raises(self):
        with pytest.raises(ValueError, match="max_input_length must be >= 0"):
            MatcherConfig(max_input_length=-1)

    def test_zero_limit_allowed(self):
        assert MatcherConfig(max_input_length=0).max_input_length == 0


# =========================================================================
# BlockMatcher.matching_blocks
# =========================================================================

class TestMatchingBlocks:
    def test_default_matches_module_function(self):
        matcher = BlockMatcher()
        for a, b in [("abxcd", "abcd"), ("chance", "スマホでchance"), ("", "")]:
            assert matcher.matching_blocks(a, b) == get_matching_blocks(a, b)

    def test_default_config(self):
        assert BlockMatcher().config == MatcherConfig()

    def test_indexed_strategy(self):
        matcher = BlockMatcher(MatcherConfig(strategy="indexed"))
        assert matcher.matching_blocks("abcd", "abxcd") == [(0, 0, 2), (2, 3, 2), (4, 5, 0)]

    def test_process_inputs(self):
        matcher = BlockMatcher(MatcherConfig(process_inputs=True))
        # Both sides become "ça va".
        assert matcher.matching_blocks("Ça va?", "  ÇA VA!") == [(0, 0, 5), (5, 5, 0)]

    def test_process_inputs_force_ascii(self):
        matcher = BlockMatcher(MatcherConfig(process_inputs=True, force_ascii=True))
        # "a va" vs "ca va"
        assert matcher.matching_blocks("Ça va?", "ca va") == [(0, 1, 4), (4, 5, 0)]

    def test_process_uses_force_ascii(self):
        assert BlockMatcher(MatcherConfig(force_ascii=True)).process("a¬4ሴ2€耀") == "a42"
        assert BlockMatcher().process("a¬4ሴ2€耀") == "a 4ሴ2 耀"


class TestLongestMatch:
    @pytest.mark.parametrize("strategy", ["scan", "indexed"])
    def test_window(self, strategy):
        matcher = BlockMatcher(MatcherConfig(strategy=strategy))
        assert matcher.longest_match("abcd", "abxcd", 2, 4, 2, 5) == (2, 3, 2)


# =========================================================================
# Input length limit
# =========================================================================

class TestInputLimit:
    def test_at_limit_passes(self):
        matcher = BlockMatcher(MatcherConfig(max_input_length=4))
        assert matcher.matching_blocks("abcd", "abcd")[-1] == (4, 4, 0)

    def test_over_limit_raises(self, recorder):
        matcher = BlockMatcher(MatcherConfig(max_input_length=3, metrics=recorder))
        with pytest.raises(MatchblocksInputTooLongError) as exc_info:
            matcher.matching_blocks("abc", "abcd")
        err = exc_info.value
        assert err.code == ErrorCode.INPUT_TOO_LONG
        assert err.context == {"argument": "b", "length": 4, "limit": 3}
        assert recorder.increments == [
            {
                "name": "matchblocks.inputs_rejected_total",
                "value": 1,
                "tags": {"reason": "too_long"},
            }
        ]

    def test_limit_counts_code_points(self):
        matcher = BlockMatcher(MatcherConfig(max_input_length=10))
        # 10 code points, 22 UTF-8 bytes.
        assert matcher.matching_blocks("スマホでchance", "chance")[-1] == (10, 6, 0)

    def test_limit_applies_after_processing(self):
        matcher = BlockMatcher(MatcherConfig(max_input_length=3, process_inputs=True))
        assert matcher.matching_blocks("  AB!  ", "ab")[-1] == (2, 2, 0)


# =========================================================================
# Metrics
# =========================================================================

class TestMatcherMetrics:
    def test_noop_hook_by_default(self):
        assert isinstance(BlockMatcher()._metrics, NoopMetricsHook)

    def test_emits_metrics(self, matcher, recorder):
        matcher.matching_blocks("abxcd", "abcd")
        counters = {c["name"]: c for c in recorder.increments}
        assert counters["matchblocks.comparisons_total"]["tags"] == {"strategy": "scan"}
        assert counters["matchblocks.blocks_found_total"]["value"] == 2
        assert recorder.timings[0]["name"] == "matchblocks.match_duration_ms"
        assert recorder.timings[0]["ms"] >= 0
        assert recorder.gauges == [
            {"name": "matchblocks.input_length", "value": 5, "tags": None},
        ]

    def test_sentinel_not_counted(self, matcher, recorder):
        matcher.matching_blocks("abc", "xyz")
        counters = {c["name"]: c for c in recorder.increments}
        assert counters["matchblocks.blocks_found_total"]["value"] == 0


# =========================================================================
# Logging and debug dump
# =========================================================================

class TestMatcherLogging:
    def test_debug_record(self):
        logger = logging.getLogger("matchblocks.matcher")
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        from matchblocks.observability.logger import StructuredFormatter

        handler.setFormatter(StructuredFormatter())
        old_level = logger.level
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            BlockMatcher().matching_blocks("abxcd", "abcd")
        finally:
            logger.removeHandler(handler)
            logger.setLevel(old_level)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "matching blocks computed"
        assert record["op"] == "matching_blocks"
        assert record["len_a"] == 5
        assert record["len_b"] == 4
        assert record["flipped"] is True
        assert record["blocks"] == 2

    def test_debug_dump_blocks(self, capsys):
        BlockMatcher(MatcherConfig(debug_dump_blocks=True)).matching_blocks("abxcd", "abcd")
        dump = json.loads(capsys.readouterr().err)
        assert dump["blocks"] == [[0, 0, 2], [3, 2, 2], [5, 4, 0]]
        assert dump["matched"] == ["ab", "cd"]

    def test_no_dump_by_default(self, capsys):
        BlockMatcher().matching_blocks("abxcd", "abcd")
        assert capsys.readouterr().err == ""
