"""Tests for the longest-match finders."""

import pytest

from matchblocks.errors import MatchblocksContractError
from matchblocks.matching.longest_match import (
    build_position_index,
    find_longest_match,
    find_longest_match_indexed,
)
from matchblocks.models import MatchingBlock

FINDERS = [find_longest_match, find_longest_match_indexed]


@pytest.mark.parametrize("finder", FINDERS)
class TestFinders:
    """Both finders share one contract."""

    def test_full_windows(self, finder):
        assert finder("abcd", "abxcd", 0, 4, 0, 5) == (0, 0, 2)

    def test_identical(self, finder):
        assert finder("hello", "hello", 0, 5, 0, 5) == (0, 0, 5)

    def test_no_match_anchors_at_window_start(self, finder):
        assert finder("abc", "xyz", 1, 3, 2, 3) == (1, 2, 0)

    def test_empty_windows(self, finder):
        assert finder("abc", "abc", 1, 1, 0, 3) == (1, 0, 0)
        assert finder("", "", 0, 0, 0, 0) == (0, 0, 0)

    def test_prefers_earliest_in_shorter(self, finder):
        # "ab" and "cd" are both length-2 matches; "ab" starts first in shorter.
        assert finder("abcd", "cdab", 0, 4, 0, 4) == (0, 2, 2)

    def test_prefers_earliest_in_longer(self, finder):
        assert finder("ab", "xabyab", 0, 2, 0, 6) == (0, 1, 2)

    def test_longest_beats_earliest(self, finder):
        assert finder("axbcd", "bcdxa", 0, 5, 0, 5) == (2, 0, 3)

    def test_respects_window_in_longer(self, finder):
        assert finder("ab", "abxab", 0, 2, 1, 5) == (0, 3, 2)

    def test_match_must_end_inside_window(self, finder):
        # "abc" occurs at 0 but the window stops at 2.
        assert finder("abc", "abcabc", 0, 3, 0, 2) == (0, 0, 2)

    def test_respects_window_in_shorter(self, finder):
        assert finder("abcab", "ab", 1, 5, 0, 2) == (3, 0, 2)

    def test_scalar_offsets_with_wide_chars(self, finder):
        assert finder("chance", "スマホでchance", 0, 6, 0, 10) == (0, 4, 6)

    def test_offsets_after_multibyte_prefix_in_window(self, finder):
        assert finder("でc", "スマホでchance", 0, 2, 2, 10) == (0, 3, 2)

    def test_returns_matching_block(self, finder):
        result = finder("abc", "abc", 0, 3, 0, 3)
        assert isinstance(result, MatchingBlock)
        assert result.size == 3

    def test_high_past_end_raises(self, finder):
        with pytest.raises(MatchblocksContractError) as exc_info:
            finder("abc", "abc", 0, 4, 0, 3)
        assert exc_info.value.context["argument"] == "shorter"

    def test_inverted_window_raises(self, finder):
        with pytest.raises(MatchblocksContractError) as exc_info:
            finder("abc", "abc", 0, 3, 2, 1)
        assert exc_info.value.context["argument"] == "longer"


class TestPositionIndex:
    def test_positions_ascending(self):
        assert build_position_index("abca") == {"a": [0, 3], "b": [1], "c": [2]}

    def test_empty(self):
        assert build_position_index("") == {}

    def test_reused_index(self):
        longer = "xxabyyab"
        index = build_position_index(longer)
        assert find_longest_match_indexed("ab", longer, 0, 2, 0, 8, index) == (0, 2, 2)
        assert find_longest_match_indexed("ab", longer, 0, 2, 4, 8, index) == (0, 6, 2)
