"""Shared test fixtures for the matchblocks test suite."""

from __future__ import annotations

from typing import Any

import pytest

from matchblocks.config import MatcherConfig
from matchblocks.matcher import BlockMatcher


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})

    def names(self) -> set[str]:
        return (
            {c["name"] for c in self.increments}
            | {t["name"] for t in self.timings}
            | {g["name"] for g in self.gauges}
        )


@pytest.fixture
def config() -> MatcherConfig:
    """Default matcher configuration."""
    return MatcherConfig()


@pytest.fixture
def recorder() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def matcher(recorder: RecordingMetricsHook) -> BlockMatcher:
    """Matcher with a recording metrics hook attached."""
    return BlockMatcher(MatcherConfig(metrics=recorder))
