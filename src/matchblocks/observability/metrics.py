"""Metrics hook protocol and no-op default implementation.

:class:`~matchblocks.matcher.BlockMatcher` reports counters and timings
through whatever object is set as ``MatcherConfig.metrics``.  By default a
:class:`NoopMetricsHook` is used.  Any object satisfying :class:`MetricsHook`
can route the data to StatsD, Prometheus or a test recorder.

Emitted metric names:

* ``matchblocks.comparisons_total``      -- counter (tag ``strategy``)
* ``matchblocks.blocks_found_total``     -- counter
* ``matchblocks.match_duration_ms``      -- timing
* ``matchblocks.inputs_rejected_total``  -- counter (tag ``reason``)
* ``matchblocks.input_length``          -- gauge (longer of the two inputs)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict of string keys and values.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics backend that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
