# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for per-command metric collectors.

This module defines the ProtocolMetricCollector interface the command engine
depends on. The engine receives one collector per command name and reports
every lifecycle event of that command through it.

Design Decisions:
    - runtime_checkable: Enables isinstance() checks for duck typing
    - Synchronous methods: Recording is a CPU-bound mutation, never awaited
    - No return values: Recording cannot fail once a collector exists
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hystrix_prometheus.utils import DurationLike


@runtime_checkable
class ProtocolMetricCollector(Protocol):
    """Protocol for per-command event sinks.

    Implementations:
        - PrometheusCommandRecorder: Writes into prometheus_client series
        - InMemoryMetricCollector: Test-only in-memory counts
        - NoopMetricCollector: Discards every event

    Concurrency Safety:
        All implementations MUST be safe for concurrent calls from many
        threads, for the same and for different command names.
    """

    @property
    def command_name(self) -> str:
        """Command name this collector is bound to."""
        ...

    def record_attempt(self) -> None:
        """Record an attempt to execute the command."""
        ...

    def record_error(self) -> None:
        """Record an attempt that did not end in success."""
        ...

    def record_success(self) -> None:
        """Record a successful execution."""
        ...

    def record_failure(self) -> None:
        """Record a failed execution."""
        ...

    def record_reject(self) -> None:
        """Record a rejected execution (no capacity)."""
        ...

    def record_short_circuit(self) -> None:
        """Record an execution short circuited by an open circuit."""
        ...

    def record_timeout(self) -> None:
        """Record an execution that timed out."""
        ...

    def record_fallback_success(self) -> None:
        """Record a successful fallback execution."""
        ...

    def record_fallback_failure(self) -> None:
        """Record a failed fallback execution."""
        ...

    def update_total_duration(self, time_since_start: DurationLike) -> None:
        """Set the time elapsed since the command started."""
        ...

    def update_run_duration(self, run_duration: DurationLike) -> None:
        """Observe the duration of the last run."""
        ...

    def reset(self) -> None:
        """Reset hook called by the engine. Implementations may ignore it."""
        ...


MetricCollectorFactory = Callable[[str], ProtocolMetricCollector]


__all__ = ["MetricCollectorFactory", "ProtocolMetricCollector"]
