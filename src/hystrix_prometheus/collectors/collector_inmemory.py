# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory metric collector for unit testing.

Keeps per-event counts and duration samples for one command in process
memory so command engine tests can assert on reported events without a
Prometheus registry.

WARNING: Run durations are kept as an unbounded list. Not for production use.
"""

from __future__ import annotations

import threading
from collections import Counter

from hystrix_prometheus.models import ModelCollectorSnapshot
from hystrix_prometheus.utils import (
    DurationLike,
    duration_to_seconds,
    validate_command_name,
)

_COUNTER_FIELDS = (
    "attempts",
    "errors",
    "successes",
    "failures",
    "rejects",
    "short_circuits",
    "timeouts",
    "fallback_successes",
    "fallback_failures",
)


class InMemoryMetricCollector:
    """Thread-safe in-memory collector for a single command.

    Example:
        >>> collector = InMemoryMetricCollector("orders")
        >>> collector.record_attempt()
        >>> collector.snapshot().attempts
        1
    """

    __slots__ = (
        "_command_name",
        "_counts",
        "_lock",
        "_run_durations",
        "_total_duration",
    )

    def __init__(self, command_name: str) -> None:
        self._command_name = validate_command_name(command_name)
        self._lock = threading.Lock()
        self._counts: Counter[str] = Counter({field: 0 for field in _COUNTER_FIELDS})
        self._total_duration = 0.0
        self._run_durations: list[float] = []

    @property
    def command_name(self) -> str:
        return self._command_name

    def _increment(self, field: str) -> None:
        with self._lock:
            self._counts[field] += 1

    def record_attempt(self) -> None:
        self._increment("attempts")

    def record_error(self) -> None:
        self._increment("errors")

    def record_success(self) -> None:
        self._increment("successes")

    def record_failure(self) -> None:
        self._increment("failures")

    def record_reject(self) -> None:
        self._increment("rejects")

    def record_short_circuit(self) -> None:
        self._increment("short_circuits")

    def record_timeout(self) -> None:
        self._increment("timeouts")

    def record_fallback_success(self) -> None:
        self._increment("fallback_successes")

    def record_fallback_failure(self) -> None:
        self._increment("fallback_failures")

    def update_total_duration(self, time_since_start: DurationLike) -> None:
        seconds = duration_to_seconds(time_since_start)
        with self._lock:
            self._total_duration = seconds

    def update_run_duration(self, run_duration: DurationLike) -> None:
        seconds = duration_to_seconds(run_duration)
        with self._lock:
            self._run_durations.append(seconds)

    def reset(self) -> None:
        """Do nothing; recorded history is kept like the Prometheus recorder does."""

    def snapshot(self) -> ModelCollectorSnapshot:
        """Return an immutable copy of the current state."""
        with self._lock:
            counts = dict(self._counts)
            total_duration = self._total_duration
            run_durations = tuple(self._run_durations)
        return ModelCollectorSnapshot(
            command_name=self._command_name,
            total_duration_seconds=total_duration,
            run_durations_seconds=run_durations,
            last_run_duration_seconds=run_durations[-1] if run_durations else None,
            **counts,
        )


__all__ = ["InMemoryMetricCollector"]
