# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-command recorder writing into the Prometheus metric set.

A PrometheusCommandRecorder is an immutable (command name, metric set) pair.
It owns no series: every event looks up the command's child through the
series' ``labels()`` call, which prometheus_client guards with a lock, and
mutates it with prometheus_client's synchronized value primitives.

Usage:
    ```python
    recorder = metric_set.new_recorder("orders")
    recorder.record_attempt()
    recorder.record_success()
    recorder.update_run_duration(timedelta(milliseconds=250))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client.metrics import MetricWrapperBase

from hystrix_prometheus.utils import (
    DurationLike,
    duration_to_seconds,
    validate_command_name,
)

if TYPE_CHECKING:
    from hystrix_prometheus.observability.prometheus_metric_set import (
        PrometheusMetricSet,
    )


class PrometheusCommandRecorder:
    """Translates command lifecycle events into Prometheus series updates.

    Recorders are cheap and may be created any number of times for the same
    command name; all of them write into the same per-command children, so
    discarding a recorder never loses data. Construction ensures a child in
    every series, so a recorder built without ``new_recorder`` still makes the
    command visible with counters and gauge at 0.

    Attributes:
        command_name: Value of the ``command`` label for every update.
        metric_set: The metric set owning the series.
    """

    __slots__ = ("_command_name", "_metric_set")

    def __init__(self, command_name: str, metric_set: PrometheusMetricSet) -> None:
        self._command_name = validate_command_name(command_name, operation="recorder_init")
        self._metric_set = metric_set
        metric_set.ensure_command(self._command_name)

    @property
    def command_name(self) -> str:
        return self._command_name

    @property
    def metric_set(self) -> PrometheusMetricSet:
        return self._metric_set

    def _child(self, attribute: str) -> MetricWrapperBase:
        return self._metric_set.metric(attribute).labels(self._command_name)

    def record_attempt(self) -> None:
        """Increment the number of updates."""
        self._child("attempts").inc()

    def record_error(self) -> None:
        """Increment the number of unsuccessful attempts.

        Attempts minus Errors will equal successes within a time range.
        Errors are any result from an attempt that is not a success.
        """
        self._child("errors").inc()

    def record_success(self) -> None:
        """Increment the number of requests that succeed."""
        self._child("successes").inc()

    def record_failure(self) -> None:
        """Increment the number of requests that fail."""
        self._child("failures").inc()

    def record_reject(self) -> None:
        """Increment the number of requests that are rejected."""
        self._child("rejects").inc()

    def record_short_circuit(self) -> None:
        """Increment the number of requests short circuited by an open circuit."""
        self._child("short_circuits").inc()

    def record_timeout(self) -> None:
        """Increment the number of timeouts in the circuit breaker."""
        self._child("timeouts").inc()

    def record_fallback_success(self) -> None:
        """Increment the number of successful fallback executions."""
        self._child("fallback_successes").inc()

    def record_fallback_failure(self) -> None:
        """Increment the number of failed fallback executions."""
        self._child("fallback_failures").inc()

    def update_total_duration(self, time_since_start: DurationLike) -> None:
        """Set how long the command has been running, in seconds.

        Overwrites the previous value. Concurrent updates for the same
        command are last-write-wins.
        """
        self._child("total_duration_seconds").set(duration_to_seconds(time_since_start))

    def update_run_duration(self, run_duration: DurationLike) -> None:
        """Observe how long the last run took, in seconds."""
        self._child("run_duration_seconds").observe(duration_to_seconds(run_duration))

    def reset(self) -> None:
        """Do nothing.

        Per-command series are cumulative and outlive recorder handles;
        dashboards rely on counters that never go back to zero.
        """

    # Names used by the collector interface of the command engine.
    increment_attempts = record_attempt
    increment_errors = record_error
    increment_successes = record_success
    increment_failures = record_failure
    increment_rejects = record_reject
    increment_short_circuits = record_short_circuit
    increment_timeouts = record_timeout
    increment_fallback_successes = record_fallback_success
    increment_fallback_failures = record_fallback_failure

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrometheusCommandRecorder):
            return NotImplemented
        return (
            self._command_name == other._command_name
            and self._metric_set is other._metric_set
        )

    def __hash__(self) -> int:
        return hash((self._command_name, id(self._metric_set)))

    def __repr__(self) -> str:
        return f"PrometheusCommandRecorder(command_name={self._command_name!r})"


__all__ = ["PrometheusCommandRecorder"]
