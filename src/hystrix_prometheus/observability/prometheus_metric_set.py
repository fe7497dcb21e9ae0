# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Prometheus Metric Set for Hystrix Commands

Owns the fixed collection of per-command series (9 counters, 1 gauge and
1 run duration histogram), registers them with a prometheus_client registry
and hands out PrometheusCommandRecorder instances bound to a command name.

Series identity is a compatibility surface for dashboards and alerts:
- Namespace ``hystrix_go``
- Single label ``command``
- Names and help texts in HYSTRIX_METRIC_DEFINITIONS

Example:
    ```python
    from prometheus_client import CollectorRegistry

    registry = CollectorRegistry()
    metric_set = PrometheusMetricSet(registry)
    recorder = metric_set.new_recorder("orders")
    recorder.record_attempt()
    ```

If ``registry`` is None the prometheus_client default REGISTRY is used. If
``duration_buckets`` is None, ``Histogram.DEFAULT_BUCKETS`` are used; tailor
the buckets to the response times of the commands being measured.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Dict, Optional

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)
from prometheus_client.metrics import MetricWrapperBase
from pydantic import ValidationError

from hystrix_prometheus.enums import EnumMetricKind
from hystrix_prometheus.errors import (
    MetricsConfigurationError,
    ModelMetricsErrorContext,
    RegistrationConflictError,
)
from hystrix_prometheus.models import ModelMetricDefinition, ModelMetricSetConfig
from hystrix_prometheus.observability.prometheus_command_recorder import (
    PrometheusCommandRecorder,
)
from hystrix_prometheus.utils import validate_command_name

logger = logging.getLogger(__name__)

PROMETHEUS_NAMESPACE = "hystrix_go"
COMMAND_LABEL = "command"

HYSTRIX_METRIC_DEFINITIONS: tuple[ModelMetricDefinition, ...] = (
    ModelMetricDefinition(
        attribute="attempts",
        name="attempts",
        description="The number of updates.",
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="errors",
        name="errors",
        description=(
            "The number of unsuccessful attempts. Attempts minus Errors will equal "
            "successes within a time range. Errors are any result from an attempt "
            "that is not a success."
        ),
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="successes",
        name="successes",
        description="The number of requests that succeed.",
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="failures",
        name="failures",
        description="The number of requests that fail.",
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="rejects",
        name="rejects",
        description="The number of requests that are rejected.",
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="short_circuits",
        name="short_circuits",
        description=(
            "The number of requests that short circuited due to the circuit being open."
        ),
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="timeouts",
        name="timeouts",
        description="The number of requests that are timeouted in the circuit breaker.",
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="fallback_successes",
        name="fallback_successes",
        description=(
            "The number of successes that occurred during the execution of the "
            "fallback function."
        ),
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="fallback_failures",
        name="fallback_failures",
        description=(
            "The number of failures that occurred during the execution of the "
            "fallback function."
        ),
        kind=EnumMetricKind.COUNTER,
    ),
    ModelMetricDefinition(
        attribute="total_duration_seconds",
        name="total_duration_seconds",
        description="The total runtime of this command in seconds.",
        kind=EnumMetricKind.GAUGE,
    ),
    ModelMetricDefinition(
        attribute="run_duration_seconds",
        name="run_duration_seconds",
        description="Runtime of the Hystrix command.",
        kind=EnumMetricKind.HISTOGRAM,
    ),
)

DEFAULT_DURATION_BUCKETS: tuple[float, ...] = tuple(Histogram.DEFAULT_BUCKETS)

# Serializes register/rollback batches so two racing metric sets cannot both
# end up half registered.
_REGISTRATION_LOCK = threading.Lock()


class PrometheusMetricSet:
    """
    Fixed set of per-command Hystrix series backed by prometheus_client.

    Series are created exactly once, in the constructor, and registered as a
    unit: either all 11 end up in the registry or none do. Per-command
    children are created on first access and never removed.
    """

    def __init__(
        self,
        registry: Optional[CollectorRegistry] = None,
        duration_buckets: Optional[Sequence[float]] = None,
        *,
        config: Optional[ModelMetricSetConfig] = None,
    ) -> None:
        """
        Create and register the Hystrix series.

        Args:
            registry: Target registry (uses the prometheus_client default if None)
            duration_buckets: Run duration histogram bucket upper bounds in
                seconds (uses Histogram.DEFAULT_BUCKETS if None)
            config: Full configuration; mutually exclusive with duration_buckets

        Raises:
            MetricsConfigurationError: If the bucket boundaries are invalid
            RegistrationConflictError: If any series name is already registered
        """
        config = self._resolve_config(duration_buckets, config)

        self._registry = registry if registry is not None else REGISTRY
        self._duration_buckets = config.duration_buckets or DEFAULT_DURATION_BUCKETS
        self._metrics: Dict[str, MetricWrapperBase] = {}
        self._registered = False

        for metric_def in HYSTRIX_METRIC_DEFINITIONS:
            self._metrics[metric_def.attribute] = self._create_metric(metric_def)

        self._register_all()

        logger.info(
            "Hystrix metric set registered (%d series, %d duration buckets)",
            len(self._metrics),
            len(self._duration_buckets),
        )

    @staticmethod
    def _resolve_config(
        duration_buckets: Optional[Sequence[float]],
        config: Optional[ModelMetricSetConfig],
    ) -> ModelMetricSetConfig:
        context = ModelMetricsErrorContext(operation="configure")
        if config is not None:
            if duration_buckets is not None:
                raise MetricsConfigurationError(
                    "Pass either duration_buckets or config, not both",
                    context=context,
                )
            return config
        if duration_buckets is None:
            return ModelMetricSetConfig()
        try:
            return ModelMetricSetConfig(duration_buckets=tuple(duration_buckets))
        except (TypeError, ValidationError) as e:
            raise MetricsConfigurationError(
                f"Invalid duration buckets: {e}",
                context=context,
            ) from e

    def _create_metric(self, metric_def: ModelMetricDefinition) -> MetricWrapperBase:
        """Create a single unregistered series from its definition."""
        common = {
            "name": metric_def.name,
            "documentation": metric_def.description,
            "labelnames": metric_def.labels,
            "namespace": PROMETHEUS_NAMESPACE,
            "registry": None,
        }
        if metric_def.kind == EnumMetricKind.COUNTER:
            return Counter(**common)
        if metric_def.kind == EnumMetricKind.GAUGE:
            return Gauge(**common)
        return Histogram(buckets=self._duration_buckets, **common)

    def _register_all(self) -> None:
        """Register every series, rolling back on the first conflict."""
        registered: list[MetricWrapperBase] = []
        with _REGISTRATION_LOCK:
            for metric_def in HYSTRIX_METRIC_DEFINITIONS:
                metric = self._metrics[metric_def.attribute]
                try:
                    self._registry.register(metric)
                except ValueError as e:
                    for done in reversed(registered):
                        self._registry.unregister(done)
                    full_name = metric_def.full_name(PROMETHEUS_NAMESPACE)
                    logger.error(
                        "Failed to register metric %s: %s",
                        full_name,
                        e,
                        extra={"metric_name": full_name},
                    )
                    raise RegistrationConflictError(
                        f"Series {full_name} is already registered in the target registry",
                        context=ModelMetricsErrorContext(
                            operation="register",
                            metric_name=full_name,
                        ),
                    ) from e
                registered.append(metric)
            self._registered = True

    def new_recorder(self, command_name: str) -> PrometheusCommandRecorder:
        """
        Return a recorder bound to ``command_name``.

        Every series gets a child for the command, so the command shows up in
        exports with counters and gauge at 0 before any event. Children that
        already exist keep their values.

        Raises:
            InvalidCommandNameError: If command_name is empty or not a string
        """
        validate_command_name(command_name)
        return PrometheusCommandRecorder(command_name, self)

    def ensure_command(self, command_name: str) -> None:
        """Make sure every series has a child for ``command_name``.

        Idempotent; called by every PrometheusCommandRecorder on construction.
        """
        for metric_def in HYSTRIX_METRIC_DEFINITIONS:
            # labels() creates missing children at zero and never resets existing ones
            self._metrics[metric_def.attribute].labels(command_name)

    def collector(self, name: str) -> PrometheusCommandRecorder:
        """Factory for MetricCollectorRegistry.register()."""
        return self.new_recorder(name)

    def metric(self, attribute: str) -> MetricWrapperBase:
        """Return the series for an attribute name such as ``"attempts"``."""
        return self._metrics[attribute]

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    @property
    def duration_buckets(self) -> tuple[float, ...]:
        return tuple(self._duration_buckets)

    @property
    def is_registered(self) -> bool:
        return self._registered

    def unregister(self) -> None:
        """Remove every series from the registry. Safe to call twice."""
        with _REGISTRATION_LOCK:
            if not self._registered:
                return
            for metric_def in HYSTRIX_METRIC_DEFINITIONS:
                self._registry.unregister(self._metrics[metric_def.attribute])
            self._registered = False
        logger.info("Hystrix metric set unregistered")

    def get_metrics_text(self) -> str:
        """
        Get the registry contents in Prometheus text format.

        Returns:
            Metrics in Prometheus exposition format
        """
        return generate_latest(self._registry).decode("utf-8")

    def __repr__(self) -> str:
        return (
            f"PrometheusMetricSet(series={len(self._metrics)}, "
            f"registered={self._registered})"
        )


__all__ = [
    "COMMAND_LABEL",
    "DEFAULT_DURATION_BUCKETS",
    "HYSTRIX_METRIC_DEFINITIONS",
    "PROMETHEUS_NAMESPACE",
    "PrometheusMetricSet",
]
