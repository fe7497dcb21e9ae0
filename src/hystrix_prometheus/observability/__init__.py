# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Prometheus-backed command metrics.

Exports:
    PrometheusMetricSet: Owns and registers the 11 Hystrix series
    PrometheusCommandRecorder: Per-command event recorder
    HYSTRIX_METRIC_DEFINITIONS: Fixed series definitions
    PROMETHEUS_NAMESPACE: Series name prefix (``hystrix_go``)
    COMMAND_LABEL: The single label name (``command``)
    DEFAULT_DURATION_BUCKETS: prometheus_client default histogram buckets
"""

from hystrix_prometheus.observability.prometheus_command_recorder import (
    PrometheusCommandRecorder,
)
from hystrix_prometheus.observability.prometheus_metric_set import (
    COMMAND_LABEL,
    DEFAULT_DURATION_BUCKETS,
    HYSTRIX_METRIC_DEFINITIONS,
    PROMETHEUS_NAMESPACE,
    PrometheusMetricSet,
)

__all__ = [
    "COMMAND_LABEL",
    "DEFAULT_DURATION_BUCKETS",
    "HYSTRIX_METRIC_DEFINITIONS",
    "PROMETHEUS_NAMESPACE",
    "PrometheusCommandRecorder",
    "PrometheusMetricSet",
]
