# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Per-command Hystrix metrics for Prometheus.

Turns circuit breaker command lifecycle events (attempts, successes,
failures, timeouts, rejections, short circuits, fallback outcomes and
durations) into ``hystrix_go_*`` series labeled by command name.

Example:
    ```python
    from prometheus_client import CollectorRegistry
    from hystrix_prometheus import PrometheusMetricSet

    metric_set = PrometheusMetricSet(CollectorRegistry())
    recorder = metric_set.new_recorder("orders")
    recorder.record_attempt()
    ```
"""

from hystrix_prometheus.collectors import (
    InMemoryMetricCollector,
    MetricCollectorRegistry,
    NoopMetricCollector,
    metric_collector_registry,
)
from hystrix_prometheus.errors import (
    InvalidCommandNameError,
    MetricsAdapterError,
    MetricsConfigurationError,
    RegistrationConflictError,
)
from hystrix_prometheus.models import ModelMetricSetConfig
from hystrix_prometheus.observability import (
    PrometheusCommandRecorder,
    PrometheusMetricSet,
)
from hystrix_prometheus.protocols import ProtocolMetricCollector

__version__ = "0.1.0"

__all__ = [
    "InMemoryMetricCollector",
    "InvalidCommandNameError",
    "MetricCollectorRegistry",
    "MetricsAdapterError",
    "MetricsConfigurationError",
    "ModelMetricSetConfig",
    "NoopMetricCollector",
    "PrometheusCommandRecorder",
    "PrometheusMetricSet",
    "ProtocolMetricCollector",
    "RegistrationConflictError",
    "metric_collector_registry",
]
