# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Process wiring for the Hystrix metric set.

Registries stay injectable everywhere; the prometheus_client default
REGISTRY is only used by ``get_metric_set()``, the outermost composition
point.

Example:
    ```python
    from hystrix_prometheus.collectors import metric_collector_registry
    from hystrix_prometheus.runtime import get_metric_set, register_with

    metric_set = get_metric_set()
    register_with(metric_collector_registry, metric_set)
    ```
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from prometheus_client import CollectorRegistry, start_http_server

from hystrix_prometheus.collectors import MetricCollectorRegistry
from hystrix_prometheus.models import ModelMetricSetConfig
from hystrix_prometheus.observability import PrometheusMetricSet

logger = logging.getLogger(__name__)


def create_metric_set(
    config: Optional[ModelMetricSetConfig] = None,
    registry: Optional[CollectorRegistry] = None,
) -> PrometheusMetricSet:
    """
    Build a metric set from configuration.

    Args:
        config: Configuration (loaded from the environment if None)
        registry: Target registry (prometheus_client default if None)

    Returns:
        A registered PrometheusMetricSet

    Raises:
        MetricsConfigurationError: If the environment configuration is invalid
        RegistrationConflictError: If the series are already registered
    """
    if config is None:
        config = ModelMetricSetConfig.from_env()
    return PrometheusMetricSet(registry, config=config)


# Global metric set instance
_metric_set: Optional[PrometheusMetricSet] = None
_metric_set_lock = threading.Lock()


def get_metric_set() -> PrometheusMetricSet:
    """
    Get the process-wide metric set, creating it on first use.

    Returns:
        PrometheusMetricSet singleton registered with the default registry
    """
    global _metric_set

    with _metric_set_lock:
        if _metric_set is None:
            _metric_set = create_metric_set()
        return _metric_set


def start_metrics_server(metric_set: PrometheusMetricSet, port: int = 8000) -> bool:
    """
    Start the HTTP pull endpoint for the metric set's registry.

    Args:
        metric_set: Metric set whose registry is served
        port: Port to serve metrics on

    Returns:
        True if server started successfully
    """
    try:
        start_http_server(port, registry=metric_set.registry)
    except OSError as e:
        logger.error("Failed to start metrics server on port %d: %s", port, e)
        return False
    logger.info("Prometheus metrics server started on port %d", port)
    return True


def register_with(
    collector_registry: MetricCollectorRegistry,
    metric_set: PrometheusMetricSet,
) -> None:
    """Register the metric set's recorder factory with a collector registry."""
    collector_registry.register(metric_set.collector)


__all__ = [
    "create_metric_set",
    "get_metric_set",
    "register_with",
    "start_metrics_server",
]
