# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Collector implementations and the collector factory registry.

Exports:
    MetricCollectorRegistry: Ordered registry of collector factories
    metric_collector_registry: Process-wide registry instance
    InMemoryMetricCollector: Test-only in-memory collector
    NoopMetricCollector: Collector that discards every event
"""

from hystrix_prometheus.collectors.collector_inmemory import InMemoryMetricCollector
from hystrix_prometheus.collectors.collector_noop import NoopMetricCollector
from hystrix_prometheus.collectors.collector_registry import (
    MetricCollectorRegistry,
    metric_collector_registry,
)

__all__ = [
    "InMemoryMetricCollector",
    "MetricCollectorRegistry",
    "NoopMetricCollector",
    "metric_collector_registry",
]
