# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registry of metric collector factories.

The command engine keeps one MetricCollectorRegistry. Metric backends
register a factory taking a command name; when the engine starts tracking a
command it asks the registry for one collector per registered factory and
fans every lifecycle event out to all of them.

Usage:
    ```python
    metric_set = PrometheusMetricSet()
    metric_collector_registry.register(metric_set.collector)

    collectors = metric_collector_registry.initialize_metric_collectors("orders")
    for collector in collectors:
        collector.record_attempt()
    ```
"""

from __future__ import annotations

import logging
import threading

from hystrix_prometheus.protocols import MetricCollectorFactory, ProtocolMetricCollector

logger = logging.getLogger(__name__)


class MetricCollectorRegistry:
    """Thread-safe, ordered list of collector factories."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._factories: list[MetricCollectorFactory] = []

    def register(self, factory: MetricCollectorFactory) -> None:
        """Append a factory; it is used for every command initialized afterwards."""
        if not callable(factory):
            raise TypeError("metric collector factory must be callable")
        with self._lock:
            self._factories.append(factory)
            count = len(self._factories)
        logger.debug(
            "Registered metric collector factory %r (%d total)",
            factory,
            count,
        )

    def initialize_metric_collectors(self, name: str) -> list[ProtocolMetricCollector]:
        """Create one collector per registered factory for command ``name``.

        Factories are called in registration order. Errors raised by a
        factory (for example InvalidCommandNameError) propagate unchanged.
        """
        with self._lock:
            factories = list(self._factories)
        return [factory(name) for factory in factories]

    def clear(self) -> None:
        """Remove every registered factory."""
        with self._lock:
            self._factories.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)


# Global registry instance
metric_collector_registry = MetricCollectorRegistry()


__all__ = ["MetricCollectorRegistry", "metric_collector_registry"]
