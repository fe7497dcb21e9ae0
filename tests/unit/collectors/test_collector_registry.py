# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for MetricCollectorRegistry."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from prometheus_client import CollectorRegistry

from hystrix_prometheus.collectors import (
    InMemoryMetricCollector,
    MetricCollectorRegistry,
    NoopMetricCollector,
    metric_collector_registry,
)
from hystrix_prometheus.errors import InvalidCommandNameError
from hystrix_prometheus.observability import (
    PrometheusCommandRecorder,
    PrometheusMetricSet,
)

pytestmark = pytest.mark.unit


class TestMetricCollectorRegistry:
    """Tests for factory registration and collector initialization."""

    def test_empty_registry_returns_no_collectors(self) -> None:
        registry = MetricCollectorRegistry()

        assert registry.initialize_metric_collectors("orders") == []
        assert len(registry) == 0

    def test_factories_called_in_order(self) -> None:
        registry = MetricCollectorRegistry()
        registry.register(NoopMetricCollector)
        registry.register(InMemoryMetricCollector)

        collectors = registry.initialize_metric_collectors("orders")

        assert [type(c) for c in collectors] == [
            NoopMetricCollector,
            InMemoryMetricCollector,
        ]
        assert all(c.command_name == "orders" for c in collectors)

    def test_prometheus_factory(self, isolated_registry: CollectorRegistry) -> None:
        metric_set = PrometheusMetricSet(isolated_registry)
        registry = MetricCollectorRegistry()
        registry.register(metric_set.collector)

        (collector,) = registry.initialize_metric_collectors("orders")
        collector.record_attempt()

        assert isinstance(collector, PrometheusCommandRecorder)
        assert (
            isolated_registry.get_sample_value(
                "hystrix_go_attempts_total", {"command": "orders"}
            )
            == 1.0
        )

    def test_factory_errors_propagate(self, isolated_registry: CollectorRegistry) -> None:
        registry = MetricCollectorRegistry()
        registry.register(PrometheusMetricSet(isolated_registry).collector)

        with pytest.raises(InvalidCommandNameError):
            registry.initialize_metric_collectors("")

    def test_register_rejects_non_callable(self) -> None:
        with pytest.raises(TypeError):
            MetricCollectorRegistry().register("not a factory")  # type: ignore[arg-type]

    def test_clear(self) -> None:
        registry = MetricCollectorRegistry()
        registry.register(NoopMetricCollector)

        registry.clear()

        assert registry.initialize_metric_collectors("orders") == []

    def test_concurrent_registration(self) -> None:
        registry = MetricCollectorRegistry()

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [executor.submit(registry.register, NoopMetricCollector) for _ in range(100)]
            for future in futures:
                future.result()

        assert len(registry) == 100

    def test_global_registry_instance(self) -> None:
        metric_collector_registry.register(NoopMetricCollector)

        assert len(metric_collector_registry.initialize_metric_collectors("orders")) == 1
