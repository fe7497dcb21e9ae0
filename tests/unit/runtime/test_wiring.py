# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for process wiring helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from prometheus_client import CollectorRegistry

from hystrix_prometheus.collectors import MetricCollectorRegistry
from hystrix_prometheus.models import (
    ENV_DURATION_BUCKETS,
    ENV_METRICS_PORT,
    ModelMetricSetConfig,
)
from hystrix_prometheus.observability import PrometheusMetricSet
from hystrix_prometheus.runtime import (
    create_metric_set,
    register_with,
    start_metrics_server,
    wiring,
)

pytestmark = pytest.mark.unit


class TestCreateMetricSet:
    """Tests for create_metric_set."""

    def test_uses_given_config(self, isolated_registry: CollectorRegistry) -> None:
        config = ModelMetricSetConfig(duration_buckets=(0.5, 5.0))

        metric_set = create_metric_set(config, isolated_registry)

        assert metric_set.registry is isolated_registry
        assert metric_set.duration_buckets == (0.5, 5.0)

    def test_loads_config_from_env(
        self, isolated_registry: CollectorRegistry, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(ENV_DURATION_BUCKETS, "0.1,1")
        monkeypatch.delenv(ENV_METRICS_PORT, raising=False)

        metric_set = create_metric_set(registry=isolated_registry)

        assert metric_set.duration_buckets == (0.1, 1.0)


class TestGetMetricSet:
    """Tests for the process-wide metric set."""

    def test_created_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        created: list[PrometheusMetricSet] = []

        def fake_create() -> PrometheusMetricSet:
            metric_set = PrometheusMetricSet(CollectorRegistry())
            created.append(metric_set)
            return metric_set

        monkeypatch.setattr(wiring, "_metric_set", None)
        monkeypatch.setattr(wiring, "create_metric_set", fake_create)

        first = wiring.get_metric_set()
        second = wiring.get_metric_set()

        assert first is second
        assert len(created) == 1


class TestStartMetricsServer:
    """Tests for start_metrics_server."""

    def test_serves_metric_set_registry(self, metric_set: PrometheusMetricSet) -> None:
        with patch("hystrix_prometheus.runtime.wiring.start_http_server") as mock_start:
            assert start_metrics_server(metric_set, 9102) is True

        mock_start.assert_called_once_with(9102, registry=metric_set.registry)

    def test_returns_false_on_bind_failure(self, metric_set: PrometheusMetricSet) -> None:
        with patch(
            "hystrix_prometheus.runtime.wiring.start_http_server",
            side_effect=OSError("Address already in use"),
        ):
            assert start_metrics_server(metric_set, 9102) is False


class TestRegisterWith:
    """Tests for register_with."""

    def test_registers_recorder_factory(self, metric_set: PrometheusMetricSet) -> None:
        collector_registry = MetricCollectorRegistry()

        register_with(collector_registry, metric_set)
        (collector,) = collector_registry.initialize_metric_collectors("orders")

        assert collector == metric_set.new_recorder("orders")
