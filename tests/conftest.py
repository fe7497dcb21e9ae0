# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for hystrix_prometheus tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from prometheus_client import CollectorRegistry

from hystrix_prometheus.collectors import metric_collector_registry
from hystrix_prometheus.observability import PrometheusMetricSet

# =============================================================================
# PROMETHEUS REGISTRY FIXTURES
# =============================================================================


@pytest.fixture
def isolated_registry() -> CollectorRegistry:
    """Create an isolated Prometheus registry for test isolation.

    The default REGISTRY is global and persists across tests; a fresh
    registry lets every test construct its own metric set.
    """
    return CollectorRegistry()


@pytest.fixture
def metric_set(isolated_registry: CollectorRegistry) -> PrometheusMetricSet:
    """Metric set with default buckets registered in an isolated registry."""
    return PrometheusMetricSet(isolated_registry)


@pytest.fixture
def default_registry_metric_set() -> Generator[PrometheusMetricSet, None, None]:
    """Metric set registered in the default REGISTRY, removed on teardown."""
    metric_set = PrometheusMetricSet()
    yield metric_set
    metric_set.unregister()


@pytest.fixture(autouse=True)
def _clear_collector_registry() -> Generator[None, None, None]:
    """Keep the process-wide collector registry empty between tests."""
    metric_collector_registry.clear()
    yield
    metric_collector_registry.clear()
