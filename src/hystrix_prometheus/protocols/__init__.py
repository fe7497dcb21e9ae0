# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for the command metrics adapter."""

from hystrix_prometheus.protocols.protocol_metric_collector import (
    MetricCollectorFactory,
    ProtocolMetricCollector,
)

__all__ = ["MetricCollectorFactory", "ProtocolMetricCollector"]
