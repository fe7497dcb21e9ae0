# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for the command metrics adapter."""

from hystrix_prometheus.models.model_collector_snapshot import ModelCollectorSnapshot
from hystrix_prometheus.models.model_metric_definition import ModelMetricDefinition
from hystrix_prometheus.models.model_metric_set_config import (
    ENV_DURATION_BUCKETS,
    ENV_METRICS_PORT,
    ModelMetricSetConfig,
    validate_duration_buckets,
)

__all__ = [
    "ENV_DURATION_BUCKETS",
    "ENV_METRICS_PORT",
    "ModelCollectorSnapshot",
    "ModelMetricDefinition",
    "ModelMetricSetConfig",
    "validate_duration_buckets",
]
