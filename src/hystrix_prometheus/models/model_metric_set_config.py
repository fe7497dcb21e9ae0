# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metric Set Configuration Model.

This module provides the Pydantic configuration model for PrometheusMetricSet,
including loading from environment variables.

Environment Variables:
    HYSTRIX_METRICS_DURATION_BUCKETS: Comma separated histogram bucket upper
        bounds in seconds (e.g. ``0.01,0.1,1,10``). Unset or empty means the
        prometheus_client default buckets.
    HYSTRIX_METRICS_PORT: Port for the optional pull endpoint. Unset or empty
        means no endpoint is started.
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hystrix_prometheus.errors import (
    MetricsConfigurationError,
    ModelMetricsErrorContext,
)

logger = logging.getLogger(__name__)

ENV_DURATION_BUCKETS = "HYSTRIX_METRICS_DURATION_BUCKETS"
ENV_METRICS_PORT = "HYSTRIX_METRICS_PORT"


def validate_duration_buckets(buckets: tuple[float, ...]) -> tuple[float, ...]:
    """Validate histogram bucket upper bounds.

    Bounds must be positive, strictly increasing and include a finite value.
    A trailing ``+Inf`` is accepted; prometheus_client appends one when it
    is missing.

    Args:
        buckets: Candidate bucket upper bounds.

    Returns:
        The bounds as a tuple of floats.

    Raises:
        ValueError: If the sequence is empty, contains NaN, a non-positive
            value, no finite bound, or is not strictly increasing.
    """
    values = tuple(float(bound) for bound in buckets)
    if not values:
        raise ValueError("duration buckets must not be empty")
    previous: Optional[float] = None
    for bound in values:
        if math.isnan(bound):
            raise ValueError("duration buckets must not contain NaN")
        if bound <= 0:
            raise ValueError(f"duration bucket {bound} is not positive")
        if previous is not None and bound <= previous:
            raise ValueError(
                f"duration buckets must be strictly increasing ({previous} >= {bound})"
            )
        previous = bound
    if math.isinf(values[0]):
        raise ValueError("duration buckets need at least one finite bound")
    return values


class ModelMetricSetConfig(BaseModel):
    """Configuration for PrometheusMetricSet construction and wiring.

    Attributes:
        duration_buckets: Histogram bucket upper bounds in seconds. None
            selects the prometheus_client default buckets.
        metrics_port: Port for the optional pull endpoint.

    Example:
        >>> config = ModelMetricSetConfig(duration_buckets=(0.05, 0.1, 0.5, 1.0))
        >>> metric_set = PrometheusMetricSet(registry, config=config)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    duration_buckets: Optional[tuple[float, ...]] = Field(
        default=None,
        description="Histogram bucket upper bounds in seconds",
    )
    metrics_port: Optional[int] = Field(
        default=None,
        ge=1,
        le=65535,
        description="Port for the optional pull endpoint",
    )

    @field_validator("duration_buckets")
    @classmethod
    def validate_buckets(
        cls, v: Optional[tuple[float, ...]]
    ) -> Optional[tuple[float, ...]]:
        if v is None:
            return None
        return validate_duration_buckets(v)

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> ModelMetricSetConfig:
        """Load configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``).

        Returns:
            Validated configuration.

        Raises:
            MetricsConfigurationError: If a variable cannot be parsed or the
                resulting configuration is invalid.
        """
        env = os.environ if environ is None else environ
        context = ModelMetricsErrorContext(operation="from_env")

        raw_buckets = env.get(ENV_DURATION_BUCKETS, "").strip()
        raw_port = env.get(ENV_METRICS_PORT, "").strip()

        buckets: Optional[tuple[float, ...]] = None
        if raw_buckets:
            try:
                buckets = tuple(
                    float(part) for part in raw_buckets.split(",") if part.strip()
                )
            except ValueError as e:
                raise MetricsConfigurationError(
                    f"{ENV_DURATION_BUCKETS} must be a comma separated list of numbers",
                    context=context,
                    variable=ENV_DURATION_BUCKETS,
                ) from e

        port: Optional[int] = None
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError as e:
                raise MetricsConfigurationError(
                    f"{ENV_METRICS_PORT} must be an integer",
                    context=context,
                    variable=ENV_METRICS_PORT,
                ) from e

        try:
            config = cls(duration_buckets=buckets, metrics_port=port)
        except ValidationError as e:
            raise MetricsConfigurationError(
                f"Invalid metrics configuration from environment: {e.error_count()} error(s)",
                context=context,
            ) from e

        logger.debug(
            "Loaded metrics configuration from environment",
            extra={
                "duration_buckets": config.duration_buckets,
                "metrics_port": config.metrics_port,
            },
        )
        return config


__all__ = [
    "ENV_DURATION_BUCKETS",
    "ENV_METRICS_PORT",
    "ModelMetricSetConfig",
    "validate_duration_buckets",
]
