# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command Metrics Adapter Errors Module.

Exports:
    ModelMetricsErrorContext: Configuration model for bundled error context
    MetricsAdapterError: Base adapter error class
    RegistrationConflictError: Series name already registered in the registry
    InvalidCommandNameError: Empty or non-string command name
    MetricsConfigurationError: Invalid buckets or environment settings

Error Sanitization Guidelines:
    Command names and series names are safe to include. Never include
    registry internals or raw environment dumps in messages.
"""

from hystrix_prometheus.errors.metrics_errors import (
    InvalidCommandNameError,
    MetricsAdapterError,
    MetricsConfigurationError,
    RegistrationConflictError,
)
from hystrix_prometheus.errors.model_metrics_error_context import (
    ModelMetricsErrorContext,
)

__all__ = [
    "InvalidCommandNameError",
    "MetricsAdapterError",
    "MetricsConfigurationError",
    "ModelMetricsErrorContext",
    "RegistrationConflictError",
]
