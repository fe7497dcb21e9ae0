# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the command metrics adapter.

Exports:
    EnumMetricKind: Series shape (counter, gauge, histogram)
    EnumMetricsErrorCode: Error classification codes
"""

from hystrix_prometheus.enums.enum_metric_kind import EnumMetricKind
from hystrix_prometheus.enums.enum_metrics_error_code import EnumMetricsErrorCode

__all__ = [
    "EnumMetricKind",
    "EnumMetricsErrorCode",
]
