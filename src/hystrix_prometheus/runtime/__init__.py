# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Process wiring for the command metrics adapter."""

from hystrix_prometheus.runtime.wiring import (
    create_metric_set,
    get_metric_set,
    register_with,
    start_metrics_server,
)

__all__ = [
    "create_metric_set",
    "get_metric_set",
    "register_with",
    "start_metrics_server",
]
