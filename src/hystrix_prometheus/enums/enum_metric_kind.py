# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metric Kind Enumeration.

Defines the three series shapes produced by the command metrics adapter.
"""

from enum import Enum


class EnumMetricKind(str, Enum):
    """Prometheus series shapes used by the command metrics adapter.

    Attributes:
        COUNTER: Monotonically non-decreasing value per label value
        GAUGE: Last-write-wins value per label value
        HISTOGRAM: Bucketed observations with implicit sum and count
    """

    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"


__all__ = ["EnumMetricKind"]
