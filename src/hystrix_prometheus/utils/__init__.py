# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared utilities for the command metrics adapter."""

from hystrix_prometheus.utils.util_command_names import validate_command_name
from hystrix_prometheus.utils.util_durations import DurationLike, duration_to_seconds

__all__ = ["DurationLike", "duration_to_seconds", "validate_command_name"]
