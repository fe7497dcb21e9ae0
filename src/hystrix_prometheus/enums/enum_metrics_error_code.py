# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metrics Adapter Error Code Enumeration.

Error codes attached to every MetricsAdapterError so callers can classify
failures without matching on exception messages.
"""

from enum import Enum


class EnumMetricsErrorCode(str, Enum):
    """Error classification for the command metrics adapter.

    Attributes:
        REGISTRATION_CONFLICT: A series name is already registered in the
            target registry
        INVALID_COMMAND_NAME: A command name is empty or not a string
        INVALID_CONFIGURATION: Bucket boundaries or environment settings
            failed validation
        OPERATION_FAILED: Generic failure, used when nothing more specific fits
    """

    REGISTRATION_CONFLICT = "registration_conflict"
    INVALID_COMMAND_NAME = "invalid_command_name"
    INVALID_CONFIGURATION = "invalid_configuration"
    OPERATION_FAILED = "operation_failed"


__all__ = ["EnumMetricsErrorCode"]
