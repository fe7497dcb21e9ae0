# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command name validation shared by every collector implementation."""

from __future__ import annotations

from hystrix_prometheus.errors import InvalidCommandNameError, ModelMetricsErrorContext


def validate_command_name(command_name: object, operation: str = "new_recorder") -> str:
    """Return ``command_name`` if it is a non-empty string.

    Raises:
        InvalidCommandNameError: If the name is empty or not a string.
    """
    if not isinstance(command_name, str):
        raise InvalidCommandNameError(
            f"Command name must be a string, got {type(command_name).__name__}",
            context=ModelMetricsErrorContext(operation=operation),
        )
    if not command_name:
        raise InvalidCommandNameError(
            "Command name must not be empty",
            context=ModelMetricsErrorContext(operation=operation, command_name=command_name),
        )
    return command_name


__all__ = ["validate_command_name"]
