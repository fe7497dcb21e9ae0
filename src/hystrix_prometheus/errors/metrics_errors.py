# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metrics Adapter Error Classes.

Error Hierarchy:
    MetricsAdapterError (base adapter error)
    ├── RegistrationConflictError
    ├── InvalidCommandNameError
    └── MetricsConfigurationError

All errors:
    - Carry an EnumMetricsErrorCode for classification
    - Support proper error chaining with `raise ... from e`
    - Accept ModelMetricsErrorContext for bundled context parameters
    - Accept arbitrary keyword context for debugging
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from hystrix_prometheus.enums import EnumMetricsErrorCode
from hystrix_prometheus.errors.model_metrics_error_context import (
    ModelMetricsErrorContext,
)


class MetricsAdapterError(Exception):
    """Base error class for the command metrics adapter.

    Structured Fields (via ModelMetricsErrorContext):
        operation: Operation being performed
        metric_name: Series involved
        command_name: Command label value involved
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelMetricsErrorContext(operation="register")
        >>> raise MetricsAdapterError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumMetricsErrorCode] = None,
        context: Optional[ModelMetricsErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize MetricsAdapterError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled error context
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumMetricsErrorCode.OPERATION_FAILED
        self.context = context or ModelMetricsErrorContext()

        structured_context: dict[str, object] = {
            key: value
            for key, value in self.context.model_dump().items()
            if value is not None and key != "correlation_id"
        }
        structured_context.update(extra_context)
        self.extra_context = structured_context

    @property
    def correlation_id(self) -> Optional[UUID]:
        return self.context.correlation_id

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"


class RegistrationConflictError(MetricsAdapterError):
    """Raised when a series name is already registered in the target registry.

    Construction of the metric set never partially succeeds: every series the
    failed construction managed to register is removed again before this
    error reaches the caller.

    Example:
        >>> context = ModelMetricsErrorContext(
        ...     operation="register",
        ...     metric_name="hystrix_go_attempts",
        ... )
        >>> raise RegistrationConflictError(
        ...     "Series already registered",
        ...     context=context,
        ... ) from e
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelMetricsErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumMetricsErrorCode.REGISTRATION_CONFLICT,
            context=context,
            **extra_context,
        )


class InvalidCommandNameError(MetricsAdapterError):
    """Raised when a command name is empty or not a string."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelMetricsErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumMetricsErrorCode.INVALID_COMMAND_NAME,
            context=context,
            **extra_context,
        )


class MetricsConfigurationError(MetricsAdapterError):
    """Raised when adapter configuration validation fails.

    Used for invalid histogram bucket boundaries, unparsable environment
    variables and conflicting constructor arguments.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelMetricsErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumMetricsErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


__all__ = [
    "InvalidCommandNameError",
    "MetricsAdapterError",
    "MetricsConfigurationError",
    "RegistrationConflictError",
]
