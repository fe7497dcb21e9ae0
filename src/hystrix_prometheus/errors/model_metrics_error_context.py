# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metrics Error Context Configuration Model.

This module defines the configuration model for metrics adapter error context,
bundling the structured fields every MetricsAdapterError may carry.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelMetricsErrorContext(BaseModel):
    """Structured context for metrics adapter errors.

    Attributes:
        operation: Operation being performed (register, new_recorder, from_env, etc.)
        metric_name: Fully qualified series name involved in the failure
        command_name: Command label value involved in the failure
        correlation_id: Correlation ID for distributed tracing

    Example:
        >>> context = ModelMetricsErrorContext(
        ...     operation="register",
        ...     metric_name="hystrix_go_attempts",
        ... )
        >>> raise RegistrationConflictError("Series already registered", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (register, new_recorder, from_env, etc.)",
    )
    metric_name: Optional[str] = Field(
        default=None,
        description="Fully qualified series name involved in the failure",
    )
    command_name: Optional[str] = Field(
        default=None,
        description="Command label value involved in the failure",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelMetricsErrorContext:
        """Create a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate
            **kwargs: Remaining context fields

        Returns:
            A context whose correlation_id is always set.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelMetricsErrorContext"]
