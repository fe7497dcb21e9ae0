# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for metrics adapter error classes.

All tests validate:
- Inheritance chain
- Error code mapping
- Structured context fields via ModelMetricsErrorContext
- Error chaining (raise ... from e)
"""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from hystrix_prometheus.enums import EnumMetricsErrorCode
from hystrix_prometheus.errors import (
    InvalidCommandNameError,
    MetricsAdapterError,
    MetricsConfigurationError,
    ModelMetricsErrorContext,
    RegistrationConflictError,
)

pytestmark = pytest.mark.unit


class TestModelMetricsErrorContext:
    """Tests for ModelMetricsErrorContext."""

    def test_defaults_are_none(self) -> None:
        context = ModelMetricsErrorContext()
        assert context.operation is None
        assert context.metric_name is None
        assert context.command_name is None
        assert context.correlation_id is None

    def test_with_correlation_generates_uuid(self) -> None:
        context = ModelMetricsErrorContext.with_correlation(operation="register")
        assert isinstance(context.correlation_id, UUID)
        assert context.operation == "register"

    def test_with_correlation_uses_provided_uuid(self) -> None:
        provided = uuid4()
        context = ModelMetricsErrorContext.with_correlation(correlation_id=provided)
        assert context.correlation_id == provided

    def test_frozen(self) -> None:
        context = ModelMetricsErrorContext(operation="register")
        with pytest.raises(ValidationError):
            context.operation = "other"  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelMetricsErrorContext(unknown="x")  # type: ignore[call-arg]


class TestMetricsAdapterError:
    """Tests for the base error class."""

    def test_default_error_code(self) -> None:
        error = MetricsAdapterError("boom")
        assert error.error_code == EnumMetricsErrorCode.OPERATION_FAILED
        assert error.message == "boom"
        assert str(error) == "[operation_failed] boom"

    def test_structured_context(self) -> None:
        correlation_id = uuid4()
        context = ModelMetricsErrorContext(
            operation="register",
            metric_name="hystrix_go_attempts",
            correlation_id=correlation_id,
        )
        error = MetricsAdapterError("boom", context=context, retry_count=2)

        assert error.correlation_id == correlation_id
        assert error.extra_context == {
            "operation": "register",
            "metric_name": "hystrix_go_attempts",
            "retry_count": 2,
        }

    def test_error_chaining(self) -> None:
        original = ValueError("Duplicated timeseries in CollectorRegistry")
        try:
            try:
                raise original
            except ValueError as e:
                raise RegistrationConflictError("conflict") from e
        except RegistrationConflictError as error:
            assert error.__cause__ is original


class TestErrorSubclasses:
    """Tests for error code mapping of subclasses."""

    @pytest.mark.parametrize(
        ("error_class", "code"),
        [
            (RegistrationConflictError, EnumMetricsErrorCode.REGISTRATION_CONFLICT),
            (InvalidCommandNameError, EnumMetricsErrorCode.INVALID_COMMAND_NAME),
            (MetricsConfigurationError, EnumMetricsErrorCode.INVALID_CONFIGURATION),
        ],
    )
    def test_code_and_inheritance(
        self, error_class: type[MetricsAdapterError], code: EnumMetricsErrorCode
    ) -> None:
        error = error_class("failed", context=ModelMetricsErrorContext(command_name="x"))

        assert isinstance(error, MetricsAdapterError)
        assert isinstance(error, Exception)
        assert error.error_code == code
        assert error.extra_context == {"command_name": "x"}
