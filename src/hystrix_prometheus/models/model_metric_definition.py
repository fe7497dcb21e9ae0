# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metric Definition Model.

Immutable description of one series: its name, help text, shape and label
schema. Identities are fixed constants for the lifetime of the process.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hystrix_prometheus.enums import EnumMetricKind


class ModelMetricDefinition(BaseModel):
    """Definition for a Prometheus series.

    Attributes:
        attribute: Attribute name used to look the series up on the metric set
        name: Series name without namespace
        description: Help text exported with the series
        kind: Series shape
        labels: Label schema
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    attribute: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    kind: EnumMetricKind
    labels: tuple[str, ...] = Field(default=("command",))

    def full_name(self, namespace: str) -> str:
        """Return the namespaced series name, e.g. ``hystrix_go_attempts``."""
        return f"{namespace}_{self.name}" if namespace else self.name


__all__ = ["ModelMetricDefinition"]
