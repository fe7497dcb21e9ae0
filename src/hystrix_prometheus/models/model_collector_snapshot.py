# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Collector Snapshot Model.

Point-in-time copy of the state held by an InMemoryMetricCollector.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelCollectorSnapshot(BaseModel):
    """Immutable snapshot of one command's recorded events."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    command_name: str
    attempts: int = 0
    errors: int = 0
    successes: int = 0
    failures: int = 0
    rejects: int = 0
    short_circuits: int = 0
    timeouts: int = 0
    fallback_successes: int = 0
    fallback_failures: int = 0
    total_duration_seconds: float = 0.0
    run_durations_seconds: tuple[float, ...] = Field(default=())
    last_run_duration_seconds: Optional[float] = None

    @property
    def run_count(self) -> int:
        return len(self.run_durations_seconds)

    @property
    def run_duration_sum(self) -> float:
        return sum(self.run_durations_seconds)


__all__ = ["ModelCollectorSnapshot"]
