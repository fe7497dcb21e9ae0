# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""No-op metric collector.

Stands in for a real collector when metrics are disabled.
"""

from __future__ import annotations

from hystrix_prometheus.utils import DurationLike, validate_command_name


class NoopMetricCollector:
    """Collector that discards every event."""

    __slots__ = ("_command_name",)

    def __init__(self, command_name: str) -> None:
        self._command_name = validate_command_name(command_name)

    @property
    def command_name(self) -> str:
        return self._command_name

    def record_attempt(self) -> None:
        pass

    def record_error(self) -> None:
        pass

    def record_success(self) -> None:
        pass

    def record_failure(self) -> None:
        pass

    def record_reject(self) -> None:
        pass

    def record_short_circuit(self) -> None:
        pass

    def record_timeout(self) -> None:
        pass

    def record_fallback_success(self) -> None:
        pass

    def record_fallback_failure(self) -> None:
        pass

    def update_total_duration(self, time_since_start: DurationLike) -> None:
        pass

    def update_run_duration(self, run_duration: DurationLike) -> None:
        pass

    def reset(self) -> None:
        pass


__all__ = ["NoopMetricCollector"]
