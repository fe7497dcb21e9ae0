# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Duration conversion helpers.

Command engines hand durations over either as ``datetime.timedelta`` or as
a plain number of seconds; series values are always seconds.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Union

DurationLike = Union[timedelta, int, float]


def duration_to_seconds(duration: DurationLike) -> float:
    """Convert a timedelta or numeric seconds value to float seconds.

    Args:
        duration: ``timedelta`` or number of seconds.

    Returns:
        The duration in seconds.

    Raises:
        TypeError: If the value is neither a timedelta nor a real number.
    """
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise TypeError(
            f"duration must be a timedelta or number of seconds, got {type(duration).__name__}"
        )
    return float(duration)


__all__ = ["DurationLike", "duration_to_seconds"]
