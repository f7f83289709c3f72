"""
Closing statistics for a drive session.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional


@dataclass(frozen=True)
class SessionStatistics:
    max_speed: float
    avg_speed: float
    duration_minutes: int


def compute_session_statistics(
    start_time: datetime,
    end_time: datetime,
    speeds: Iterable[Optional[float]]
) -> SessionStatistics:
    """
    Max and mean speed over the session's samples plus whole elapsed minutes.

    A session without samples closes with both speeds at 0. Missing speeds are
    skipped the way SQL AVG/MAX skip NULLs. Duration is truncated toward zero,
    so 95 seconds is 1 minute.
    """
    values = [float(s) for s in speeds if s is not None]

    max_speed = max(values) if values else 0.0
    avg_speed = sum(values) / len(values) if values else 0.0
    duration_minutes = int((end_time - start_time) / timedelta(minutes=1))

    return SessionStatistics(
        max_speed=max_speed,
        avg_speed=avg_speed,
        duration_minutes=duration_minutes
    )
