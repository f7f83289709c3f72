"""
Shared enums for the application.
"""

from .drive_enums import (
    SessionStatus,
    SessionEvent,
    SpeedBand
)

__all__ = [
    "SessionStatus",
    "SessionEvent",
    "SpeedBand"
]
