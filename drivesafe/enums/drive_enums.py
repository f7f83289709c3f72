"""
Drive-session enums for the application.
"""

from enum import Enum


class SessionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


class SessionEvent(str, Enum):
    START = "start"
    END = "end"


class SpeedBand(str, Enum):
    STATIONARY = "STATIONARY"
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
