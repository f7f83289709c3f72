"""
Models package for the application.
"""

from .drive_session import DriveSession
from .speed_sample import SpeedSample
from .user_preferences import UserPreferences

__all__ = [
    "DriveSession",
    "SpeedSample",
    "UserPreferences",
]
