"""
Storage access for sessions, samples and preferences.
"""

from .drive_session_repository import DriveSessionRepository
from .speed_sample_repository import SpeedSampleRepository
from .user_preferences_repository import UserPreferencesRepository

__all__ = [
    "DriveSessionRepository",
    "SpeedSampleRepository",
    "UserPreferencesRepository",
]
