"""
User Preferences Service
Speed thresholds and notification settings used by the app's drive mode.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from drivesafe.models.user_preferences import UserPreferences
from drivesafe.repositories import UserPreferencesRepository
from drivesafe.schemas.preferences_schemas import PreferencesUpdate
from drivesafe.enums import SpeedBand
from drivesafe.core.logger import get_logger

logger = get_logger("preferences_service")

DEFAULT_MODERATE_SPEED_THRESHOLD = 30  # km/h
DEFAULT_HIGH_SPEED_THRESHOLD = 60  # km/h
DEFAULT_AUTO_ENABLE_DRIVE_MODE = False

# Below this the phone is treated as not moving
STATIONARY_SPEED_LIMIT = 5  # km/h


def default_preferences(user_id: str) -> UserPreferences:
    """Unsaved preferences record carrying the stock thresholds."""
    return UserPreferences(
        user_id=user_id,
        moderate_speed_threshold=DEFAULT_MODERATE_SPEED_THRESHOLD,
        high_speed_threshold=DEFAULT_HIGH_SPEED_THRESHOLD,
        auto_enable_drive_mode=DEFAULT_AUTO_ENABLE_DRIVE_MODE,
        notification_exceptions=None
    )


def classify_speed(speed: float, preferences: UserPreferences) -> SpeedBand:
    """Map a speed onto the band the app uses to pick a notification mode."""
    high = preferences.high_speed_threshold
    if high is None:
        high = DEFAULT_HIGH_SPEED_THRESHOLD
    moderate = preferences.moderate_speed_threshold
    if moderate is None:
        moderate = DEFAULT_MODERATE_SPEED_THRESHOLD

    if speed >= high:
        return SpeedBand.HIGH
    if speed >= moderate:
        return SpeedBand.MODERATE
    if speed >= STATIONARY_SPEED_LIMIT:
        return SpeedBand.LOW
    return SpeedBand.STATIONARY


class PreferencesService:
    """Get-or-default and update for per-user preferences."""

    def __init__(self, db: AsyncSession):
        self.repository = UserPreferencesRepository(db)

    async def get_user_preferences(self, user_id: str) -> UserPreferences:
        preferences = await self.repository.find_by_user(user_id)
        if preferences:
            return preferences

        try:
            preferences = await self.repository.save(default_preferences(user_id))
            logger.info(f"Created default preferences for user {user_id}")
            return preferences
        except IntegrityError:
            # A concurrent request stored the defaults first
            logger.info(f"Default preferences for user {user_id} already created, re-reading")
            return await self.repository.find_by_user(user_id)

    async def update_preferences(self, user_id: str, update: PreferencesUpdate) -> UserPreferences:
        preferences = await self.get_user_preferences(user_id)

        update_data = update.dict(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            if hasattr(preferences, field):
                setattr(preferences, field, value)

        preferences = await self.repository.save(preferences)
        logger.info(f"Updated preferences for user {user_id}: {sorted(update_data)}")
        return preferences
