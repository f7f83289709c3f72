"""
Preferences Controller
"""

from sqlalchemy.ext.asyncio import AsyncSession

from drivesafe.schemas.preferences_schemas import PreferencesRead, PreferencesUpdate, SpeedBandResponse
from drivesafe.services.preferences_service import PreferencesService, classify_speed


class PreferencesController:
    """Controller for user preferences."""

    @staticmethod
    async def get_preferences(user_id: str, db: AsyncSession) -> PreferencesRead:
        preferences = await PreferencesService(db).get_user_preferences(user_id)
        return PreferencesRead.model_validate(preferences)

    @staticmethod
    async def update_preferences(user_id: str, db: AsyncSession, payload: PreferencesUpdate) -> PreferencesRead:
        preferences = await PreferencesService(db).update_preferences(user_id, payload)
        return PreferencesRead.model_validate(preferences)

    @staticmethod
    async def get_speed_band(user_id: str, db: AsyncSession, speed: float) -> SpeedBandResponse:
        preferences = await PreferencesService(db).get_user_preferences(user_id)
        return SpeedBandResponse(speed=speed, band=classify_speed(speed, preferences))
