"""
Preferences Routes
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from drivesafe.database.connection import get_db
from drivesafe.middlewares.user_context import get_current_user_id
from drivesafe.api.v1.controllers.preferences_controller import PreferencesController
from drivesafe.schemas.preferences_schemas import PreferencesRead, PreferencesUpdate, SpeedBandResponse

router = APIRouter(prefix="/preferences", tags=["Preferences"])


@router.get("", response_model=PreferencesRead)
async def get_preferences(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Preferences of the user; defaults are stored on first read"""
    return await PreferencesController.get_preferences(user_id, db)


@router.put("", response_model=PreferencesRead)
async def update_preferences(
    payload: PreferencesUpdate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await PreferencesController.update_preferences(user_id, db, payload)


@router.get("/speed-band", response_model=SpeedBandResponse)
async def get_speed_band(
    speed: float = Query(..., description="Current speed in km/h"),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Notification band for a speed under the user's thresholds"""
    return await PreferencesController.get_speed_band(user_id, db, speed)
