"""
Drive Session Routes
Drive mode start/end events, speed readings and drive history
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from drivesafe.database.connection import get_db
from drivesafe.middlewares.user_context import get_current_user_id
from drivesafe.api.v1.controllers.drive_session_controller import DriveSessionController
from drivesafe.schemas.drive_session_schemas import (
    SessionLogRequest, SpeedSampleRequest,
    DriveSessionRead, DriveSessionSummary, SpeedSampleRead
)

router = APIRouter(prefix="/drive-sessions", tags=["Drive Sessions"])


@router.post("/log", response_model=DriveSessionRead)
async def log_session(
    payload: SessionLogRequest,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Start or end drive mode

    - **event**: `start` opens a session, `end` closes the active one
    - **distanceTraveled**: optional, stored with the `end` event

    409 when starting while a session is active, 404 when ending without one.
    """
    return await DriveSessionController.log_session(user_id, db, payload)


@router.post("/speed", response_model=SpeedSampleRead)
async def record_speed(
    payload: SpeedSampleRequest,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Store one speed reading against the active session (404 if there is none)
    """
    return await DriveSessionController.record_speed(user_id, db, payload)


@router.get("/history", response_model=List[DriveSessionSummary])
async def get_history(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """All sessions of the user, newest first"""
    return await DriveSessionController.get_history(user_id, db)


@router.get("/active", response_model=Optional[DriveSessionRead])
async def get_active_session(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """The active session, or null when the user is not driving"""
    return await DriveSessionController.get_active_session(user_id, db)


@router.get("/{session_id}/samples", response_model=List[SpeedSampleRead])
async def get_session_samples(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Speed readings of one of the user's sessions, oldest first"""
    return await DriveSessionController.get_samples(user_id, db, session_id)
