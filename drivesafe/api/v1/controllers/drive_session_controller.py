"""
Drive Session Controller
Handles HTTP request/response logic for drive session endpoints
"""

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from drivesafe.enums import SessionEvent
from drivesafe.exceptions.errors import ApplicationException
from drivesafe.schemas.drive_session_schemas import (
    SessionLogRequest, SpeedSampleRequest,
    DriveSessionRead, DriveSessionSummary, SpeedSampleRead
)
from drivesafe.services.drive_session_service import DriveSessionService
from drivesafe.core.logger import get_logger

logger = get_logger("drive_session_controller")


class DriveSessionController:
    """Controller for drive session endpoints."""

    @staticmethod
    async def log_session(user_id: str, db: AsyncSession, payload: SessionLogRequest) -> DriveSessionRead:
        """Dispatch a start/end event to the service."""
        service = DriveSessionService(db)
        try:
            if payload.event == SessionEvent.START:
                session = await service.start_session(user_id)
            else:
                session = await service.end_session(user_id, distance_traveled=payload.distance_traveled)
            return DriveSessionRead.model_validate(session)

        except ApplicationException:
            raise
        except Exception as e:
            logger.error(f"❌ Error handling '{payload.event.value}' event for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update drive session"
            )

    @staticmethod
    async def record_speed(user_id: str, db: AsyncSession, payload: SpeedSampleRequest) -> SpeedSampleRead:
        service = DriveSessionService(db)
        try:
            sample = await service.record_speed(user_id, payload)
            return SpeedSampleRead.model_validate(sample)

        except ApplicationException:
            raise
        except Exception as e:
            logger.error(f"❌ Error recording speed for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to record speed sample"
            )

    @staticmethod
    async def get_history(user_id: str, db: AsyncSession) -> List[DriveSessionSummary]:
        return await DriveSessionService(db).list_history(user_id)

    @staticmethod
    async def get_active_session(user_id: str, db: AsyncSession) -> Optional[DriveSessionRead]:
        session = await DriveSessionService(db).get_active_session(user_id)
        if session is None:
            return None
        return DriveSessionRead.model_validate(session)

    @staticmethod
    async def get_samples(user_id: str, db: AsyncSession, session_id: str) -> List[SpeedSampleRead]:
        samples = await DriveSessionService(db).list_samples(user_id, session_id)
        return [SpeedSampleRead.model_validate(s) for s in samples]
