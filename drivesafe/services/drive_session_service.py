"""
Drive Session Service
Entry point for everything the app does with drive sessions.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from datetime import datetime
from typing import Callable, List, Optional

from drivesafe.models.drive_session import DriveSession
from drivesafe.models.speed_sample import SpeedSample
from drivesafe.repositories import DriveSessionRepository, SpeedSampleRepository
from drivesafe.schemas.drive_session_schemas import DriveSessionSummary, SpeedSampleRequest
from drivesafe.services.session_lifecycle import SessionLifecycleEngine
from drivesafe.exceptions.errors import NotFoundError
from drivesafe.utils.user_locks import UserLockRegistry, user_locks
from drivesafe.core.logger import get_logger

logger = get_logger("drive_session_service")


class DriveSessionService:
    """Service for starting, ending and querying drive sessions"""

    def __init__(
        self,
        db: AsyncSession,
        clock: Callable[[], datetime] = datetime.utcnow,
        locks: UserLockRegistry = user_locks
    ):
        self.db = db
        self.sessions = DriveSessionRepository(db)
        self.samples = SpeedSampleRepository(db)
        self.lifecycle = SessionLifecycleEngine(self.sessions, self.samples, clock=clock, locks=locks)

    async def start_session(self, user_id: str) -> DriveSession:
        return await self.lifecycle.start(user_id)

    async def end_session(self, user_id: str, distance_traveled: Optional[float] = None) -> DriveSession:
        return await self.lifecycle.end(user_id, distance_traveled=distance_traveled)

    async def record_speed(self, user_id: str, request: SpeedSampleRequest) -> SpeedSample:
        """Attach a speed reading to the user's active session. Values are stored as sent."""
        session = await self.sessions.find_active_by_user(user_id)
        if not session:
            raise NotFoundError("No active session found")

        sample = SpeedSample(
            session_id=session.id,
            speed=request.speed,
            latitude=request.latitude,
            longitude=request.longitude,
            timestamp=request.timestamp
        )
        stored = await self.samples.save_for_active_session(sample)
        if stored is None:
            # Session was closed after the lookup
            raise NotFoundError("No active session found")
        return stored

    async def list_history(self, user_id: str) -> List[DriveSessionSummary]:
        sessions = await self.sessions.find_all_by_user(user_id)
        return [DriveSessionSummary.model_validate(s) for s in sessions]

    async def get_active_session(self, user_id: str) -> Optional[DriveSession]:
        """None when the user is not driving; that is not an error."""
        return await self.sessions.find_active_by_user(user_id)

    async def list_samples(self, user_id: str, session_id: str) -> List[SpeedSample]:
        session = await self.sessions.find_by_id_for_user(session_id, user_id)
        if not session:
            raise NotFoundError("Drive session not found")
        return await self.samples.find_by_session(session.id)
