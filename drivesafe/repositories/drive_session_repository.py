from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import update, desc
from datetime import datetime
from typing import List, Optional

from drivesafe.models.drive_session import DriveSession
from drivesafe.enums import SessionStatus


class DriveSessionRepository:
    """Queries and writes for drive_sessions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, session: DriveSession) -> DriveSession:
        """Insert or update a session. IntegrityError propagates after rollback."""
        self.db.add(session)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(session)
        return session

    async def find_active_by_user(self, user_id: str) -> Optional[DriveSession]:
        result = await self.db.execute(
            select(DriveSession)
            .where(DriveSession.user_id == user_id)
            .where(DriveSession.status == SessionStatus.ACTIVE)
        )
        return result.scalars().first()

    async def find_all_by_user(self, user_id: str) -> List[DriveSession]:
        result = await self.db.execute(
            select(DriveSession)
            .where(DriveSession.user_id == user_id)
            .order_by(desc(DriveSession.start_time))
        )
        return list(result.scalars().all())

    async def find_by_id_for_user(self, session_id: str, user_id: str) -> Optional[DriveSession]:
        result = await self.db.execute(
            select(DriveSession)
            .where(DriveSession.id == session_id)
            .where(DriveSession.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def complete(
        self,
        session: DriveSession,
        end_time: datetime,
        max_speed: float,
        avg_speed: float,
        duration_minutes: int,
        distance_traveled: Optional[float] = None
    ) -> Optional[DriveSession]:
        """
        Move an ACTIVE session to COMPLETED.

        The update only matches while the row is still ACTIVE, so of two
        concurrent closers exactly one wins. Returns None for the loser.
        """
        values = {
            "end_time": end_time,
            "status": SessionStatus.COMPLETED,
            "max_speed": max_speed,
            "avg_speed": avg_speed,
            "duration_minutes": duration_minutes,
            "updated_at": datetime.utcnow(),
        }
        if distance_traveled is not None:
            values["distance_traveled"] = distance_traveled

        result = await self.db.execute(
            update(DriveSession)
            .where(DriveSession.id == session.id)
            .where(DriveSession.status == SessionStatus.ACTIVE)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self.db.rollback()
            return None

        await self.db.commit()
        await self.db.refresh(session)
        return session
