from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import insert, literal, String, Float, DateTime
from datetime import datetime
from typing import List, Optional
import cuid

from drivesafe.models.drive_session import DriveSession
from drivesafe.models.speed_sample import SpeedSample
from drivesafe.enums import SessionStatus


class SpeedSampleRepository:
    """Append-only access to speed_samples."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save_for_active_session(self, sample: SpeedSample) -> Optional[SpeedSample]:
        """
        Insert the sample only while its session is still ACTIVE.

        Runs as INSERT ... SELECT against drive_sessions, so a session closed
        after the caller looked it up gets no row. Returns None in that case.
        """
        sample_id = cuid.cuid()
        source = (
            select(
                literal(sample_id, String),
                DriveSession.id,
                literal(sample.speed, Float),
                literal(sample.latitude, Float),
                literal(sample.longitude, Float),
                literal(sample.timestamp, DateTime),
                literal(datetime.utcnow(), DateTime),
            )
            .where(DriveSession.id == sample.session_id)
            .where(DriveSession.status == SessionStatus.ACTIVE)
        )
        stmt = insert(SpeedSample).from_select(
            ["id", "session_id", "speed", "latitude", "longitude", "timestamp", "created_at"],
            source
        )

        try:
            result = await self.db.execute(stmt)
            if result.rowcount == 0:
                await self.db.rollback()
                return None
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        return await self.db.get(SpeedSample, sample_id)

    async def find_by_session(self, session_id: str) -> List[SpeedSample]:
        result = await self.db.execute(
            select(SpeedSample)
            .where(SpeedSample.session_id == session_id)
            .order_by(SpeedSample.timestamp)
        )
        return list(result.scalars().all())
