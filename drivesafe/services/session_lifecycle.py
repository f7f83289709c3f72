"""
Drive Session Lifecycle
Start/end state machine with the one-active-session-per-user rule.
"""

from sqlalchemy.exc import IntegrityError
from datetime import datetime
from typing import Callable, Optional

from drivesafe.models.drive_session import DriveSession
from drivesafe.enums import SessionStatus
from drivesafe.exceptions.errors import ConflictError, NotFoundError
from drivesafe.repositories import DriveSessionRepository, SpeedSampleRepository
from drivesafe.services.session_statistics import compute_session_statistics
from drivesafe.utils.user_locks import UserLockRegistry, user_locks
from drivesafe.core.logger import get_logger

logger = get_logger("session_lifecycle")


class SessionLifecycleEngine:
    """
    ACTIVE -> COMPLETED transitions for a user's drive sessions.

    `start` and `end` run their check-then-act under the user's lock. The
    partial unique index on drive_sessions and the conditional update in
    `DriveSessionRepository.complete` hold the same rules when several
    processes share one database.
    """

    def __init__(
        self,
        sessions: DriveSessionRepository,
        samples: SpeedSampleRepository,
        clock: Callable[[], datetime] = datetime.utcnow,
        locks: UserLockRegistry = user_locks
    ):
        self.sessions = sessions
        self.samples = samples
        self.clock = clock
        self.locks = locks

    async def start(self, user_id: str) -> DriveSession:
        async with self.locks.get(user_id):
            active = await self.sessions.find_active_by_user(user_id)
            if active:
                logger.warning(f"Start rejected for user {user_id}: session {active.id} is active")
                raise ConflictError("Active session already exists")

            session = DriveSession(
                user_id=user_id,
                start_time=self.clock(),
                status=SessionStatus.ACTIVE,
                max_speed=0.0,
                avg_speed=0.0,
                distance_traveled=0.0
            )
            try:
                session = await self.sessions.save(session)
            except IntegrityError:
                # Another instance inserted an ACTIVE row first
                logger.warning(f"Start rejected for user {user_id}: active-session constraint")
                raise ConflictError("Active session already exists")

        logger.info(f"Started drive session {session.id} for user {user_id}")
        return session

    async def end(self, user_id: str, distance_traveled: Optional[float] = None) -> DriveSession:
        async with self.locks.get(user_id):
            session = await self.sessions.find_active_by_user(user_id)
            if not session:
                raise NotFoundError("No active session found")

            end_time = self.clock()
            samples = await self.samples.find_by_session(session.id)
            stats = compute_session_statistics(
                session.start_time, end_time, (s.speed for s in samples)
            )

            completed = await self.sessions.complete(
                session,
                end_time=end_time,
                max_speed=stats.max_speed,
                avg_speed=stats.avg_speed,
                duration_minutes=stats.duration_minutes,
                distance_traveled=distance_traveled
            )
            if completed is None:
                # Closed by someone else between the read and the update
                raise NotFoundError("No active session found")

        logger.info(
            f"Completed drive session {completed.id} for user {user_id}: "
            f"{len(samples)} samples, max {stats.max_speed:.1f}, avg {stats.avg_speed:.1f}, "
            f"{stats.duration_minutes} min"
        )
        return completed
