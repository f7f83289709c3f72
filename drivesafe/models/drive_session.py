from sqlalchemy import Column, String, DateTime, Integer, Float, Enum as SQLEnum, Index, text
from datetime import datetime
from drivesafe.database.base import Base
from drivesafe.enums import SessionStatus
import cuid


class DriveSession(Base):
    """
    A single drive of one user, from the "start" event to the "end" event.
    Speed and duration statistics are filled in once, when the session is completed.
    """
    __tablename__ = "drive_sessions"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    user_id = Column(String(64), nullable=False, index=True)

    start_time = Column(DateTime, nullable=False)  # UTC
    end_time = Column(DateTime, nullable=True)  # UTC, set at close
    status = Column(
        SQLEnum(SessionStatus, name="drive_session_status"),
        nullable=False,
        default=SessionStatus.ACTIVE
    )

    # Statistics
    max_speed = Column(Float, nullable=False, default=0.0)
    avg_speed = Column(Float, nullable=False, default=0.0)
    distance_traveled = Column(Float, nullable=False, default=0.0)  # supplied by the client
    duration_minutes = Column(Integer, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("ix_drive_session_user_start", "user_id", "start_time"),
        # At most one ACTIVE session per user
        Index(
            "uq_drive_session_user_active",
            "user_id",
            unique=True,
            postgresql_where=text("status = 'ACTIVE'"),
            sqlite_where=text("status = 'ACTIVE'"),
        ),
    )
