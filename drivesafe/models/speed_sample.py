from sqlalchemy import Column, String, ForeignKey, DateTime, Float, Index
from datetime import datetime
from drivesafe.database.base import Base
import cuid


class SpeedSample(Base):
    """
    Speed/location reading captured by the phone during a drive.
    Units: km/h, decimal degrees
    """
    __tablename__ = "speed_samples"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    session_id = Column(String(25), ForeignKey("drive_sessions.id"), nullable=False, index=True)

    speed = Column(Float, nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    timestamp = Column(DateTime, nullable=False)  # capture time reported by the device

    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_speed_sample_session_time", "session_id", "timestamp"),
    )
