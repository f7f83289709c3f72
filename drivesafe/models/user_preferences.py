from sqlalchemy import Column, String, DateTime, Integer, Boolean, JSON
from datetime import datetime
from drivesafe.database.base import Base
import cuid


class UserPreferences(Base):
    """Per-user speed thresholds and notification settings for drive mode."""

    __tablename__ = "user_preferences"

    id = Column(String(25), primary_key=True, index=True, default=lambda: cuid.cuid())
    user_id = Column(String(64), nullable=False, unique=True, index=True)

    moderate_speed_threshold = Column(Integer, nullable=True)  # km/h
    high_speed_threshold = Column(Integer, nullable=True)  # km/h
    auto_enable_drive_mode = Column(Boolean, nullable=True)
    notification_exceptions = Column(JSON, nullable=True)  # contacts allowed through drive mode

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
