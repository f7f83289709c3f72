"""
Drive Session API Schemas
"""
from pydantic import BaseModel, Field, validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone

from drivesafe.enums import SessionEvent, SessionStatus


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Columns are naive UTC
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class CamelModel(BaseModel):
    """Base schema speaking the mobile client's camelCase JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# Request schemas
class SessionLogRequest(CamelModel):
    """Start or end event sent by the app when drive mode is toggled."""
    event: SessionEvent = Field(..., description="start or end (case-insensitive)")
    timestamp: Optional[datetime] = Field(None, description="Client time of the event, informational only")
    distance_traveled: Optional[float] = Field(
        None,
        description="Distance measured by the client, stored with the end event"
    )

    @validator('event', pre=True)
    def normalize_event(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "event": "start",
                "timestamp": "2025-10-22T19:41:00.000Z"
            }
        }


class SpeedSampleRequest(CamelModel):
    """Single speed reading"""
    speed: float = Field(..., description="Speed in km/h")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timestamp: datetime = Field(..., description="ISO 8601 capture time on the device")

    @validator('timestamp')
    def normalize_timestamp(cls, v):
        return _to_naive_utc(v)

    class Config:
        json_schema_extra = {
            "example": {
                "speed": 42.5,
                "latitude": 6.5244,
                "longitude": 3.3792,
                "timestamp": "2025-10-22T19:41:02.000Z"
            }
        }


# Response schemas
class DriveSessionRead(CamelModel):
    id: str
    user_id: str
    start_time: datetime
    end_time: Optional[datetime]
    status: SessionStatus
    max_speed: float
    avg_speed: float
    distance_traveled: float
    duration_minutes: Optional[int]


class DriveSessionSummary(CamelModel):
    """History entry; never carries sample-level detail"""
    id: str
    start_time: datetime
    end_time: Optional[datetime]
    max_speed: float
    avg_speed: float
    distance_traveled: float
    duration_minutes: Optional[int]
    status: SessionStatus


class SpeedSampleRead(CamelModel):
    id: str
    session_id: str
    speed: float
    latitude: Optional[float]
    longitude: Optional[float]
    timestamp: datetime
