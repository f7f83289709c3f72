"""
Preferences API Schemas
"""
from pydantic import Field
from typing import Optional, List

from drivesafe.enums import SpeedBand
from drivesafe.schemas.drive_session_schemas import CamelModel


class PreferencesRead(CamelModel):
    user_id: str
    moderate_speed_threshold: Optional[int]
    high_speed_threshold: Optional[int]
    auto_enable_drive_mode: Optional[bool]
    notification_exceptions: Optional[List[str]]


class PreferencesUpdate(CamelModel):
    """Only the non-null fields present in the request body are changed."""
    moderate_speed_threshold: Optional[int] = Field(None, ge=0, description="km/h")
    high_speed_threshold: Optional[int] = Field(None, ge=0, description="km/h")
    auto_enable_drive_mode: Optional[bool] = None
    notification_exceptions: Optional[List[str]] = Field(
        None,
        description="Contacts whose notifications are let through in drive mode"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "moderateSpeedThreshold": 30,
                "highSpeedThreshold": 60,
                "autoEnableDriveMode": True,
                "notificationExceptions": ["+2348012345678"]
            }
        }


class SpeedBandResponse(CamelModel):
    speed: float
    band: SpeedBand
