# Sensor/domain/entities/sensor_reading.py
from datetime import datetime, timezone
from pydantic import BaseModel, StrictBool, field_validator
from typing import Optional

class SensorReading(BaseModel):
    id: Optional[str] = None
    sound: StrictBool
    motion: StrictBool
    timestamp: Optional[datetime] = None

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v):
        # Mongo devuelve fechas sin zona; siempre son UTC
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def both_high(self) -> bool:
        return self.sound and self.motion

    def to_response(self) -> dict:
        return {
            "_id": self.id,
            "sound": self.sound,
            "motion": self.motion,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
