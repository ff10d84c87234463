# Images/domain/entities/image.py
import base64
from datetime import datetime, timezone
from pydantic import BaseModel, field_validator
from typing import Optional

DEFAULT_CONTENT_TYPE = "application/octet-stream"

class Image(BaseModel):
    id: Optional[str] = None
    image: bytes
    content_type: str = DEFAULT_CONTENT_TYPE
    timestamp: Optional[datetime] = None

    @field_validator('content_type')
    @classmethod
    def validate_content_type(cls, v):
        if not v or len(v.strip()) == 0:
            return DEFAULT_CONTENT_TYPE
        return v.strip()

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v):
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def base64(self) -> str:
        return base64.b64encode(self.image).decode("ascii")

    @property
    def data_uri(self) -> str:
        return f"data:{self.content_type};base64,{self.base64}"

    def to_response(self) -> dict:
        return {
            "_id": self.id,
            "contentType": self.content_type,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "base64": self.base64,
        }
