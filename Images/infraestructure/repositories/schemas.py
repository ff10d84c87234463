from odmantic import Model, Field
from datetime import datetime

class ImageDocument(Model):
    image: bytes
    content_type: str = Field(key_name="contentType")
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    model_config = {"collection": "images"}
