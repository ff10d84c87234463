from odmantic import Model, Field
from datetime import datetime

class SensorReadingDocument(Model):
    sound: bool
    motion: bool
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    model_config = {"collection": "sensordatas"}
