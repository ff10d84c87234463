from pydantic import BaseModel, StrictBool

class SensorReadingCreate(BaseModel):
    """Cuerpo de POST /sensor. Solo se aceptan booleanos JSON reales."""
    sound: StrictBool
    motion: StrictBool
