from Sensor.application.sensor_usecase import SensorUseCase
from Sensor.domain.schemas.sensor_schema import SensorReadingCreate

MSG_STORED = "Both sensors HIGH → data stored"
MSG_NOT_SAVED = "Not saved (both not HIGH)"

class SensorController:
    def __init__(self, usecase: SensorUseCase):
        self.usecase = usecase

    async def create_reading(self, data: SensorReadingCreate):
        saved = await self.usecase.record(data)
        if saved is None:
            return {"success": False, "message": MSG_NOT_SAVED}
        return {"success": True, "message": MSG_STORED}

    async def list_readings(self):
        readings = await self.usecase.list_all()
        return [reading.to_response() for reading in readings]
