# Sensor/application/sensor_usecase.py
import logging
from typing import List, Optional
from Sensor.domain.entities.sensor_reading import SensorReading
from Sensor.domain.repositories.sensor_repository import SensorRepository
from Sensor.domain.schemas.sensor_schema import SensorReadingCreate

logger = logging.getLogger(__name__)

class SensorUseCase:
    def __init__(self, repository: SensorRepository):
        self.repository = repository

    async def record(self, data: SensorReadingCreate) -> Optional[SensorReading]:
        """
        Guarda la lectura solo si sonido y movimiento están en alto a la vez.
        Devuelve la lectura guardada, o None si no se cumplió la condición.
        """
        reading = SensorReading(sound=data.sound, motion=data.motion)
        if not reading.both_high:
            logger.info(f"⚠️ Sound: {data.sound}, Motion: {data.motion} → Not saved")
            return None

        saved = await self.repository.save(reading)
        logger.info("📡 Both sensors HIGH → Data saved ✅")
        return saved

    async def list_all(self) -> List[SensorReading]:
        return await self.repository.get_all()
