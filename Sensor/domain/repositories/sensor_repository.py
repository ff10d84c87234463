from abc import ABC, abstractmethod
from typing import List
from Sensor.domain.entities.sensor_reading import SensorReading

class SensorRepository(ABC):
    @abstractmethod
    async def save(self, reading: SensorReading) -> SensorReading: pass

    @abstractmethod
    async def get_all(self) -> List[SensorReading]:
        """Todas las lecturas, la más reciente primero."""
