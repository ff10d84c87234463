from odmantic import AIOEngine, query
from Sensor.domain.repositories.sensor_repository import SensorRepository
from Sensor.domain.entities.sensor_reading import SensorReading
from Sensor.infraestructure.repositories.schemas import SensorReadingDocument

class SensorRepositoryMongo(SensorRepository):
    def __init__(self, engine: AIOEngine):
        self.engine = engine

    @staticmethod
    def _to_entity(doc: SensorReadingDocument) -> SensorReading:
        return SensorReading(
            id=str(doc.id),
            sound=doc.sound,
            motion=doc.motion,
            timestamp=doc.timestamp,
        )

    async def save(self, reading: SensorReading):
        # El timestamp lo asigna el documento al momento de guardar
        doc = SensorReadingDocument(sound=reading.sound, motion=reading.motion)
        await self.engine.save(doc)
        return self._to_entity(doc)

    async def get_all(self):
        docs = await self.engine.find(
            SensorReadingDocument,
            sort=query.desc(SensorReadingDocument.timestamp),
        )
        return [self._to_entity(doc) for doc in docs]
