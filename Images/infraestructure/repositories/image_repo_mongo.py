from odmantic import AIOEngine, query
from Images.domain.repositories.image_repository import ImageRepository
from Images.domain.entities.image import Image
from Images.infraestructure.repositories.schemas import ImageDocument

class ImageRepositoryMongo(ImageRepository):
    def __init__(self, engine: AIOEngine):
        self.engine = engine

    @staticmethod
    def _to_entity(doc: ImageDocument) -> Image:
        return Image(
            id=str(doc.id),
            image=doc.image,
            content_type=doc.content_type,
            timestamp=doc.timestamp,
        )

    async def save(self, image: Image):
        doc = ImageDocument(image=image.image, content_type=image.content_type)
        await self.engine.save(doc)
        return self._to_entity(doc)

    async def get_all(self):
        docs = await self.engine.find(ImageDocument, sort=query.desc(ImageDocument.timestamp))
        return [self._to_entity(doc) for doc in docs]
