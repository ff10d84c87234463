# Images/application/image_usecase.py
import logging
from typing import List, Optional
from Images.domain.entities.image import Image
from Images.domain.errors import EmptyImageError, ImageTooLargeError
from Images.domain.repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)

class ImageUseCase:
    def __init__(self, repository: ImageRepository, max_bytes: int):
        self.repository = repository
        self.max_bytes = max_bytes

    def ensure_size(self, size: Optional[int]):
        """Rechaza por el tamaño declarado antes de cargar el archivo en memoria."""
        if size is not None and size > self.max_bytes:
            raise ImageTooLargeError(size, self.max_bytes)

    async def upload(self, content: bytes, content_type: Optional[str]) -> Image:
        if not content:
            raise EmptyImageError()
        if len(content) > self.max_bytes:
            raise ImageTooLargeError(len(content), self.max_bytes)

        image = Image(image=content, content_type=content_type or "")
        saved = await self.repository.save(image)
        logger.info(f"📸 Imagen guardada ({len(content)} bytes, {saved.content_type})")
        return saved

    async def list_all(self) -> List[Image]:
        return await self.repository.get_all()
