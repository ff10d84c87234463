from abc import ABC, abstractmethod
from typing import List
from Images.domain.entities.image import Image

class ImageRepository(ABC):
    @abstractmethod
    async def save(self, image: Image) -> Image: pass

    @abstractmethod
    async def get_all(self) -> List[Image]:
        """Todas las imágenes, la más reciente primero."""
