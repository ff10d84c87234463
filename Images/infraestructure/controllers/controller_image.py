from typing import Optional
from Images.application.image_usecase import ImageUseCase

class ImageController:
    def __init__(self, usecase: ImageUseCase):
        self.usecase = usecase

    async def read_upload(self, upload) -> bytes:
        self.usecase.ensure_size(upload.size)
        # Un byte extra basta para detectar que se pasó del límite
        return await upload.read(self.usecase.max_bytes + 1)

    async def save_image(self, content: bytes, content_type: Optional[str]):
        await self.usecase.upload(content, content_type)
        return {"success": True, "message": "Image saved with timestamp"}

    async def list_images(self):
        images = await self.usecase.list_all()
        return [image.to_response() for image in images]

    async def gallery_images(self):
        return await self.usecase.list_all()
