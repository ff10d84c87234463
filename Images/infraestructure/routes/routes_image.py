# Images/infraestructure/routes/routes_image.py
import logging
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.datastructures import UploadFile
from Images.domain.errors import ImageValidationError
from Images.infraestructure.views.gallery_view import templates

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Images"])


def _fail(status_code: int, message: str):
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@router.post("/upload")
async def upload_image(request: Request):
    """
    Recibe una imagen multipart en el campo `image` y la guarda en memoria.
    Al salir del `async with` el formulario cierra y borra los temporales,
    haya o no error.
    """
    controller = request.app.state.image_controller
    async with request.form() as form:
        parts = form.getlist("image")
        if not parts or not all(isinstance(part, UploadFile) for part in parts):
            return _fail(400, "No image file provided")
        if len(parts) > 1:
            return _fail(400, "Only one image file is allowed")

        upload = parts[0]
        try:
            content = await controller.read_upload(upload)
            return await controller.save_image(content, upload.content_type)
        except ImageValidationError as e:
            return _fail(e.status_code, str(e))
        except Exception as e:
            logger.exception(f"❌ Upload Error: {e}")
            return _fail(500, "Upload failed")


@router.get("/images")
async def list_images(request: Request):
    """Todas las imágenes en base64, la más reciente primero."""
    controller = request.app.state.image_controller
    try:
        return await controller.list_images()
    except Exception as e:
        logger.exception(f"❌ Error fetching images: {e}")
        return _fail(500, "Failed to fetch images")


@router.get("/", response_class=HTMLResponse)
async def gallery(request: Request):
    """Galería HTML con cada imagen embebida como data URI."""
    controller = request.app.state.image_controller
    try:
        images = await controller.gallery_images()
    except Exception as e:
        logger.exception(f"❌ Error rendering gallery: {e}")
        return templates.TemplateResponse(
            request,
            "gallery.html",
            {"images": [], "error": "Could not load images, try again later."},
            status_code=500,
        )
    return templates.TemplateResponse(request, "gallery.html", {"images": images, "error": None})
