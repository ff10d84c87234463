# Sensor/infraestructure/routes/routes_sensor.py
import logging
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from Sensor.domain.schemas.sensor_schema import SensorReadingCreate

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Sensor"])

MSG_INVALID_FORMAT = "Invalid data format (expected boolean values)"


def _invalid_format():
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": MSG_INVALID_FORMAT}
    )


@router.post("/sensor")
async def post_sensor(request: Request):
    """Recibe {sound, motion} del timbre. Se valida aquí para responder 400 y no 422."""
    try:
        body = await request.json()
    except ValueError:
        return _invalid_format()

    try:
        payload = SensorReadingCreate.model_validate(body)
    except ValidationError:
        return _invalid_format()

    controller = request.app.state.sensor_controller
    try:
        return await controller.create_reading(payload)
    except Exception as e:
        logger.exception(f"❌ Error saving sensor data: {e}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Failed to save sensor data"}
        )


@router.get("/sensor-data")
async def get_sensor_data(request: Request):
    """Todas las lecturas guardadas, la más reciente primero."""
    controller = request.app.state.sensor_controller
    try:
        return await controller.list_readings()
    except Exception as e:
        logger.exception(f"❌ Error fetching sensor data: {e}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Failed to fetch sensor data"}
        )
