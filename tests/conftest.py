from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from fastapi.testclient import TestClient

from Images.application.image_usecase import ImageUseCase
from Images.domain.repositories.image_repository import ImageRepository
from Images.infraestructure.controllers.controller_image import ImageController
from Sensor.application.sensor_usecase import SensorUseCase
from Sensor.domain.repositories.sensor_repository import SensorRepository
from Sensor.infraestructure.controllers.controller_sensor import SensorController
from main import create_app

BASE_TIME = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


class _Clock:
    """Each call is one second after the previous one, so inserts are strictly ordered."""

    def __init__(self):
        self._ticks = count()

    def __call__(self):
        return BASE_TIME + timedelta(seconds=next(self._ticks))


class InMemorySensorRepository(SensorRepository):
    def __init__(self):
        self.items = []
        self.clock = _Clock()

    async def save(self, reading):
        stored = reading.model_copy(update={
            "id": f"sensor-{len(self.items) + 1}",
            "timestamp": self.clock(),
        })
        self.items.append(stored)
        return stored

    async def get_all(self):
        return sorted(self.items, key=lambda r: r.timestamp, reverse=True)


class InMemoryImageRepository(ImageRepository):
    def __init__(self):
        self.items = []
        self.clock = _Clock()

    async def save(self, image):
        stored = image.model_copy(update={
            "id": f"image-{len(self.items) + 1}",
            "timestamp": self.clock(),
        })
        self.items.append(stored)
        return stored

    async def get_all(self):
        return sorted(self.items, key=lambda i: i.timestamp, reverse=True)


class BrokenSensorRepository(SensorRepository):
    async def save(self, reading):
        raise ConnectionError("mongo down")

    async def get_all(self):
        raise ConnectionError("mongo down")


class BrokenImageRepository(ImageRepository):
    async def save(self, image):
        raise ConnectionError("mongo down")

    async def get_all(self):
        raise ConnectionError("mongo down")


def build_client(sensor_repo, image_repo, max_upload_bytes=1024 * 1024):
    app = create_app(lifespan_handler=None)
    app.state.sensor_controller = SensorController(SensorUseCase(sensor_repo))
    app.state.image_controller = ImageController(ImageUseCase(image_repo, max_bytes=max_upload_bytes))
    return TestClient(app)


@pytest.fixture
def sensor_repo():
    return InMemorySensorRepository()


@pytest.fixture
def image_repo():
    return InMemoryImageRepository()


@pytest.fixture
def client(sensor_repo, image_repo):
    return build_client(sensor_repo, image_repo)


@pytest.fixture
def broken_client():
    return build_client(BrokenSensorRepository(), BrokenImageRepository())
