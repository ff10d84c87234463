# main.py
import locale
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
import uvicorn
from core.config import get_mongo_engine, get_server_config
from core.cors import setup_cors
from core.database_health import check_database_health
from core.errors import register_exception_handlers

from Images.infraestructure.dependencies import init_image_dependencies
from Sensor.infraestructure.dependencies import init_sensor_dependencies

from Images.infraestructure.routes.routes_image import router as image_router
from Sensor.infraestructure.routes.routes_sensor import router as sensor_router

server_config = get_server_config()
logging.basicConfig(
    level=server_config["log_level"],
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def configure_locale():
    """Usa el locale del entorno para los nombres de mes de la galería."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Locale del entorno no disponible, se usa C: {e}")


configure_locale()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Una sola conexión a MongoDB para todo el proceso
    engine = get_mongo_engine()
    app.state.engine = engine

    init_image_dependencies(app, engine)
    init_sensor_dependencies(app, engine)

    if await check_database_health(engine):
        logger.info("✅ MongoDB Connected")
    else:
        logger.error("❌ MongoDB no disponible, las peticiones fallarán hasta que responda")

    yield
    logger.info("Cerrando aplicación...")
    engine.client.close()


def create_app(lifespan_handler=lifespan) -> FastAPI:
    app = FastAPI(
        title="Smart Doorbell API",
        description="Recepción de imágenes y lecturas de sonido/movimiento del timbre",
        version="1.0.0",
        lifespan=lifespan_handler,
    )
    register_exception_handlers(app)
    setup_cors(app)

    app.include_router(image_router)
    app.include_router(sensor_router)

    @app.get("/ping")
    @app.head("/ping")
    def ping():
        """Endpoint SÍNCRONO ultra-ligero para verificar que la API está viva."""
        return {"pong": True}

    @app.get("/health")
    @app.head("/health")
    def health_check():
        return {
            "status": "healthy",
            "message": "API is running"
        }

    @app.get("/health/detailed")
    async def health_check_detailed(request: Request):
        """Incluye un ping real a MongoDB."""
        engine = getattr(request.app.state, "engine", None)
        database_ok = engine is not None and await check_database_health(engine)
        return {
            "status": "healthy" if database_ok else "degraded",
            "services": {
                "database": "connected" if database_ok else "unavailable"
            }
        }

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=server_config["host"],
        port=server_config["port"],
        log_level=server_config["log_level"].lower(),
        access_log=True,
    )
