# core/config.py
import os
from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient
from odmantic import AIOEngine

load_dotenv()

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/doorbell"
DEFAULT_DATABASE = "doorbell"


def get_mongodb_uri() -> str:
    # MONGO_URI es el nombre usado por los despliegues anteriores
    return os.getenv("MONGODB_URI") or os.getenv("MONGO_URI") or DEFAULT_MONGODB_URI


def get_database_name(uri: str) -> str:
    """Toma el nombre de la base desde MONGODB_DATABASE o desde la URI."""
    name = os.getenv("MONGODB_DATABASE")
    if name:
        return name
    path = uri.split("://", 1)[-1].split("/", 1)
    if len(path) == 2:
        db_name = path[1].split("?")[0]
        if db_name:
            return db_name
    return DEFAULT_DATABASE


def get_mongo_engine() -> AIOEngine:
    uri = get_mongodb_uri()
    client = AsyncIOMotorClient(uri)
    return AIOEngine(client=client, database=get_database_name(uri))


def get_server_config():
    return {
        "host": os.getenv("HOST", "0.0.0.0"),
        "port": int(os.getenv("PORT", "5000")),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
    }


def get_cors_origins():
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_max_upload_bytes() -> int:
    return int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
