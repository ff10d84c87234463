# core/cors.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from core.config import get_cors_origins

logger = logging.getLogger(__name__)


def setup_cors(app: FastAPI):
    """Configurar CORS para que el dispositivo y cualquier frontend puedan llamar a la API"""

    origins = get_cors_origins()
    # Con comodín el navegador no acepta credenciales
    allow_credentials = "*" not in origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS", "HEAD"],
        allow_headers=["*"],
    )

    logger.info(f"🌐 CORS configurado, orígenes permitidos: {origins}")
