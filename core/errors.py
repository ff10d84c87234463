# core/errors.py
import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MENSAJES_HTTP = {
    400: "Bad request",
    404: "Not found",
    405: "Method not allowed",
    413: "Payload too large",
    500: "Internal server error",
    503: "Service unavailable",
}


def register_exception_handlers(app: FastAPI):
    """Manejadores globales: toda respuesta de error lleva {success, message}."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc: RequestValidationError):
        errors = []
        for error in exc.errors():
            errors.append({
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            })
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Invalid request", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "message": exc.detail if exc.detail else MENSAJES_HTTP.get(exc.status_code, "Unknown error"),
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc: Exception):
        logger.exception(f"Error no manejado en {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": MENSAJES_HTTP[500]},
        )
