from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime
import time
import logging

from app.config.settings import settings
from app.core.exceptions import InventarioError
from app.shared.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "No se pudo completar la operación"


def _error_response(status_code: int, message: str, error_code: str, details=None) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        timestamp=datetime.now(),
        error_code=error_code,
        details=details
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response


def setup_exception_handlers(app: FastAPI):
    """Traducir errores de dominio y de validación al sobre ErrorResponse"""

    @app.exception_handler(InventarioError)
    async def inventario_error_handler(request: Request, exc: InventarioError):
        logger.warning(f"{request.method} {request.url.path} - {exc.error_code}: {exc.message}")
        return _error_response(exc.status_code, exc.message, exc.error_code, exc.details or None)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
            for error in exc.errors()
        ]
        return _error_response(400, "Datos de entrada inválidos", "VALIDATION_ERROR", {"errors": errors})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Error inesperado en {request.method} {request.url.path}")
        return _error_response(500, GENERIC_ERROR_MESSAGE, "INTERNAL_ERROR")
