# core_app.py
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from fastapi.middleware import Middleware
from core.middleware import RequestLoggingMiddleware
from core.config import settings
from core.exceptions import ClinicServiceError
from core.utils.setup import load_clinics_data
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Loaded once, read-only for the life of the process
    app.state.clinic_store = load_clinics_data(settings.CLINICS_DATA_PATH)
    yield


def create_app() -> FastAPI:
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        middleware=[Middleware(RequestLoggingMiddleware)]
    )

    @app.exception_handler(ClinicServiceError)
    async def clinic_service_exception_handler(request: Request, exc: ClinicServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected request parameters: %s", exc.errors())
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request parameters"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        key = "message" if exc.status_code == 404 else "error"
        return JSONResponse(
            status_code=exc.status_code,
            content={key: exc.detail},
            headers=getattr(exc, "headers", None),
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    return app
