# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import auth_router, favorites_router, health_router, notes_router
from .config import get_settings
from .core.exceptions import BookNotesError, StoreError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .database import Database

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store at startup and close it at shutdown."""
    logger.info(
        "Starting BookNotes application",
        extra={"version": settings.app_version, "environment": settings.environment, "debug": settings.debug},
    )

    database = Database(settings.database_url, echo=settings.database_echo)
    if settings.database_create_tables:
        try:
            await database.create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            await database.disconnect()
            raise
    app.state.database = database

    yield

    logger.info("Shutting down BookNotes application")
    await database.disconnect()
    logger.info("Database connections closed")


def _error_response(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def register_exception_handlers(app: FastAPI) -> None:
    """Map every failure to the single error envelope."""

    @app.exception_handler(BookNotesError)
    async def handle_app_error(request: Request, exc: BookNotesError):
        if isinstance(exc, StoreError):
            logger.error("Store error", extra={"path": request.url.path, **exc.context})
        elif exc.status_code >= 500:
            logger.error(exc.message, extra={"path": request.url.path, **exc.context})
        else:
            logger.debug(exc.message, extra={"path": request.url.path, "error": exc.error_code})
        return _error_response(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        details = [
            {"field": ".".join(str(p) for p in err.get("loc", ())[1:]), "issue": err.get("msg")}
            for err in exc.errors()
        ]
        return _error_response(400, "validation_error", "Validation failed", details)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, "http_error", str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error("Unhandled error", extra={"path": request.url.path}, exc_info=exc)
        return _error_response(500, "internal_error", "An unexpected error occurred")


app = FastAPI(
    title=settings.app_name,
    description="Personal notes and book favorites API",
    version=settings.app_version,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(favorites_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {"message": "BookNotes API"}


# Basic unprefixed health endpoint, no database involved
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    uvicorn.run("booknotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    run()
