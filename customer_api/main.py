"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pathlib import Path
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from customer_api import __version__, catalog
from customer_api.config import Settings
from customer_api.responses import (
    DEFAULT_400,
    DEFAULT_500,
    STATUS_CODES,
    ResponseCode,
    envelope_response,
    validation_errors,
)
from customer_api.routers import config, pages

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """Log request and response details."""
        request_id = id(request)
        client = request.client.host if request.client else None

        start_time = time.time()
        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client": client
            }
        )

        try:
            response = await call_next(request)

            duration = time.time() - start_time
            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round(duration * 1000, 2)
                }
            )

            return response

        except Exception as exc:
            duration = time.time() - start_time
            logger.error(
                "Request failed",
                exc_info=True,
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round(duration * 1000, 2),
                    "error_type": type(exc).__name__,
                    "error_message": str(exc)
                }
            )
            # Re-raise to let exception handlers deal with it
            raise


settings = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    catalog.preload()

    logger.info(f"Application started: {settings.app_name}")
    logger.info(f"Debug mode: {settings.debug}")

    yield

    logger.info(f"Application shutdown: {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    description="""
    Customer Configuration API

    Read-only endpoints used by customer apps at start-up and while placing orders:

    * **Configuration**: business identity, currency formatting, legal pages, feature toggles,
      payment gateways and static enumerations in one payload
    * **Pages**: stored policy documents
    * **Zones**: resolve a coordinate to the service zone covering it
    * **Maps**: place autocomplete, distance matrix, place details and reverse geocoding
      forwarded to Google Maps with a server-side key

    ## Envelope

    Every response is wrapped as:

    ```json
    {"result": true, "response_code": "default_200", "message": "Successfully loaded", "data": {}, "errors": []}
    ```

    Missing required parameters return `400` with one entry per field in `errors`.
    Mapping provider responses are relayed unchanged in `data` with status `200`.
    """,
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "config",
            "description": "Customer configuration, pages, zone lookup and maps passthrough.",
        },
        {
            "name": "pages",
            "description": "Public policy pages linked from the configuration.",
        },
    ],
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)


# Mount public storage so image_base_url resolves
storage_path = Path(settings.storage_path)
storage_path.mkdir(parents=True, exist_ok=True)

app.mount(
    settings.storage_url,
    StaticFiles(directory=str(storage_path)),
    name="storage"
)


@app.get("/")
async def root() -> dict:
    """Root endpoint returning API information."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "status": "operational",
        "docs": "/api/docs"
    }


app.include_router(config.router, tags=["config"])
app.include_router(pages.router, tags=["pages"])


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app_name": settings.app_name
    }


# Global exception handlers

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report missing or invalid request fields as a 400 envelope."""
    errors = validation_errors(exc.errors())
    logger.info(
        f"Validation failed: {request.url.path} - "
        f"{', '.join(error.error_code for error in errors)}"
    )
    return envelope_response(DEFAULT_400, errors=errors, status_code=400)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap HTTP exceptions in the envelope."""
    if exc.status_code >= 500:
        logger.error(f"HTTP error {exc.status_code}: {request.url.path} - {exc.detail}")
    else:
        logger.info(f"HTTP {exc.status_code}: {request.url.path}")

    code = STATUS_CODES.get(
        exc.status_code,
        ResponseCode(f"default_{exc.status_code}", str(exc.detail), result=False)
    )
    return envelope_response(
        code,
        status_code=exc.status_code,
        message=exc.detail if isinstance(exc.detail, str) else None
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        f"Unhandled exception: {request.url.path}",
        exc_info=True,
        extra={
            "method": request.method,
            "url": str(request.url),
            "client": request.client.host if request.client else None
        }
    )

    if settings.debug:
        return envelope_response(
            DEFAULT_500,
            data={
                "error_type": type(exc).__name__,
                "error_message": str(exc)
            },
            status_code=500
        )
    return envelope_response(DEFAULT_500, status_code=500)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "customer_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
