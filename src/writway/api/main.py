"""
FastAPI application entry point.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from writway import __version__
from writway.config import get_settings
from writway.errors import HTTPError, RequestValidationFailed, WritWayError
from writway.logging_config import configure_logging

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"
PRODUCTION_ERROR_MESSAGE = "Something went wrong"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    configure_logging(settings)

    logger.info("application_starting")
    logger.info(
        "configuration_loaded",
        environment=settings.environment,
        debug=settings.debug,
        openai_enabled=settings.openai_enabled,
        model=settings.openai_model,
    )

    yield

    logger.info("application_shutting_down")


def _error_response(
    request: Request,
    exc: WritWayError,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    headers = dict(headers or {})
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        headers[REQUEST_ID_HEADER] = request_id

    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "data": None, "error": exc.to_dict()},
        headers=headers,
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="WritWay API",
        description="Claim intake and document generation for Ontario Small Claims Court",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # Request ID middleware
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    # Exception handlers
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        issues = [
            {
                "path": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.warning("request_validation_failed", issues=len(issues))
        return _error_response(
            request,
            RequestValidationFailed("Invalid request data", {"issues": issues}),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        logger.warning("http_error", status_code=exc.status_code, detail=exc.detail)
        return _error_response(
            request,
            HTTPError(exc.status_code, str(exc.detail)),
            headers=exc.headers,
        )

    @app.exception_handler(WritWayError)
    async def writway_exception_handler(
        request: Request,
        exc: WritWayError,
    ) -> JSONResponse:
        logger.error(
            "request_failed",
            error_type=type(exc).__name__,
            code=exc.code,
            error=exc.message,
        )
        return _error_response(request, exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
        )
        message = PRODUCTION_ERROR_MESSAGE if settings.is_production else str(exc)
        return _error_response(request, WritWayError(message))

    # Include routers
    from writway.api.routes import claim

    app.include_router(claim.router, prefix="/api/v1/claim", tags=["claim"])

    # Health check
    @app.get("/api/v1/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        from writway.services.llm_service import get_llm_service

        return {
            "status": "healthy",
            "services": get_llm_service().health_check(),
        }

    # Root endpoint
    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "name": "WritWay API",
            "version": __version__,
            "docs": "/docs",
        }

    return app


# Create default app instance
app = create_app()
