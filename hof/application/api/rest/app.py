import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from hof.application.api.v1.errors import map_hof_error, payload_error
from hof.application.api.v1.routes import admin, health, reports
from hof.application.di import create_container
from hof.config import Config, configure_logging
from hof.domain.shared.error import HofError, InfrastructureError
from hof.infrastructure.persistence.seed import ensure_schema
from hof.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container

    # Tables and the id counter must exist before the first request
    engine = await container.get(AsyncEngine)
    await ensure_schema(engine)

    yield

    # Disposes the engine (flushes SQLite) via the provider's finalizer
    await container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Settings to run with; read from env / HOF_CONFIG_FILE when omitted.
    """
    if config is None:
        # Pydantic Settings populates from env vars at runtime
        config = Config()

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.instrument_fastapi(app_instance)

    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(reports.router)
    if config.admin.enabled:
        app_instance.include_router(admin.router)
        logger.info("Admin interface enabled with %d key(s)", len(config.admin.keys))
    else:
        logger.info("Admin interface disabled")

    # Global error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(HofError)
    async def hof_error_handler(request: Request, exc: HofError):
        if isinstance(exc, InfrastructureError):
            logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
        http_exc = map_hof_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
            headers=http_exc.headers,
        )

    # Request validation failures use the same shape as InvalidPayloadError
    @app_instance.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        http_exc = map_hof_error(payload_error(exc))
        return JSONResponse(status_code=http_exc.status_code, content=http_exc.detail)

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
