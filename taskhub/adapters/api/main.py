# taskhub/adapters/api/main.py
import asyncio
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskhub import __version__
from taskhub.adapters.api.errors import error_body, register_exception_handlers
from taskhub.adapters.persistence.database import create_schema
from taskhub.shared.config import AppEnv
from taskhub.shared.container import Container, container as default_container
from taskhub.shared.logging_config import configure_logging
from taskhub.shared.telemetry import instrument_fastapi, setup_telemetry

# Import Routers
from taskhub.adapters.api.routers import health, tasks, users

logger = structlog.get_logger()

WIRED_MODULES = [
    "taskhub.adapters.api.dependencies",
]

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: Wires DI container, prepares the database.
    2. Shutdown: Closes the connection pool.
    """
    container: Container = app.state.container
    settings = container.settings()

    configure_logging(settings)
    setup_telemetry(settings)
    logger.info("app_startup", env=settings.APP_ENV.value)

    # 1. Wire the Container
    # We must explicitly tell the container which modules use the @inject decorator.
    container.wire(modules=WIRED_MODULES)

    # 2. Infrastructure Initialization
    # A broken DATABASE_URL aborts startup here instead of on the first request.
    if settings.DB_CREATE_SCHEMA:
        await create_schema(container.engine())

    yield

    # 3. Shutdown / Cleanup
    logger.info("app_shutdown")
    await container.engine().dispose()
    container.unwire()

def create_app(container: Optional[Container] = None) -> FastAPI:
    """Factory function to create the FastAPI application."""
    container = container or default_container
    settings = container.settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Users and their tasks (Hexagonal Architecture)",
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
    )
    app.state.container = container

    # Global Middleware
    origins = ["*"] if settings.APP_ENV != AppEnv.PRODUCTION else []
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    timeout = settings.REQUEST_TIMEOUT_SECS

    @app.middleware("http")
    async def request_timeout(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("request_timeout", path=request.url.path, timeout=timeout)
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content=error_body("SERVICE_UNAVAILABLE", "Request timed out"),
            )

    instrument_fastapi(app, settings)
    register_exception_handlers(app)

    # Register Routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(tasks.router)

    return app

# Entry point for local debugging (e.g. `python -m taskhub.adapters.api.main`)
if __name__ == "__main__":
    import uvicorn

    settings = default_container.settings()
    uvicorn.run(
        "taskhub.adapters.api.main:create_app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        factory=True,
    )
