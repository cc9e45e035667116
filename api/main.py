"""
API Application Entry Point

Defines the FastAPI application for the send-guard service with middleware,
route registration and lifecycle logging.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import EnvironmentType, get_settings
from api.routes import scan
from api.utils.error_handlers import add_exception_handlers
from send_guard.utils.safe_logging import configure_safe_logging

logger = logging.getLogger("api")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application instance.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    configure_safe_logging(level=getattr(logging, settings.LOG_LEVEL))

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        docs_url="/docs" if settings.ENVIRONMENT != EnvironmentType.PRODUCTION else None,
        redoc_url="/redoc" if settings.ENVIRONMENT != EnvironmentType.PRODUCTION else None,
        debug=settings.DEBUG
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=settings.CORS_METHODS,
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    app.include_router(scan.router)

    @app.on_event("startup")
    async def startup_event():
        logger.info("Send guard API starting up")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Send guard API shutting down")

    logger.info(f"Application initialized in {settings.ENVIRONMENT.value} environment")
    return app


app = create_application()


@app.get("/health", tags=["Monitoring"])
async def health_check():
    """API health check endpoint."""
    return {"status": "healthy"}
