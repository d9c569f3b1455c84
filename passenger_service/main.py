"""
Main application module.

This module initializes and configures the FastAPI application.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from passenger_service import __version__
from passenger_service.middleware.error_handler import add_error_handlers
from passenger_service.routes.notifications import router as notifications_router
from passenger_service.routes.passengers import router as passengers_router
from passenger_service.utils.config import get_settings
from passenger_service.utils.database import init_db, close_db

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Passenger Service",
        description="API for managing passengers and their flight notifications",
        version=__version__
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)

    # Include routers
    app.include_router(passengers_router)
    app.include_router(notifications_router)

    @app.on_event("startup")
    async def startup_event():
        """Initialize services on application startup."""
        try:
            logger.info("Starting up application...")
            await init_db()
            logger.info("Application startup complete")
        except Exception as e:
            logger.error(f"Error during startup: {str(e)}")
            raise

    @app.on_event("shutdown")
    async def shutdown_event():
        """Clean up services on application shutdown."""
        try:
            logger.info("Shutting down application...")
            await close_db()
            logger.info("Application shutdown complete")
        except Exception as e:
            logger.error(f"Error during shutdown: {str(e)}")
            raise

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
