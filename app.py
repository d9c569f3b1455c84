"""
Application entry point for the passenger service.

Loads environment variables from .env, configures logging and serves the
FastAPI application with uvicorn.
"""

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from passenger_service.main import app  # noqa: E402
from passenger_service.utils.config import get_settings  # noqa: E402
from passenger_service.utils.logger import setup_logging  # noqa: E402

logger = setup_logging()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(
        f"Starting passenger service on {settings.HOST}:{settings.PORT} (reload={settings.RELOAD})"
    )

    uvicorn.run(
        "app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level="info"
    )
