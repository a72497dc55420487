"""Main entry point - runs the API server."""

import logging

import uvicorn

from curators.api.app import create_app
from curators.config import get_settings

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from settings."""
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main():
    """Main entry point."""
    configure_logging()
    settings = get_settings()

    logger.info("Starting Curators API...")
    logger.info(f"Environment: {settings.environment}")

    app = create_app()
    logger.info(f"Starting API server on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
