"""Entry point for the Catalog API.

Starts the FastAPI application with Uvicorn on the host and port from
the environment (``HOST``/``PORT``, default ``0.0.0.0:3001``).  The
process runs until it is terminated.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from catalog_api.app.core.config import settings
from catalog_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    logger = logging.getLogger("catalog_api")
    base_url = f"http://localhost:{settings.port}"
    logger.info("Server running on %s", base_url)
    logger.info("API Status: %s/api/status", base_url)
    logger.info("Health Check: %s/api/health", base_url)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
