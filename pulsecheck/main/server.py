"""
Server Entry Point - Main Layer

Runs the FastAPI application with uvicorn using the configured host and port.
"""

import uvicorn

from pulsecheck.main.config import get_settings
from pulsecheck.shared import get_logger

logger = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info(
        "server.starting",
        host=settings.app.host,
        port=settings.app.port,
        environment=settings.environment.value,
    )
    uvicorn.run(
        "pulsecheck.main.app:app",
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
