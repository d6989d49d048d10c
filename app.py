"""
Application entry point for the todo tracker.

Runs ``todo_tracker.main:app`` with uvicorn using the host and port from
settings.
"""

import logging

from todo_tracker.main import app
from todo_tracker.utils.config import get_settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    logger.info(f"Starting todo tracker on {settings.HOST}:{settings.PORT}")

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
