"""
Main application module.

This module initializes and configures the FastAPI application.
``create_app`` wires the routes around any pair of repositories; the
module-level ``app`` connects the database-backed repositories at startup.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from todo_tracker.adapters.database.factory import DatabaseAdapterFactory
from todo_tracker.middleware.error_handler import add_error_handlers
from todo_tracker.repositories.base import LabelRepository, TodoRepository
from todo_tracker.repositories.label import LabelRepositoryForDb
from todo_tracker.repositories.todo import TodoRepositoryForDb
from todo_tracker.routes.label import router as label_router
from todo_tracker.routes.todo import router as todo_router
from todo_tracker.utils.config import get_settings
from todo_tracker.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    todo_repository: Optional[TodoRepository] = None,
    label_repository: Optional[LabelRepository] = None,
) -> FastAPI:
    """
    Build the FastAPI application around the given repositories.

    Args:
        todo_repository: Store used by the ``/todos`` routes
        label_repository: Store used by the ``/labels`` routes

    Returns:
        FastAPI: Configured application
    """
    settings = get_settings()

    app = FastAPI(
        title="Todo Tracker API",
        description="API for managing todos and their labels",
        version="0.1.0"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["Content-Type"],
    )

    add_error_handlers(app)

    app.include_router(todo_router)
    app.include_router(label_router)

    app.state.todo_repository = todo_repository
    app.state.label_repository = label_repository

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello World!"

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


@app.on_event("startup")
async def startup_event():
    """Connect the database-backed repositories on application startup."""
    try:
        setup_logging()
        logger.info("Starting up application...")
        adapter = await DatabaseAdapterFactory.get_adapter()
        app.state.todo_repository = TodoRepositoryForDb(adapter)
        app.state.label_repository = LabelRepositoryForDb(adapter)
        logger.info("Application startup complete")
    except Exception as e:
        logger.error(f"Error during startup: {str(e)}")
        raise


@app.on_event("shutdown")
async def shutdown_event():
    """Close the database connection on application shutdown."""
    logger.info("Shutting down application...")
    await DatabaseAdapterFactory.close_adapter()
    logger.info("Application shutdown complete")
