import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from src.core.config import settings
from src.core.database import Database, database as default_database
from src.core.observability import setup_logging
from src.core.response.handlers import (
    global_exception_handler,
    validation_exception_handler,
)
from src.apps.blog.container import BlogServices, include_blog_routers

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API around one database and one set of services."""
    database = database or default_database
    services = BlogServices.build(database.get_session)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
        if settings.CREATE_TABLES_ON_STARTUP:
            await database.create_all()
        await database.ping()
        await services.categories.ensure_default_category()
        logger.info("Database connection successful")
        yield
        logger.info("Shutting down")
        await database.disconnect()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_INFO,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, global_exception_handler)

    # Health routes go before the blog routers, which end in a catch-all /{post_id}
    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with health check."""
        return {"message": "Server is running", "status": "healthy", "version": settings.PROJECT_VERSION}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "message": "Service is running normally"}

    include_blog_routers(app, services)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload in development
        log_level="info",
    )
