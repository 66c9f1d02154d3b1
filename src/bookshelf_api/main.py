import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookshelf_api.api.errors import register_exception_handlers
from bookshelf_api.api.routes.authors import router as authors_router
from bookshelf_api.api.routes.books import router as books_router
from bookshelf_api.config import Settings, settings
from bookshelf_api.database import Database
from bookshelf_api.logging_config import configure_logging
from bookshelf_api.middleware import RequestContextMiddleware

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings

    configure_logging(
        level=app_settings.log_level,
        output_format=app_settings.log_format,
        service_name=app_settings.log_service_name,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database = Database(app_settings.database_url, echo=app_settings.database_echo)
        if app_settings.create_schema:
            database.create_schema()
        app.state.database = database
        logger.info("Application started")
        try:
            yield
        finally:
            database.dispose()
            logger.info("Application stopped")

    app = FastAPI(
        title=app_settings.app_name,
        description=app_settings.app_description,
        version=app_settings.app_version,
        docs_url=app_settings.docs_url,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    app.include_router(authors_router)
    app.include_router(books_router)
    return app


app = create_app()
