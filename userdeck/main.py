"""FastAPI application: main entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine

from userdeck.config import Settings, get_settings
from userdeck.core.exceptions import setup_exception_handlers
from userdeck.core.logging import configure_logging
from userdeck.core.middleware import setup_middleware
from userdeck.infrastructure.database import build_engine, build_session_factory, init_schema
from userdeck.infrastructure.storage import PhotoStorage
from userdeck.interfaces.api.pages import router as pages_router
from userdeck.interfaces.api.users import router as users_router
from userdeck.interfaces.deps import AppContext

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema before serving; dispose of the pool on shutdown."""
    context: AppContext = app.state.context
    logger.info("Starting Userdeck...", env=context.settings.NODE_ENV)

    init_schema(context.engine)
    logger.info("Server running on port %s", context.settings.PORT)

    yield

    context.engine.dispose()
    logger.info("Userdeck stopped")


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application and its context; raises StartupFailure if storage is unusable."""
    settings = settings or get_settings()
    engine = engine or build_engine(settings)

    storage = PhotoStorage(settings.STORAGE_PATH, settings.MAX_UPLOAD_BYTES)
    storage.ensure_directory()

    app = FastAPI(
        title="Userdeck",
        description="User registration with photo upload",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.context = AppContext(
        settings=settings,
        engine=engine,
        session_factory=build_session_factory(engine),
        storage=storage,
    )

    setup_middleware(app)
    setup_exception_handlers(app)

    app.mount("/uploads", StaticFiles(directory=str(storage.root)), name="uploads")
    app.include_router(pages_router)
    app.include_router(users_router)

    return app


def run() -> None:
    """Console entry point: serve on HOST:PORT with uvicorn."""
    settings = get_settings()
    configure_logging(settings)

    app = create_app(settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
