import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.api import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .db.session import create_db_and_tables, create_db_engine

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # The store handle lives exactly as long as the application
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    if settings.CREATE_TABLES_ON_STARTUP:
        create_db_and_tables(engine)
    app.state.engine = engine
    logger.info("Database engine ready")
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database engine disposed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Users, categories and tasks with JWT authentication",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Include API routers
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    def read_root():
        return {"message": "Welcome to the Aralchi API!"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()


def run() -> None:
    logger.info("Starting server on port %s", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
