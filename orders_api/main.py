import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .config import Settings, get_settings
from .database import Database
from .exceptions import OrdersError

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # Startup
    logger.info(f"🚀 Starting {settings.app_name}...")
    try:
        if settings.create_tables:
            await database.create_tables()
    except Exception as e:
        logger.error(f"❌ Failed to start {settings.app_name}: {e}")
        raise
    logger.info(f"🎉 {settings.app_name} started successfully!")

    yield

    # Shutdown
    logger.info(f"🛑 Shutting down {settings.app_name}...")
    await database.dispose()
    logger.info(f"👋 {settings.app_name} shut down complete")


async def orders_error_handler(request: Request, exc: OrdersError):
    if exc.status_code >= 500:
        logger.error(f"❌ {exc.error}: {exc.detail}", exc_info=exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "detail": exc.detail}
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "detail": jsonable_encoder(exc.errors())}
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"❌ Unhandled exception: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred"
        }
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="CRUD service for orders and their line items",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    app.add_exception_handler(OrdersError, orders_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(api_router)
    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )
