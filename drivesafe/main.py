import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from drivesafe.exceptions.handlers import (
    application_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)
from drivesafe.exceptions.errors import ApplicationException
from drivesafe.database.base import Base
from drivesafe.database.connection import engine
from drivesafe.api.v1.routes import drive_session_router, preferences_router
from drivesafe.core.config import settings
from drivesafe.core.logger import get_logger

# Registers the tables on Base.metadata
import drivesafe.models  # noqa: F401

logger = get_logger("drivesafe-backend")

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 DriveSafe API is starting...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Application database tables ensured.")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise e

    yield

    await engine.dispose()
    logger.info("🛑 DriveSafe API is shutting down...")

app = FastAPI(
    title="DriveSafe Backend",
    version="1.0.0",
    lifespan=lifespan,
    description="""
    DriveSafe Backend API for the drive mode mobile application.

    ## Users

    Requests act for the user in the `userId` query parameter. When no user is given
    the configured default user is used.
    """,
    swagger_ui_parameters={
        "deepLinking": True,
        "displayRequestDuration": True,
        "tryItOutEnabled": True,
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(drive_session_router, prefix="/api")
app.include_router(preferences_router, prefix="/api")

@app.get("/", include_in_schema=False)
async def root():
    return {
        "message": "DriveSafe Backend API",
        "docs": "/docs",
        "development_mode": settings.IS_DEVELOPMENT,
        "version": "1.0.0"
    }

# Exception handlers
app.add_exception_handler(ApplicationException, application_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

if __name__ == "__main__":
    uvicorn.run(
        "drivesafe.main:app",
        host="127.0.0.1",
        port=8080,
        reload=settings.IS_DEVELOPMENT,
        limit_concurrency=100,
        timeout_keep_alive=30,
        timeout_graceful_shutdown=30
    )
