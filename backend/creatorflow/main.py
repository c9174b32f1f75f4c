"""
FastAPI entrypoint for the CreatorFlow backend application.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from creatorflow.core.config import settings
from creatorflow.core.errors import register_exception_handlers
from creatorflow.core.logging import init_logging
from creatorflow.api.router import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from creatorflow.db.init_db import initialize
    initialize()
    logger.info(f"{settings.APP_NAME} API started")
    yield


def create_app(run_init: bool = True) -> FastAPI:
    """Build the application. Tests pass ``run_init=False`` and manage their own schema."""
    init_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)

    application = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Backend API for influencer-marketing operations",
        version="1.0.0",
        lifespan=lifespan if run_init else None
    )

    # CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Include API routes
    application.include_router(api_router, prefix="/api")

    @application.get("/")
    async def root():
        """Health check endpoint."""
        return {"message": f"{settings.APP_NAME} API is running"}

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


app = create_app()
