"""
Restaurant ordering API - FastAPI application
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo import MongoClient

from restaurant_api.api import auth, cart, foods, users
from restaurant_api.core.config import Settings, get_settings
from restaurant_api.core.database import Database
from restaurant_api.core.logging_config import configure_logging
from restaurant_api.services.cleanup import purge_orphaned_cart_entries

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, client: Optional[MongoClient] = None) -> FastAPI:
    """Build the application; ``client`` replaces the MongoDB connection (tests)"""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database.connect(settings, client)
        app.state.database = database
        if settings.PURGE_ORPHANS_ON_STARTUP:
            purge_orphaned_cart_entries(database)
        logger.info(f"{settings.PROJECT_NAME} started")
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Backend API for the restaurant ordering web application",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Cookies only travel cross-origin with credentials enabled
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (auth.router, foods.router, users.router, cart.router):
        app.include_router(router, prefix=settings.API_V1_STR)

    @app.get(settings.API_V1_STR, response_class=PlainTextResponse)
    async def root():
        """API root endpoint"""
        return "restaurant server is running"

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        database_up = app.state.database.ping()
        return {
            "status": "healthy" if database_up else "degraded",
            "service": "restaurant-api",
            "database": "up" if database_up else "down",
        }

    return app
