"""
Database configuration and connection management
"""
import logging
from typing import Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.server_api import ServerApi

from restaurant_api.core.config import Settings

logger = logging.getLogger(__name__)

FOODS_COLLECTION = "allFoods"
USERS_COLLECTION = "allUsers"
CART_COLLECTION = "allCartOrders"


class Database:
    """Long-lived handle to the restaurant database.

    The underlying ``MongoClient`` owns its connection pool and is safe to share
    across requests. It is created once at startup and closed at shutdown.
    """

    def __init__(self, client: MongoClient, name: str):
        self.client = client
        self.db = client[name]

    @classmethod
    def connect(cls, settings: Settings, client: Optional[MongoClient] = None) -> "Database":
        """Build the handle; a client passed in (e.g. in tests) is used as-is"""
        if client is None:
            client = MongoClient(settings.mongodb_uri, server_api=ServerApi("1", strict=True, deprecation_errors=True))
            client.admin.command("ping")
            logger.info("Pinged MongoDB deployment, connection established")
        return cls(client, settings.DB_NAME)

    @property
    def foods(self) -> Collection:
        return self.db[FOODS_COLLECTION]

    @property
    def users(self) -> Collection:
        return self.db[USERS_COLLECTION]

    @property
    def cart(self) -> Collection:
        return self.db[CART_COLLECTION]

    def ping(self) -> bool:
        """Check the deployment answers; used by the health endpoint"""
        try:
            self.client.admin.command("ping")
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            return False
        return True

    def close(self) -> None:
        self.client.close()
        logger.info("MongoDB client closed")


def get_db(request: Request) -> Database:
    """Get the database handle attached to the running app"""
    return request.app.state.database
