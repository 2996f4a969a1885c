"""
Database connection management
"""

import logging
from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from users_api.config.settings import MONGODB_URI, MONGODB_DEFAULT_DATABASE, MONGODB_TIMEOUT_MS
from users_api.models.user import User

logger = logging.getLogger(__name__)

# Global database client
db_client: Optional[AsyncIOMotorClient] = None


class DatabaseConnectionError(RuntimeError):
    """Raised when the store cannot be reached at startup"""


async def init_database(uri: str = MONGODB_URI, timeout_ms: int = MONGODB_TIMEOUT_MS) -> AsyncIOMotorClient:
    """Connect to MongoDB, verify the server answers and register document models"""
    global db_client
    client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=timeout_ms)

    try:
        # Test connection
        await client.admin.command("ping")
        database = client.get_default_database(default=MONGODB_DEFAULT_DATABASE)
        await init_beanie(database=database, document_models=[User])
    except Exception as e:
        client.close()
        logger.error(f"Database connection failed: {e}")
        raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e

    db_client = client
    logger.info(f"Database initialized successfully ({database.name})")
    return client


async def close_database():
    """Close the database client"""
    global db_client
    if db_client:
        db_client.close()
        db_client = None
    logger.info("Database connections closed")


def get_client() -> Optional[AsyncIOMotorClient]:
    """Get the database client instance"""
    return db_client
