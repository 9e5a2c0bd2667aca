"""
MongoDB connection management.

The data layer itself only needs a database handle; these helpers are the
default way to obtain one.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from gamedata.config import get_settings

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = MongoClient(settings.mongo_uri)
        logger.debug("Created MongoDB client")
    return _mongo_client


def get_database(db_name: Optional[str] = None) -> Database:
    """Get a MongoDB database by name, defaulting to the configured one."""
    client = get_mongo_client()
    return client[db_name or get_settings().mongo_database]


def drop_database(database: Database) -> None:
    """Drop every collection of a database."""
    database.client.drop_database(database.name)
    logger.info(f"Dropped database {database.name}")


def close_connections() -> None:
    """Close the MongoDB connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
