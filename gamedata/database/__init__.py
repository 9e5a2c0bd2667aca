"""
Database module - MongoDB connection and collection definitions.
"""
from gamedata.database.connections import (
    get_mongo_client,
    get_database,
    drop_database,
    close_connections,
)
from gamedata.database.collections import (
    CollectionNames,
    CollectionRegistry,
    COLLECTIONS_MANIFEST,
    get_collection_registry,
)

__all__ = [
    "get_mongo_client",
    "get_database",
    "drop_database",
    "close_connections",
    "CollectionNames",
    "CollectionRegistry",
    "COLLECTIONS_MANIFEST",
    "get_collection_registry",
]
